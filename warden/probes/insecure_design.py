"""A04 Insecure Design — payment amounts outside business rules."""

from __future__ import annotations

from typing import ClassVar

from warden.models.finding import Category, Severity
from warden.probes.base import FindingTemplate, GroupMeta, Probe, ProbeGroup, status_is

_ACCEPTED = FindingTemplate(
    type=Category.BUSINESS_LOGIC,
    severity=Severity.MEDIUM,
    title="Business Logic Flaw: {name}",
    description="Request was accepted without proper validation",
    recommendation="Implement business logic validation for payment amounts",
)

PAYMENT_ORDER_PATH = "/api/payments/razorpay/order"


def _amount(name: str, amount: int) -> Probe:
    return Probe(
        name=name,
        method="POST",
        path=PAYMENT_ORDER_PATH,
        payload={"amount": amount, "currency": "INR"},
        trigger=status_is(200),
        finding=_ACCEPTED,
        passed="Properly rejected",
    )


class InsecureDesignGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="insecure_design",
        display_name="Insecure Design",
        owasp="A04",
        description="Payment orders with nonsensical amounts must be refused",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        _amount("Negative amount payment", -100),
        _amount("Zero amount payment", 0),
        _amount("Excessive amount payment", 999999999),
    )
