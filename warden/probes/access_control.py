"""A01 Broken Access Control — protected endpoints requested without credentials."""

from __future__ import annotations

from typing import ClassVar

from warden.models.finding import Category, Severity
from warden.probes.base import FindingTemplate, GroupMeta, Probe, ProbeGroup, status_not

_UNAUTHORIZED = FindingTemplate(
    type=Category.ACCESS_CONTROL,
    severity=Severity.HIGH,
    title="Unauthorized access to {name}",
    description="Expected status {expected}, got {status}",
    recommendation="Ensure all protected endpoints require authentication",
)


def _protected(name: str, method: str, path: str, payload: dict | None = None) -> Probe:
    return Probe(
        name=name,
        method=method,
        path=path,
        payload=payload,
        expected=401,
        trigger=status_not(401),
        finding=_UNAUTHORIZED,
        passed="Properly protected",
    )


class AccessControlGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="access_control",
        display_name="Broken Access Control",
        owasp="A01",
        description="Protected endpoints must answer 401 without credentials",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        _protected("Admin endpoint without auth", "GET", "/api/admin/users"),
        _protected("User profile without auth", "GET", "/api/auth/profile"),
        _protected("Order creation without auth", "POST", "/api/orders", {"items": []}),
        _protected(
            "Payment without auth", "POST", "/api/payments/razorpay/order", {"amount": 100},
        ),
    )
