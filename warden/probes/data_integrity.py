"""A08 Software and Data Integrity Failures — upload handling and input validation."""

from __future__ import annotations

from typing import ClassVar

from warden.models.finding import Category, Finding, Severity
from warden.probes.base import (
    FindingTemplate,
    GroupMeta,
    Probe,
    ProbeGroup,
    ReviewContext,
    status_is,
)

# Upload cases are described, not sent: the backend exposes no upload route.
UPLOAD_CASES = (
    "Executable file upload",
    "Script file upload",
    "Large file upload",
)

_ACCEPTED = FindingTemplate(
    type=Category.DATA_INTEGRITY,
    severity=Severity.HIGH,
    title="Input Validation Failure: {name}",
    description="Malicious input was accepted without proper validation",
    recommendation="Implement comprehensive input validation and sanitization",
)


class DataIntegrityGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="data_integrity",
        display_name="Data Integrity Failures",
        owasp="A08",
        description="Script and SQL payloads in create requests must be refused",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        Probe(
            name="XSS in product name",
            method="POST",
            path="/api/products",
            payload={"name": '<script>alert("XSS")</script>', "price": 100},
            trigger=status_is(201),
            finding=_ACCEPTED,
            passed="Properly rejected",
        ),
        Probe(
            name="SQL injection in email",
            method="POST",
            path="/api/auth/register",
            payload={"email": "test'; DROP TABLE users; --", "password": "password"},
            trigger=status_is(201),
            finding=_ACCEPTED,
            passed="Properly rejected",
        ),
    )

    async def run(self, ctx: ReviewContext) -> None:
        for case in UPLOAD_CASES:
            ctx.record(Finding.medium(
                Category.DATA_INTEGRITY,
                f"File Upload Security: {case}",
                description="File upload security should be tested",
                recommendation="Implement file type validation, size limits, and virus scanning",
                tags=frozenset({"advisory"}),
            ))
        await super().run(ctx)
