"""A10 Server-Side Request Forgery — url parameters aimed at internal resources."""

from __future__ import annotations

from typing import ClassVar

from warden.models.finding import Category, Severity
from warden.probes.base import FindingTemplate, GroupMeta, Probe, ProbeGroup, status_is

_FETCHED = FindingTemplate(
    type=Category.SSRF,
    severity=Severity.HIGH,
    title="Potential SSRF: {name}",
    description="Request may have accessed internal resources",
    recommendation="Implement URL validation and whitelist allowed domains",
)


def _ssrf(name: str, url: str) -> Probe:
    return Probe(
        name=name,
        path=f"/api/products?url={url}",
        trigger=status_is(200),
        finding=_FETCHED,
        passed="Properly blocked",
    )


class SsrfGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="ssrf",
        display_name="Server-Side Request Forgery",
        owasp="A10",
        description="Internal, metadata and file URLs must not be fetched",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        _ssrf("Internal network access", "http://localhost:22"),
        _ssrf("Cloud metadata access", "http://169.254.169.254/metadata"),
        _ssrf("File system access", "file:///etc/passwd"),
    )
