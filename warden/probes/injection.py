"""A03 Injection — SQL, NoSQL and shell metacharacters in query strings."""

from __future__ import annotations

from typing import ClassVar

from warden.models.finding import Category, Severity
from warden.probes.base import FindingTemplate, GroupMeta, Probe, ProbeGroup, body_lacks

_INJECTED = FindingTemplate(
    type=Category.INJECTION,
    severity=Severity.HIGH,
    title="Potential {name}",
    description="Injection attempt may have succeeded",
    recommendation="Implement proper input validation and parameterized queries",
)

# A JSON answer without an error marker means the payload went through
_REJECTION_MARKERS = ("error", "exception")


def _injection(name: str, path: str) -> Probe:
    return Probe(
        name=name,
        path=path,
        trigger=body_lacks(*_REJECTION_MARKERS),
        finding=_INJECTED,
    )


class InjectionGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="injection",
        display_name="Injection",
        owasp="A03",
        description="Query-string payloads must be rejected with an error",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        _injection("SQL Injection in search", "/api/products?search=1' OR '1'='1"),
        _injection("NoSQL Injection in category", '/api/products?category={"$ne":null}'),
        _injection("Command Injection in user input", "/api/products?search=test; ls -la"),
    )
