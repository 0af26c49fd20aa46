"""Finding model — immutable security observations."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Severity(StrEnum):
    """Finding severity levels, ordered by criticality."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return SEVERITY_WEIGHTS[self]

    @property
    def label(self) -> str:
        return self.name

    @property
    def is_vulnerability(self) -> bool:
        return self in (Severity.CRITICAL, Severity.HIGH)


SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.CRITICAL: 10,
    Severity.HIGH: 7,
    Severity.MEDIUM: 4,
    Severity.LOW: 1,
}

MAX_WEIGHT = SEVERITY_WEIGHTS[Severity.CRITICAL]


class Category(StrEnum):
    """OWASP-aligned finding categories."""

    ACCESS_CONTROL = "access_control"
    CRYPTOGRAPHIC = "cryptographic"
    INJECTION = "injection"
    BUSINESS_LOGIC = "business_logic"
    SECURITY_HEADERS = "security_headers"
    INFORMATION_DISCLOSURE = "information_disclosure"
    VULNERABLE_COMPONENTS = "vulnerable_components"
    AUTHENTICATION = "authentication"
    DATA_INTEGRITY = "data_integrity"
    LOGGING = "logging"
    SSRF = "ssrf"


class Finding(BaseModel, frozen=True):
    """A single recorded observation of a potential security issue."""

    type: Category
    severity: Severity
    title: str
    description: str = ""
    recommendation: str = ""
    tags: frozenset[str] = frozenset()
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_vulnerability(self) -> bool:
        return self.severity.is_vulnerability

    @property
    def is_advisory(self) -> bool:
        return "advisory" in self.tags

    @classmethod
    def critical(cls, type: Category, title: str, **kw: Any) -> Finding:  # noqa: A002
        return cls(type=type, severity=Severity.CRITICAL, title=title, **kw)

    @classmethod
    def high(cls, type: Category, title: str, **kw: Any) -> Finding:  # noqa: A002
        return cls(type=type, severity=Severity.HIGH, title=title, **kw)

    @classmethod
    def medium(cls, type: Category, title: str, **kw: Any) -> Finding:  # noqa: A002
        return cls(type=type, severity=Severity.MEDIUM, title=title, **kw)

    @classmethod
    def low(cls, type: Category, title: str, **kw: Any) -> Finding:  # noqa: A002
        return cls(type=type, severity=Severity.LOW, title=title, **kw)
