"""Report models — summary, recommendations and the final review report."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from warden.models.finding import MAX_WEIGHT, Category, Finding, Severity


class Summary(BaseModel, frozen=True):
    total_findings: int = 0
    vulnerabilities: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    risk_score: float = Field(default=0.0, ge=0.0, le=100.0)

    @property
    def requires_attention(self) -> bool:
        return self.critical > 0 or self.high > 0


class Recommendation(BaseModel, frozen=True):
    priority: Literal["high", "medium"]
    category: Category
    count: int
    description: str
    action: str


class Report(BaseModel, frozen=True):
    """Outcome of a single review run. Built once, never mutated."""

    summary: Summary
    findings: tuple[Finding, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    target: str = ""
    duration: float | None = None

    @property
    def vulnerabilities(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.is_vulnerability)

    @classmethod
    def build(
        cls,
        findings: Sequence[Finding],
        *,
        target: str = "",
        duration: float | None = None,
    ) -> Report:
        return cls(
            summary=summarize(findings),
            findings=tuple(findings),
            recommendations=tuple(build_recommendations(findings)),
            target=target,
            duration=duration,
        )


def calculate_risk_score(findings: Sequence[Finding]) -> float:
    """Weighted average severity over all findings, scaled to 0-100.

    Each finding contributes its severity weight; the total is divided by the
    weight the same number of critical findings would carry.
    """
    if not findings:
        return 0.0
    total = sum(f.severity.weight for f in findings)
    return total * 100 / (len(findings) * MAX_WEIGHT)


def summarize(findings: Sequence[Finding]) -> Summary:
    counts = {sev: 0 for sev in Severity}
    for f in findings:
        counts[f.severity] += 1
    return Summary(
        total_findings=len(findings),
        vulnerabilities=counts[Severity.CRITICAL] + counts[Severity.HIGH],
        critical=counts[Severity.CRITICAL],
        high=counts[Severity.HIGH],
        medium=counts[Severity.MEDIUM],
        low=counts[Severity.LOW],
        risk_score=calculate_risk_score(findings),
    )


def build_recommendations(findings: Sequence[Finding]) -> list[Recommendation]:
    """Group findings by category, in order of first appearance."""
    by_category: dict[Category, list[Finding]] = {}
    for f in findings:
        by_category.setdefault(f.type, []).append(f)

    recommendations: list[Recommendation] = []
    for category, group in by_category.items():
        count = len(group)
        if any(f.is_vulnerability for f in group):
            recommendations.append(Recommendation(
                priority="high",
                category=category,
                count=count,
                description=f"Address {count} {category} security issues",
                action="Immediate action required",
            ))
        else:
            recommendations.append(Recommendation(
                priority="medium",
                category=category,
                count=count,
                description=f"Review {count} {category} security issues",
                action="Schedule for next security review",
            ))
    return recommendations
