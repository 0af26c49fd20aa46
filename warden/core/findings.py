"""FindingLog — the single ordered record of a run's findings."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from warden.models.finding import Finding

logger = logging.getLogger(__name__)


class FindingLog:
    """Append-only, insertion-ordered findings for one review run.

    Vulnerabilities and recommendations are derived from this sequence when
    a report is built; nothing else keeps its own copy.
    """

    def __init__(self) -> None:
        self._findings: list[Finding] = []

    def record(self, finding: Finding) -> Finding:
        self._findings.append(finding)
        extra = {"finding": finding.model_dump(mode="json")}
        if finding.is_vulnerability:
            logger.error("%s: %s", finding.severity.label, finding.title, extra=extra)
        else:
            logger.warning("%s: %s", finding.severity.label, finding.title, extra=extra)
        return finding

    @property
    def findings(self) -> tuple[Finding, ...]:
        return tuple(self._findings)

    @property
    def vulnerabilities(self) -> tuple[Finding, ...]:
        return tuple(f for f in self._findings if f.is_vulnerability)

    def __iter__(self) -> Iterator[Finding]:
        return iter(tuple(self._findings))

    def __len__(self) -> int:
        return len(self._findings)
