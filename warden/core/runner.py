"""SecurityReviewRunner — runs the probe groups in order and builds the report."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from warden.core.findings import FindingLog
from warden.models.report import Report
from warden.probes.base import ReviewContext
from warden.probes.registry import build_groups
from warden.utils.http import AsyncHttpClient

if TYPE_CHECKING:
    from warden.config import Settings
    from warden.models.finding import Finding
    from warden.probes.base import ProbeGroup

logger = logging.getLogger(__name__)


class SecurityReviewRunner:
    """One OWASP Top 10 review against one target.

    Create a fresh runner per review; findings accumulate on the instance.

    Usage::

        runner = SecurityReviewRunner(Settings.load())
        report = await runner.run_security_review()
    """

    def __init__(
        self,
        settings: Settings,
        *,
        http: AsyncHttpClient | None = None,
        groups: list[ProbeGroup] | None = None,
    ) -> None:
        self.settings = settings
        self._http = http
        self._owns_http = http is None
        self.groups = groups if groups is not None else build_groups()
        self.log = FindingLog()

    @property
    def base_url(self) -> str:
        return self._http.base_url if self._http else self.settings.urls.server

    @property
    def findings(self) -> tuple[Finding, ...]:
        return self.log.findings

    async def run_security_review(self) -> Report:
        """Run every group in order. Any escaping error aborts the review."""
        logger.info("Starting OWASP Top 10 security review of %s", self.base_url)
        start = time.monotonic()

        http = self._http or AsyncHttpClient.from_settings(self.settings)
        ctx = ReviewContext(settings=self.settings, http=http, findings=self.log)
        try:
            for group in self.groups:
                logger.info("Testing %s (%s)...", group.meta.display_name, group.meta.owasp)
                await group.run(ctx)
        except Exception:
            logger.exception("Security review failed")
            raise
        finally:
            if self._owns_http:
                await http.close()

        report = self.generate_report(duration=time.monotonic() - start)
        logger.info(
            "OWASP security review complete: %d findings, risk score %.2f",
            report.summary.total_findings, report.summary.risk_score,
        )
        return report

    def generate_report(self, duration: float | None = None) -> Report:
        """Build a report from the findings recorded so far."""
        report = Report.build(self.log.findings, target=self.base_url, duration=duration)
        logger.info(
            "Security review report",
            extra={"report": report.model_dump(mode="json")},
        )
        return report
