"""A05 Security Misconfiguration — security headers, banners, debug output.

Expected header values follow the hardening profile applied by the storefront
backend (helmet defaults plus HSTS). A missing header is a medium finding; a
present header with a different value is low.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from warden.models.finding import Category, Finding
from warden.probes.base import GroupMeta, ProbeGroup, ReviewContext
from warden.utils.http import ProbeResponse

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"

REQUIRED_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000",
}

DEBUG_MARKERS = ("debug", "development", "stack")


class MisconfigurationGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="misconfiguration",
        display_name="Security Misconfiguration",
        owasp="A05",
        description="Checks security headers, X-Powered-By and production debug output",
    )

    async def run(self, ctx: ReviewContext) -> None:
        resp = await ctx.http.send("GET", HEALTH_PATH)
        if resp is None:
            return

        findings: list[Finding] = []
        findings.extend(self.check_security_headers(resp))
        findings.extend(self.check_info_disclosure(resp))
        if ctx.settings.is_production:
            findings.extend(self.check_debug_output(resp))

        if not findings:
            logger.info("Security headers - Properly configured")
        for finding in findings:
            ctx.record(finding)

    # ------------------------------------------------------------------
    # Header checks
    # ------------------------------------------------------------------

    @staticmethod
    def check_security_headers(resp: ProbeResponse) -> list[Finding]:
        findings: list[Finding] = []
        for name, expected in REQUIRED_HEADERS.items():
            value = resp.header(name)
            if not value:
                findings.append(Finding.medium(
                    Category.SECURITY_HEADERS,
                    f"Missing Security Header: {name}",
                    description=f"Required header {name} is not present",
                    recommendation=f"Add {name}: {expected} header",
                ))
            elif value != expected:
                findings.append(Finding.low(
                    Category.SECURITY_HEADERS,
                    f"Incorrect Security Header: {name}",
                    description=f"Header value is {value}, expected {expected}",
                    recommendation=f"Update {name} header to {expected}",
                ))
        return findings

    @staticmethod
    def check_info_disclosure(resp: ProbeResponse) -> list[Finding]:
        if not resp.header("X-Powered-By"):
            return []
        return [Finding.low(
            Category.INFORMATION_DISCLOSURE,
            "Server Information Disclosure",
            description=(
                f"X-Powered-By header reveals server technology "
                f"({resp.header('X-Powered-By')})"
            ),
            recommendation="Remove or hide X-Powered-By header",
        )]

    @staticmethod
    def check_debug_output(resp: ProbeResponse) -> list[Finding]:
        body = resp.serialized
        if not body or not any(m in body for m in DEBUG_MARKERS):
            return []
        return [Finding.medium(
            Category.INFORMATION_DISCLOSURE,
            "Debug Information in Production",
            description="Response contains debug or development information",
            recommendation="Remove debug information from production responses",
        )]
