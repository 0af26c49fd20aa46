"""A02 Cryptographic Failures — JWT secret strength, HTTPS, secrets in responses."""

from __future__ import annotations

import logging
from typing import ClassVar

from warden.models.finding import Category, Finding, Severity
from warden.probes.base import (
    FindingTemplate,
    GroupMeta,
    Probe,
    ProbeGroup,
    ReviewContext,
    body_contains,
)

logger = logging.getLogger(__name__)

# Substrings of the secrets shipped in example .env files
PLACEHOLDER_MARKERS = ("your-super-secret", "change-this")

SENSITIVE_MARKERS = ("password", "secret", "key")


class CryptographicGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="cryptographic",
        display_name="Cryptographic Failures",
        owasp="A02",
        description="Checks signing-secret strength, HTTPS in production and leaked secrets",
    )

    probes: ClassVar[tuple[Probe, ...]] = (
        Probe(
            name="Health endpoint data exposure",
            path="/api/health",
            trigger=body_contains(*SENSITIVE_MARKERS),
            finding=FindingTemplate(
                type=Category.CRYPTOGRAPHIC,
                severity=Severity.MEDIUM,
                title="Sensitive Data in Response",
                description="Response may contain sensitive information",
                recommendation="Sanitize responses to remove sensitive data",
            ),
        ),
    )

    async def run(self, ctx: ReviewContext) -> None:
        for finding in self.check_configuration(ctx):
            ctx.record(finding)
        await super().run(ctx)

    @staticmethod
    def check_configuration(ctx: ReviewContext) -> list[Finding]:
        """Inspect the locally configured secret and server URL."""
        findings: list[Finding] = []
        secret = ctx.settings.jwt.secret
        min_length = ctx.settings.review.min_secret_length

        if len(secret) < min_length:
            findings.append(Finding.critical(
                Category.CRYPTOGRAPHIC,
                "Weak JWT Secret",
                description=f"JWT secret is only {len(secret)} characters long",
                recommendation=(
                    f"Use a JWT secret of at least {min_length} characters "
                    "with high entropy"
                ),
            ))

        if any(marker in secret for marker in PLACEHOLDER_MARKERS):
            findings.append(Finding.critical(
                Category.CRYPTOGRAPHIC,
                "Default JWT Secret",
                description="JWT secret appears to be a default value",
                recommendation="Change JWT secret to a unique, strong value",
            ))

        server = ctx.settings.urls.server
        if ctx.settings.is_production and not server.startswith("https"):
            findings.append(Finding.high(
                Category.CRYPTOGRAPHIC,
                "HTTP in Production",
                description=f"Server URL {server} is not using HTTPS in production",
                recommendation="Enable HTTPS and redirect all HTTP traffic to HTTPS",
            ))

        if not findings:
            logger.info("JWT secret and transport configuration - Properly configured")
        return findings
