"""A09 Security Logging and Monitoring Failures."""

from __future__ import annotations

import asyncio
import logging
from typing import ClassVar

from warden.models.finding import Category, Finding
from warden.probes.base import GroupMeta, ProbeGroup, ReviewContext

logger = logging.getLogger(__name__)

RATE_LIMIT_HEADER = "X-RateLimit-Limit"

# Requests that should leave a trace in the target's security log
SECURITY_EVENTS = (
    ("Failed login attempt", "POST", "/api/auth/login",
     {"email": "test@example.com", "password": "wrongpassword"}),
    ("Unauthorized access attempt", "GET", "/api/admin/users", None),
)


class MonitoringGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="monitoring",
        display_name="Logging and Monitoring Failures",
        owasp="A09",
        description="Security events to review in target logs; rate limiting headers",
    )

    async def run(self, ctx: ReviewContext) -> None:
        # Server-side logs are not observable from here, so each event is
        # reported as a reminder to check them.
        for name, method, path, payload in SECURITY_EVENTS:
            await ctx.http.send(method, path, json=payload)
            ctx.record(Finding.medium(
                Category.LOGGING,
                f"Security Event Logging: {name}",
                description="Security events should be logged and monitored",
                recommendation="Implement comprehensive security event logging and monitoring",
                tags=frozenset({"advisory"}),
            ))
        await self.check_rate_limit(ctx)

    async def check_rate_limit(self, ctx: ReviewContext) -> None:
        """Fire a small parallel burst and look for rate limiting headers."""
        burst = ctx.settings.review.burst_size
        responses = await asyncio.gather(
            *(ctx.http.send("GET", "/api/health") for _ in range(burst))
        )
        answered = [r for r in responses if r is not None]
        if not answered:
            return
        throttled = sum(1 for r in answered if r.status == 429)
        logger.debug("Rate limit burst: %d/%d throttled", throttled, len(answered))
        if any(r.header(RATE_LIMIT_HEADER) is not None for r in answered):
            logger.info("Rate limiting headers - Present")
            return
        ctx.record(Finding.low(
            Category.LOGGING,
            "Rate Limiting Headers Missing",
            description="Rate limiting headers are not present in responses",
            recommendation="Add rate limiting headers to responses",
        ))
