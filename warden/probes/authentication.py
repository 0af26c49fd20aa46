"""A07 Identification and Authentication Failures."""

from __future__ import annotations

import logging
from typing import ClassVar

from warden.models.finding import Category, Finding
from warden.probes.base import GroupMeta, ProbeGroup, ReviewContext

logger = logging.getLogger(__name__)

REGISTER_PATH = "/api/auth/register"
LOGIN_PATH = "/api/auth/login"

WEAK_PASSWORDS = ("123456", "password", "admin", "test")

TEST_ACCOUNT = {"email": "test@example.com", "password": "testpassword"}


class AuthenticationGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="authentication",
        display_name="Authentication Failures",
        owasp="A07",
        description="Password policy, account enumeration and session token strength",
    )

    async def run(self, ctx: ReviewContext) -> None:
        await self.check_password_policy(ctx)
        await self.check_enumeration(ctx)
        await self.check_token(ctx)

    async def check_password_policy(self, ctx: ReviewContext) -> None:
        """Register with weak passwords; one accepted password is enough."""
        for password in WEAK_PASSWORDS:
            resp = await ctx.http.send("POST", REGISTER_PATH, json={
                "email": "test@example.com",
                "password": password,
                "firstName": "Test",
                "lastName": "User",
            })
            if resp is not None and resp.status == 201:
                ctx.record(Finding.high(
                    Category.AUTHENTICATION,
                    "Weak Password Policy",
                    description=f'Weak password "{password}" was accepted',
                    recommendation="Implement strong password policy with minimum requirements",
                ))
                return
        logger.info("Weak password registration - Properly rejected")

    async def check_enumeration(self, ctx: ReviewContext) -> None:
        """Two unknown accounts must produce the same login status."""
        first = await ctx.http.send("POST", LOGIN_PATH, json={
            "email": "nonexistent@example.com", "password": "anypassword",
        })
        second = await ctx.http.send("POST", LOGIN_PATH, json={
            "email": "anothernonexistent@example.com", "password": "anypassword",
        })
        if first is None or second is None:
            return
        if first.status == second.status:
            logger.info("Account enumeration - Properly handled")
            return
        ctx.record(Finding.medium(
            Category.AUTHENTICATION,
            "Account Enumeration Vulnerability",
            description=(
                f"Different responses for existing vs non-existing users "
                f"({first.status} vs {second.status})"
            ),
            recommendation="Use consistent error messages for authentication failures",
        ))

    async def check_token(self, ctx: ReviewContext) -> None:
        resp = await ctx.http.send("POST", LOGIN_PATH, json=TEST_ACCOUNT)
        if resp is None or not isinstance(resp.data, dict):
            return
        token = resp.data.get("token")
        if not isinstance(token, str) or not token:
            return
        if len(token) < ctx.settings.review.min_token_length:
            ctx.record(Finding.medium(
                Category.AUTHENTICATION,
                "Weak JWT Token",
                description=f"JWT token is only {len(token)} characters long",
                recommendation=(
                    "Ensure JWT tokens are properly signed and have appropriate expiration"
                ),
            ))
        else:
            logger.info("Session token length - Properly issued")
