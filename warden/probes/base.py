"""Probe system — declarative probe descriptors and the ProbeGroup ABC."""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel

from warden.models.finding import Category, Finding, Severity
from warden.utils.http import ProbeResponse

if TYPE_CHECKING:
    from warden.config import Settings
    from warden.core.findings import FindingLog
    from warden.utils.http import AsyncHttpClient

logger = logging.getLogger(__name__)

# A trigger inspects a response and answers "is this a finding?".
# None means the response was inconclusive for this probe.
Trigger = Callable[[ProbeResponse], bool | None]


def status_is(code: int) -> Trigger:
    return lambda resp: resp.status == code


def status_not(code: int) -> Trigger:
    return lambda resp: resp.status != code


def body_lacks(*markers: str) -> Trigger:
    """Fires when a JSON body carries none of the markers (case-insensitive)."""

    def check(resp: ProbeResponse) -> bool | None:
        if not resp.is_json:
            return None
        body = resp.serialized.lower()
        return not any(m in body for m in markers)

    return check


def body_contains(*markers: str) -> Trigger:
    """Fires when the raw body mentions any of the markers."""

    def check(resp: ProbeResponse) -> bool | None:
        body = resp.serialized
        if not body:
            return None
        return any(m in body for m in markers)

    return check


class FindingTemplate(BaseModel, frozen=True):
    """Finding blueprint. Text fields may reference {name}, {status} and
    {expected}."""

    type: Category
    severity: Severity
    title: str
    description: str = ""
    recommendation: str = ""
    advisory: bool = False

    def render(self, **fields: Any) -> Finding:
        return Finding(
            type=self.type,
            severity=self.severity,
            title=self.title.format(**fields),
            description=self.description.format(**fields),
            recommendation=self.recommendation.format(**fields),
            tags=frozenset({"advisory"}) if self.advisory else frozenset(),
        )


@dataclass(frozen=True)
class Probe:
    """One request against the target plus the rule that classifies it."""

    name: str
    path: str
    finding: FindingTemplate
    trigger: Trigger
    method: str = "GET"
    payload: dict[str, Any] | None = None
    expected: int | None = None
    passed: str = "Properly handled"


@dataclass
class ReviewContext:
    """Everything a probe group needs for one run."""

    settings: Settings
    http: AsyncHttpClient
    findings: FindingLog
    state: dict[str, Any] = field(default_factory=dict)

    def record(self, finding: Finding) -> Finding | None:
        if finding.is_advisory and not self.settings.review.advisories:
            logger.debug("Advisory suppressed: %s", finding.title)
            return None
        return self.findings.record(finding)


class GroupMeta(BaseModel):
    """Metadata declaring which OWASP category a group covers."""

    name: str
    display_name: str
    owasp: str
    description: str = ""


class ProbeGroup(ABC):
    """Base class for all probe groups.

    Convention: one file in probes/, one class with `meta` and a static
    `probes` table. Groups with checks that do not fit the table override
    `run` and call `super().run(ctx)` for the declarative part.
    """

    meta: ClassVar[GroupMeta]
    probes: ClassVar[tuple[Probe, ...]] = ()

    async def run(self, ctx: ReviewContext) -> None:
        for probe in self.probes:
            await self.run_probe(probe, ctx)

    async def run_probe(self, probe: Probe, ctx: ReviewContext) -> Finding | None:
        """Send the probe, classify the response and record a finding if it fires."""
        resp = await ctx.http.send(probe.method, probe.path, json=probe.payload)
        if resp is None:
            return None
        verdict = probe.trigger(resp)
        if verdict is None:
            logger.debug("%s - inconclusive (status %s)", probe.name, resp.status)
            return None
        if not verdict:
            logger.info("%s - %s", probe.name, probe.passed)
            return None
        return ctx.record(probe.finding.render(
            name=probe.name, status=resp.status, expected=probe.expected,
        ))

    def __repr__(self) -> str:
        return f"<ProbeGroup {self.meta.name}>"
