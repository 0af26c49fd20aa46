"""Warden — OWASP Top 10 review runner for web storefront backends."""

from __future__ import annotations

__version__ = "1.0.0"

from typing import TYPE_CHECKING, Any

from warden.models.finding import Category, Finding, Severity  # noqa: F401
from warden.models.report import Report, Summary  # noqa: F401

if TYPE_CHECKING:
    from warden.config import Settings


class Warden:
    """One-line security reviews.

    Usage::

        report = await Warden("http://localhost:5000").run()
        report = await Warden().skip("components").no_advisories().run()
    """

    def __init__(self, url: str | None = None, *, config: Any = None):
        self._url = url
        self._config = config
        self._only: list[str] = []
        self._skip: list[str] = []
        self._advisories: bool | None = None

    def only(self, *names: str) -> Warden:
        """Whitelist probe groups."""
        self._only.extend(names)
        return self

    def skip(self, *names: str) -> Warden:
        """Exclude probe groups."""
        self._skip.extend(names)
        return self

    def no_advisories(self) -> Warden:
        """Drop reminder findings that are recorded regardless of the target."""
        self._advisories = False
        return self

    @property
    def target(self) -> str:
        return self._url or self.settings().urls.server

    def settings(self) -> Settings:
        """Resolve config from path, object, or default, then apply overrides."""
        from warden.config import Settings

        if self._config is None:
            settings = Settings.load()
        elif isinstance(self._config, str):
            settings = Settings.load(self._config)
        else:
            settings = self._config

        update: dict[str, Any] = {}
        if self._url:
            update["urls"] = settings.urls.model_copy(update={"server": self._url})
        if self._advisories is not None:
            update["review"] = settings.review.model_copy(
                update={"advisories": self._advisories},
            )
        return settings.model_copy(update=update) if update else settings

    async def run(self) -> Report:
        """Execute the review."""
        from warden.core.runner import SecurityReviewRunner
        from warden.probes.registry import build_groups

        groups = build_groups(only=self._only or None, skip=self._skip or None)
        runner = SecurityReviewRunner(self.settings(), groups=groups)
        return await runner.run_security_review()
