"""Exception hierarchy for review runs."""

from __future__ import annotations


class ReviewError(Exception):
    """Base class for errors that abort a review."""


class TargetUnreachableError(ReviewError):
    """The target server could not be reached (refused, reset, timed out)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ManifestError(ReviewError):
    """The dependency manifest could not be read or parsed."""


class UnknownGroupError(ReviewError):
    """A requested probe group name is not registered."""
