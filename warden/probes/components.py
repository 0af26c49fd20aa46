"""A06 Vulnerable and Outdated Components — declared dependency versions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import ClassVar

from warden.config import ReviewSettings
from warden.errors import ManifestError
from warden.models.finding import Category, Finding
from warden.probes.base import GroupMeta, ProbeGroup, ReviewContext

logger = logging.getLogger(__name__)

# Packages whose declared versions are inspected
WATCHED_PACKAGES = ("express", "mongoose", "jsonwebtoken", "bcryptjs", "cors", "helmet")

# package -> version substrings with published advisories
VULNERABLE_VERSIONS: dict[str, tuple[str, ...]] = {
    "express": ("4.16",),
}

# A missing manifest at this path is skipped; any other path must exist
DEFAULT_MANIFEST: str = ReviewSettings.model_fields["manifest_path"].default


def load_dependencies(path: Path) -> dict[str, str]:
    """Merge dependencies and devDependencies of a package.json manifest."""
    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ManifestError(f"Cannot read dependency manifest {path}: {e}") from e
    if not isinstance(manifest, dict):
        raise ManifestError(f"Dependency manifest {path} is not a JSON object")
    deps: dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        entries = manifest.get(section) or {}
        if isinstance(entries, dict):
            deps.update({str(k): str(v) for k, v in entries.items()})
    return deps


def match_vulnerable(dependencies: dict[str, str]) -> list[tuple[str, str]]:
    """Return (package, version) pairs matching a known-vulnerable pattern."""
    hits: list[tuple[str, str]] = []
    for pkg in WATCHED_PACKAGES:
        version = dependencies.get(pkg)
        if not version:
            continue
        logger.info("Checking %s version %s", pkg, version)
        if any(p in version for p in VULNERABLE_VERSIONS.get(pkg, ())):
            hits.append((pkg, version))
    return hits


class ComponentsGroup(ProbeGroup):
    meta: ClassVar[GroupMeta] = GroupMeta(
        name="components",
        display_name="Vulnerable Components",
        owasp="A06",
        description="Matches declared dependency versions against known-bad patterns",
    )

    async def run(self, ctx: ReviewContext) -> None:
        configured = ctx.settings.review.manifest_path
        path = Path(configured)
        if path.exists():
            for pkg, version in match_vulnerable(load_dependencies(path)):
                ctx.record(Finding.medium(
                    Category.VULNERABLE_COMPONENTS,
                    f"Potentially Vulnerable Package: {pkg}",
                    description=(
                        f"Package {pkg} version {version} may have known vulnerabilities"
                    ),
                    recommendation="Update package to latest version and run npm audit",
                ))
        elif configured == DEFAULT_MANIFEST:
            logger.warning("Dependency manifest %s not found, skipping version checks", path)
        else:
            raise ManifestError(f"Configured dependency manifest {path} does not exist")

        ctx.record(Finding.low(
            Category.VULNERABLE_COMPONENTS,
            "Package Audit Required",
            description="Regular security audits of dependencies are needed",
            recommendation="Run npm audit regularly and update vulnerable packages",
            tags=frozenset({"advisory"}),
        ))
