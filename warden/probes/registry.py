"""Ordered registry of probe groups."""

from __future__ import annotations

from collections.abc import Iterable

from warden.errors import UnknownGroupError
from warden.probes.access_control import AccessControlGroup
from warden.probes.authentication import AuthenticationGroup
from warden.probes.base import ProbeGroup
from warden.probes.components import ComponentsGroup
from warden.probes.cryptographic import CryptographicGroup
from warden.probes.data_integrity import DataIntegrityGroup
from warden.probes.injection import InjectionGroup
from warden.probes.insecure_design import InsecureDesignGroup
from warden.probes.misconfiguration import MisconfigurationGroup
from warden.probes.monitoring import MonitoringGroup
from warden.probes.ssrf import SsrfGroup

# Review order: A01 through A10
GROUP_CLASSES: tuple[type[ProbeGroup], ...] = (
    AccessControlGroup,
    CryptographicGroup,
    InjectionGroup,
    InsecureDesignGroup,
    MisconfigurationGroup,
    ComponentsGroup,
    AuthenticationGroup,
    DataIntegrityGroup,
    MonitoringGroup,
    SsrfGroup,
)

GROUP_NAMES: tuple[str, ...] = tuple(cls.meta.name for cls in GROUP_CLASSES)


def build_groups(
    only: Iterable[str] | None = None,
    skip: Iterable[str] | None = None,
) -> list[ProbeGroup]:
    """Instantiate groups in review order, filtered by name."""
    only_set = set(only or ())
    skip_set = set(skip or ())
    unknown = (only_set | skip_set) - set(GROUP_NAMES)
    if unknown:
        raise UnknownGroupError(f"Unknown probe groups: {', '.join(sorted(unknown))}")
    return [
        cls() for cls in GROUP_CLASSES
        if (not only_set or cls.meta.name in only_set) and cls.meta.name not in skip_set
    ]
