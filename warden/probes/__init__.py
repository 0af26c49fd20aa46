"""Probe groups — one module per OWASP Top 10 category."""

from warden.probes.base import GroupMeta, Probe, ProbeGroup, ReviewContext
from warden.probes.registry import GROUP_CLASSES, GROUP_NAMES, build_groups

__all__ = [
    "GROUP_CLASSES",
    "GROUP_NAMES",
    "GroupMeta",
    "Probe",
    "ProbeGroup",
    "ReviewContext",
    "build_groups",
]
