"""Data models for versions-check."""

from versions_check.models.check import BootstrapResult, BootstrapStatus, CheckResult, CheckStatus
from versions_check.models.pin import Conflict, ConflictKind, Pin
from versions_check.models.resolver import ConfigurationRef, ResolverInfo

__all__ = [
    "BootstrapResult",
    "BootstrapStatus",
    "CheckResult",
    "CheckStatus",
    "ConfigurationRef",
    "Conflict",
    "ConflictKind",
    "Pin",
    "ResolverInfo",
]
