"""Application ports - interfaces for adapters."""

from buildguard.application.ports.override_store import OverrideSnapshot, OverrideStore
from buildguard.application.ports.permission_checker import PermissionChecker

__all__ = [
    "OverrideSnapshot",
    "OverrideStore",
    "PermissionChecker",
]
