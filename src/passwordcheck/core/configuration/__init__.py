"""Runtime policy configuration."""

from passwordcheck.core.configuration.policy_store import PolicyConfigStore, VersionedPolicy

__all__ = ["PolicyConfigStore", "VersionedPolicy"]
