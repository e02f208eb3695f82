"""Process-wide policy configuration store.

Holds the current PolicyConfig snapshot and swaps it atomically on reload.
Each evaluation takes exactly one snapshot up front, so a reload racing an
evaluation can never mix old and new bounds.
"""

import threading
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from passwordcheck.core.config import PasswordCheckSettings
from passwordcheck.core.logging import get_logger
from passwordcheck.domain.entities.policy_config import PolicyConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class VersionedPolicy:
    """A policy snapshot and the store version that produced it."""

    version: int
    config: PolicyConfig


class PolicyConfigStore:
    """Thread-safe holder of the current policy snapshot."""

    def __init__(self, config: PolicyConfig | None = None) -> None:
        """Initialize the store.

        Args:
            config: Initial snapshot. Defaults to the built-in policy.
        """
        self._lock = threading.Lock()
        self._current = VersionedPolicy(version=1, config=config or PolicyConfig())

    @classmethod
    def from_settings(cls, settings: PasswordCheckSettings) -> "PolicyConfigStore":
        """Create a store seeded from loaded settings."""
        return cls(PolicyConfig.from_settings(settings))

    @property
    def version(self) -> int:
        return self._current.version

    def snapshot(self) -> PolicyConfig:
        """Return the current immutable policy snapshot."""
        return self._current.config

    def versioned_snapshot(self) -> VersionedPolicy:
        """Return the current snapshot together with its version."""
        return self._current

    def replace(self, config: PolicyConfig) -> VersionedPolicy:
        """Install a new snapshot.

        Args:
            config: The new policy.

        Returns:
            The installed snapshot with its new version.
        """
        with self._lock:
            installed = self._install(config)

        logger.info(
            "Password policy updated",
            version=installed.version,
            min_length=config.min_length,
            max_length=config.max_length,
            use_external_strength_check=config.use_external_strength_check,
        )
        return installed

    def update(self, **changes: Any) -> VersionedPolicy:
        """Change individual policy parameters.

        Args:
            **changes: PolicyConfig field values to replace.

        Returns:
            The installed snapshot.

        Raises:
            ValueError: If the resulting policy is out of range; the current
                snapshot is left untouched.
        """
        with self._lock:
            installed = self._install(self._current.config.with_changes(**changes))

        logger.info("Password policy updated", version=installed.version, changed=sorted(changes))
        return installed

    def reload(self, settings: PasswordCheckSettings | None = None) -> VersionedPolicy:
        """Re-read settings from the environment and install them.

        Args:
            settings: Already-loaded settings. When omitted, a fresh
                settings object is built from the environment.

        Returns:
            The installed snapshot.

        Raises:
            pydantic.ValidationError: If the environment holds invalid values;
                the current snapshot is left untouched.
        """
        if settings is None:
            try:
                settings = PasswordCheckSettings()
            except ValidationError:
                logger.error("Password policy reload rejected, keeping current policy")
                raise
        return self.replace(PolicyConfig.from_settings(settings))

    def _install(self, config: PolicyConfig) -> VersionedPolicy:
        # Caller must hold self._lock
        self._current = VersionedPolicy(version=self._current.version + 1, config=config)
        return self._current
