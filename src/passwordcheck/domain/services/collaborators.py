"""Collaborators the password validator depends on.

The validator only knows these interfaces. Concrete strength oracles and
credential verifiers live in ``passwordcheck.infrastructure`` and are wired
in by the hook.
"""

from abc import ABC, abstractmethod


class StrengthOracleError(Exception):
    """Raised when an oracle cannot judge a password (missing data, I/O error)."""
    pass


class StrengthOracle(ABC):
    """Abstract base class for external dictionary/strength checks."""

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether the oracle's backing library is present."""
        ...

    @abstractmethod
    def check(self, password: str) -> str | None:
        """Judge a plaintext password.

        Returns:
            A human-readable reason when the password is weak or found in a
            dictionary, None otherwise.

        Raises:
            StrengthOracleError: If the oracle could not perform the check.
        """
        ...


class AbsentStrengthOracle(StrengthOracle):
    """Stand-in used when no strength library is installed. Never objects."""

    @property
    def available(self) -> bool:
        return False

    def check(self, password: str) -> str | None:
        return None


class CredentialVerifier(ABC):
    """Checks a candidate plaintext against an encrypted credential."""

    @abstractmethod
    def handles(self, encrypted_credential: str) -> bool:
        """Whether this verifier understands the credential's format."""
        ...

    @abstractmethod
    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        """Return True if ``candidate`` is the plaintext behind the credential."""
        ...


class NoCredentialVerifier(CredentialVerifier):
    """Understands no format, so nothing ever verifies."""

    def handles(self, encrypted_credential: str) -> bool:
        return False

    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        return False
