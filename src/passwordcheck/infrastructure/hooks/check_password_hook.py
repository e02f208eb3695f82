"""Check-password hook for credential hosts.

The host calls the hook whenever a role's password is set or changed. The
hook returns None when the password is acceptable and raises
PasswordRejectedError otherwise.

Example:
    hook = PasswordCheckHook.from_settings(get_settings())

    try:
        hook("alice", "Ab3!defg", PasswordType.PLAINTEXT)
    except PasswordRejectedError as exc:
        return error_response(exc.sqlstate, exc.message)
"""

from datetime import datetime

from passwordcheck.core.config import PasswordCheckSettings
from passwordcheck.core.configuration.policy_store import PolicyConfigStore
from passwordcheck.core.exceptions import PasswordRejectedError
from passwordcheck.core.logging import LoggingContext, get_logger
from passwordcheck.domain.entities.evaluation import EvaluationInput, PasswordType, Rejected
from passwordcheck.domain.services.password_validator import PasswordPolicy, PasswordValidator
from passwordcheck.infrastructure.auth.password_hasher import DispatchingCredentialVerifier
from passwordcheck.infrastructure.strength import build_strength_oracle

logger = get_logger(__name__)


class PasswordCheckHook:
    """Adapts a PasswordPolicy to the host's check-password call shape."""

    def __init__(self, policy: PasswordPolicy, store: PolicyConfigStore) -> None:
        """Initialize the hook.

        Args:
            policy: The password policy strategy.
            store: Source of the current policy snapshot.
        """
        self.policy = policy
        self.store = store

    @classmethod
    def from_settings(cls, settings: PasswordCheckSettings) -> "PasswordCheckHook":
        """Build a hook with the default validator, oracle, verifiers and store.

        Args:
            settings: Loaded settings.

        Returns:
            A ready-to-install hook.
        """
        oracle = build_strength_oracle(min_score=settings.strength_min_score)
        if settings.use_external_strength_check and not oracle.available:
            logger.warning(
                "use_external_strength_check is enabled but zxcvbn is not installed, "
                "the check will be skipped"
            )
        return cls(
            policy=PasswordValidator(
                strength_oracle=oracle,
                credential_verifier=DispatchingCredentialVerifier(),
            ),
            store=PolicyConfigStore.from_settings(settings),
        )

    def __call__(
        self,
        username: str,
        password: str | bytes,
        password_type: PasswordType,
        valid_until: datetime | None = None,
    ) -> None:
        """Check a new password.

        Args:
            username: Name of the role being created or changed.
            password: New password, possibly already encrypted.
            password_type: Whether the password is plaintext or encrypted.
            valid_until: Password expiry; accepted but not checked.

        Raises:
            PasswordRejectedError: If the password violates the policy.
            PolicyCheckUnavailableError: If a mandatory strength check could not run.
        """
        config = self.store.snapshot()
        request = EvaluationInput(
            account_name=username,
            credential=password,
            is_encrypted=password_type.is_encrypted,
            valid_until=valid_until,
        )

        with LoggingContext(account_name=username, password_type=password_type.value):
            result = self.policy.evaluate(request, config)
            if isinstance(result, Rejected):
                logger.info("Password rejected", code=result.violation.code.value)
                raise PasswordRejectedError(result.violation)
            logger.debug("Password accepted")
