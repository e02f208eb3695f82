"""Password validation service.

Validates a new password against the configured policy. Plaintext passwords
are checked in a fixed order, stopping at the first failure:

- Minimum length
- Maximum length
- Minimum lower-case, upper-case, digit and special characters
- No disallowed characters
- External strength oracle (optional)

Encrypted credentials cannot be inspected, so the only check is whether the
account name itself verifies against them. Approval of an encrypted
credential is therefore weaker than approval of a plaintext one.
"""

from typing import Protocol

from passwordcheck.core.exceptions import PolicyCheckUnavailableError
from passwordcheck.core.logging import get_logger
from passwordcheck.domain.entities.evaluation import (
    APPROVED,
    EvaluationInput,
    EvaluationResult,
    Rejected,
    RuleViolation,
    ViolationCode,
)
from passwordcheck.domain.entities.policy_config import PolicyConfig
from passwordcheck.domain.services.character_classifier import (
    CharacterClass,
    classify,
    is_disallowed,
)
from passwordcheck.domain.services.collaborators import (
    AbsentStrengthOracle,
    CredentialVerifier,
    NoCredentialVerifier,
    StrengthOracle,
    StrengthOracleError,
)

logger = get_logger(__name__)


class PasswordPolicy(Protocol):
    """Strategy the credential host depends on."""

    def evaluate(self, request: EvaluationInput, config: PolicyConfig) -> EvaluationResult:
        ...


class PasswordValidator:
    """Evaluates passwords against a PolicyConfig.

    The validator holds no mutable state, so a single instance can serve
    concurrent evaluations. The configuration is passed in on every call.
    """

    def __init__(
        self,
        strength_oracle: StrengthOracle | None = None,
        credential_verifier: CredentialVerifier | None = None,
    ) -> None:
        """Initialize the password validator.

        Args:
            strength_oracle: External strength check (default: absent).
            credential_verifier: Verifies guesses against encrypted
                credentials (default: none, so every encrypted credential
                is approved).
        """
        self.strength_oracle = strength_oracle or AbsentStrengthOracle()
        self.credential_verifier = credential_verifier or NoCredentialVerifier()

    def evaluate(self, request: EvaluationInput, config: PolicyConfig) -> EvaluationResult:
        """Validate a password change request.

        Args:
            request: The credential presented by the host.
            config: Policy snapshot to evaluate against.

        Returns:
            APPROVED, or Rejected naming the first failed rule.

        Raises:
            PolicyCheckUnavailableError: If a mandatory strength check failed to run.
        """
        if request.is_encrypted:
            return self.validate_encrypted(request.account_name, request.credential_text)
        return self.validate(request.credential_text, config)

    def validate(self, password: str, config: PolicyConfig) -> EvaluationResult:
        """Validate a plaintext password.

        There is deliberately no password-equals-username rule on this path.

        Args:
            password: The plaintext password.
            config: Policy snapshot to evaluate against.

        Returns:
            APPROVED, or Rejected naming the first failed rule.
        """
        length = len(password)

        if length < config.min_length:
            return _reject(ViolationCode.TOO_SHORT, threshold=config.min_length)

        if length > config.max_length:
            return _reject(ViolationCode.TOO_LONG, threshold=config.max_length)

        counts = {cls: 0 for cls in CharacterClass}
        num_disallowed = 0
        for char in password:
            for cls in classify(char):
                counts[cls] += 1
            if is_disallowed(char, config.disallowed_set):
                num_disallowed += 1

        if counts[CharacterClass.LOWER] < config.min_lower:
            return _reject(ViolationCode.TOO_FEW_LOWER, threshold=config.min_lower)

        if counts[CharacterClass.UPPER] < config.min_upper:
            return _reject(ViolationCode.TOO_FEW_UPPER, threshold=config.min_upper)

        if counts[CharacterClass.DIGIT] < config.min_digit:
            return _reject(ViolationCode.TOO_FEW_DIGITS, threshold=config.min_digit)

        if counts[CharacterClass.SPECIAL] < config.min_special:
            return _reject(ViolationCode.TOO_FEW_SPECIAL, threshold=config.min_special)

        if num_disallowed > 0:
            return _reject(ViolationCode.CONTAINS_DISALLOWED, detail=config.disallowed_chars)

        # Last, as it is the only check that may be slow or touch the disk
        if config.use_external_strength_check:
            reason = self._check_strength(password, config)
            if reason is not None:
                return _reject(ViolationCode.WEAK_OR_DICTIONARY, detail=reason)

        return APPROVED

    def validate_encrypted(self, account_name: str, encrypted_credential: str) -> EvaluationResult:
        """Validate an already-encrypted credential.

        Only password-equals-username can be detected; composition rules
        need the plaintext and are skipped.

        Args:
            account_name: The account whose credential is changing.
            encrypted_credential: The encrypted credential.

        Returns:
            Rejected if the account name verifies against the credential,
            APPROVED otherwise.
        """
        if self.credential_verifier.verify(account_name, encrypted_credential, account_name):
            return _reject(ViolationCode.PASSWORD_EQUALS_USERNAME)
        return APPROVED

    def is_valid(self, request: EvaluationInput, config: PolicyConfig) -> bool:
        """Check if a request passes the policy.

        Args:
            request: The credential presented by the host.
            config: Policy snapshot to evaluate against.

        Returns:
            True if the password is approved, False otherwise.
        """
        return self.evaluate(request, config).is_approved

    def _check_strength(self, password: str, config: PolicyConfig) -> str | None:
        if not self.strength_oracle.available:
            logger.debug("External strength check requested but no oracle is installed")
            return None

        try:
            return self.strength_oracle.check(password)
        except StrengthOracleError as exc:
            if config.strength_check_mandatory:
                raise PolicyCheckUnavailableError(str(exc)) from exc
            logger.warning("External strength check failed, skipping it", error=str(exc))
            return None


def _reject(
    code: ViolationCode, threshold: int | None = None, detail: str | None = None
) -> Rejected:
    return Rejected(RuleViolation(code=code, threshold=threshold, detail=detail))
