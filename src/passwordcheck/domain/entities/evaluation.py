"""Evaluation request and result entities.

- EvaluationInput: One password check request from the credential host.
- RuleViolation: The single predicate that failed, with its parameters.
- Approved / Rejected: The two possible evaluation results.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union


class PasswordType(str, Enum):
    """Form in which the host presents a credential."""

    PLAINTEXT = "plaintext"
    MD5 = "md5"
    SCRAM_SHA_256 = "scram-sha-256"
    ARGON2 = "argon2"

    @property
    def is_encrypted(self) -> bool:
        return self is not PasswordType.PLAINTEXT


class ViolationCode(str, Enum):
    """Closed set of rejection reasons."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    TOO_FEW_LOWER = "too_few_lower"
    TOO_FEW_UPPER = "too_few_upper"
    TOO_FEW_DIGITS = "too_few_digits"
    TOO_FEW_SPECIAL = "too_few_special"
    CONTAINS_DISALLOWED = "contains_disallowed"
    PASSWORD_EQUALS_USERNAME = "password_equals_username"
    WEAK_OR_DICTIONARY = "weak_or_dictionary"


_MESSAGES = {
    ViolationCode.TOO_SHORT: "password is too short, it must be at least {threshold} characters long",
    ViolationCode.TOO_LONG: "password is too long, it must not be longer than {threshold} characters",
    ViolationCode.TOO_FEW_LOWER: "password must contain at least {threshold} lower-case characters",
    ViolationCode.TOO_FEW_UPPER: "password must contain at least {threshold} upper-case characters",
    ViolationCode.TOO_FEW_DIGITS: "password must contain at least {threshold} digits",
    ViolationCode.TOO_FEW_SPECIAL: "password must contain at least {threshold} special characters",
    ViolationCode.CONTAINS_DISALLOWED: "password must not contain any of the following characters:{detail}",
    ViolationCode.PASSWORD_EQUALS_USERNAME: "password must not equal user name",
    ViolationCode.WEAK_OR_DICTIONARY: "password is easily cracked: {detail}",
}


@dataclass(frozen=True)
class RuleViolation:
    """A failed predicate.

    Attributes:
        code: Which predicate failed.
        threshold: The configured bound, for length and class-count rules.
        detail: Disallowed characters or the strength oracle's explanation.
    """

    code: ViolationCode
    threshold: int | None = None
    detail: str | None = None

    @property
    def message(self) -> str:
        """Human-readable explanation naming the rule and its threshold."""
        return _MESSAGES[self.code].format(threshold=self.threshold, detail=self.detail)


@dataclass(frozen=True)
class EvaluationInput:
    """One password check request.

    Attributes:
        account_name: Name of the account being created or changed.
        credential: Plaintext password or an encrypted credential.
        is_encrypted: Whether ``credential`` is already encrypted.
        valid_until: Password expiry sent by the host; not used by any rule.
    """

    account_name: str
    credential: str | bytes
    is_encrypted: bool = False
    valid_until: datetime | None = None

    @property
    def credential_text(self) -> str:
        """The credential as text, decoding bytes as UTF-8.

        Bytes that are not valid UTF-8 become lone surrogates; they count
        toward length and belong to no character class.
        """
        if isinstance(self.credential, bytes):
            return self.credential.decode("utf-8", errors="surrogateescape")
        return self.credential


@dataclass(frozen=True)
class Approved:
    """The password satisfies every applicable predicate."""

    @property
    def is_approved(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The password failed exactly one predicate."""

    violation: RuleViolation

    @property
    def is_approved(self) -> bool:
        return False


EvaluationResult = Union[Approved, Rejected]

APPROVED = Approved()
