"""Domain services for passwordcheck.

Services contain the rule logic: character classification, the password
validator and the interfaces of its collaborators.
"""

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
from passwordcheck.domain.services.password_validator import (
    PasswordPolicy,
    PasswordValidator,
)

__all__ = [
    "AbsentStrengthOracle",
    "CharacterClass",
    "CredentialVerifier",
    "NoCredentialVerifier",
    "PasswordPolicy",
    "PasswordValidator",
    "StrengthOracle",
    "StrengthOracleError",
    "classify",
    "is_disallowed",
]
