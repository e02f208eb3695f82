"""Exceptions raised to the credential host."""

from passwordcheck.domain.entities.evaluation import RuleViolation

# SQLSTATE invalid_parameter_value
INVALID_PARAMETER_VALUE = "22023"


class PasswordCheckError(Exception):
    """Base class for all password check errors."""
    pass


class PasswordRejectedError(PasswordCheckError):
    """Raised when a password fails a policy predicate.

    Args:
        violation: The predicate that failed.
    """

    sqlstate = INVALID_PARAMETER_VALUE

    def __init__(self, violation: RuleViolation) -> None:
        self.violation = violation
        self.code = violation.code.value
        self.message = violation.message
        super().__init__(self.message)


class PolicyCheckUnavailableError(PasswordCheckError):
    """Raised when a mandatory strength check could not be performed."""
    pass
