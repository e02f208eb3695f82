"""passwordcheck - configurable password acceptability policy.

Checks new passwords against length bounds, character-class minimums,
disallowed characters and an optional zxcvbn strength estimate, reporting the
first rule a password breaks.
"""

__version__ = "0.1.0"

from passwordcheck.core.exceptions import (
    PasswordCheckError,
    PasswordRejectedError,
    PolicyCheckUnavailableError,
)
from passwordcheck.domain.entities import (
    EvaluationInput,
    PasswordType,
    PolicyConfig,
    ViolationCode,
)
from passwordcheck.domain.services import PasswordPolicy, PasswordValidator
from passwordcheck.infrastructure.hooks import PasswordCheckHook

__all__ = [
    "EvaluationInput",
    "PasswordCheckError",
    "PasswordCheckHook",
    "PasswordPolicy",
    "PasswordRejectedError",
    "PasswordType",
    "PasswordValidator",
    "PolicyCheckUnavailableError",
    "PolicyConfig",
    "ViolationCode",
    "__version__",
]
