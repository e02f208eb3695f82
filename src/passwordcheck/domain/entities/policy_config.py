"""Password policy configuration entity.

A PolicyConfig is one resolved, immutable snapshot of the policy parameters.
The rule evaluator receives it as an explicit argument and never reads
settings on its own.
"""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from passwordcheck.core.config import PasswordCheckSettings

LENGTH_LIMIT = 128
CHAR_COUNT_LIMIT = 64


@dataclass(frozen=True)
class PolicyConfig:
    """Resolved password policy parameters.

    Attributes:
        min_length: Minimum number of characters.
        max_length: Maximum number of characters.
        min_lower: Minimum number of lower-case characters.
        min_upper: Minimum number of upper-case characters.
        min_digit: Minimum number of digit characters.
        min_special: Minimum number of special characters.
        disallowed_chars: Forbidden characters as the operator wrote them.
        use_external_strength_check: Consult the strength oracle when present.
        strength_check_mandatory: Escalate oracle failures instead of skipping.
        disallowed_set: Set form of ``disallowed_chars`` used for lookups.
    """

    min_length: int = 8
    max_length: int = 32
    min_lower: int = 1
    min_upper: int = 1
    min_digit: int = 1
    min_special: int = 1
    disallowed_chars: str = ""
    use_external_strength_check: bool = False
    strength_check_mandatory: bool = False
    disallowed_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("min_length", "max_length"):
            _check_range(name, getattr(self, name), LENGTH_LIMIT)
        for name in ("min_lower", "min_upper", "min_digit", "min_special"):
            _check_range(name, getattr(self, name), CHAR_COUNT_LIMIT)
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not be greater than "
                f"max_length ({self.max_length})"
            )
        object.__setattr__(self, "disallowed_set", frozenset(self.disallowed_chars))

    @classmethod
    def from_settings(cls, settings: "PasswordCheckSettings") -> "PolicyConfig":
        """Build a policy snapshot from loaded settings.

        Args:
            settings: Validated settings instance.

        Returns:
            A new PolicyConfig carrying the settings' policy values.
        """
        return cls(
            min_length=settings.min_length,
            max_length=settings.max_length,
            min_lower=settings.min_lower_char,
            min_upper=settings.min_upper_char,
            min_digit=settings.min_digit_char,
            min_special=settings.min_special_char,
            disallowed_chars=settings.disallowed_chars,
            use_external_strength_check=settings.use_external_strength_check,
            strength_check_mandatory=settings.strength_check_mandatory,
        )

    def with_changes(self, **changes: Any) -> "PolicyConfig":
        """Return a copy with the given fields replaced (and re-validated)."""
        return replace(self, **changes)


def _check_range(name: str, value: int, upper: int) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")
