"""Configuration management for passwordcheck.

This module uses Pydantic Settings to load and validate the password policy
parameters from environment variables and .env files. Range checks live here
so the rule evaluator can assume every value it receives is sane.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passwordcheck.domain.entities.policy_config import CHAR_COUNT_LIMIT, LENGTH_LIMIT


class PasswordCheckSettings(BaseSettings):
    """Password policy settings.

    Settings are loaded from environment variables prefixed with
    ``PASSWORDCHECK_`` and from a ``.env`` file. All settings are
    administrator-level and may be reloaded at runtime through
    :class:`passwordcheck.core.configuration.policy_store.PolicyConfigStore`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSWORDCHECK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Length bounds
    min_length: int = Field(
        default=8,
        ge=0,
        le=LENGTH_LIMIT,
        description="Minimum number of characters in the password.",
    )
    max_length: int = Field(
        default=32,
        ge=0,
        le=LENGTH_LIMIT,
        description="Maximum number of characters in the password.",
    )

    # Character class minimums
    min_lower_char: int = Field(
        default=1,
        ge=0,
        le=CHAR_COUNT_LIMIT,
        description="Minimum number of lower-case characters in the password.",
    )
    min_upper_char: int = Field(
        default=1,
        ge=0,
        le=CHAR_COUNT_LIMIT,
        description="Minimum number of upper-case characters in the password.",
    )
    min_digit_char: int = Field(
        default=1,
        ge=0,
        le=CHAR_COUNT_LIMIT,
        description="Minimum number of digit characters in the password.",
    )
    min_special_char: int = Field(
        default=1,
        ge=0,
        le=CHAR_COUNT_LIMIT,
        description="Minimum number of special characters in the password.",
    )

    # Characters must form a contiguous string with no separator
    disallowed_chars: str = Field(
        default="",
        description="List of forbidden characters in the password.",
    )

    # External strength oracle
    use_external_strength_check: bool = Field(
        default=False,
        description="Use the zxcvbn strength estimator for a dictionary-based check.",
    )
    strength_check_mandatory: bool = Field(
        default=False,
        description="Fail the check instead of skipping it when the oracle errors.",
    )
    strength_min_score: int = Field(
        default=3,
        ge=0,
        le=4,
        description="Lowest zxcvbn score (0-4) accepted by the strength oracle.",
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "PasswordCheckSettings":
        """Validate that the minimum length does not exceed the maximum."""
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not be greater than "
                f"max_length ({self.max_length})"
            )
        return self


@lru_cache
def get_settings() -> PasswordCheckSettings:
    """Get cached settings instance.

    The cached instance is the startup configuration. Live reloads go through
    the policy store, which builds a fresh settings object instead of reading
    this cache.

    Returns:
        PasswordCheckSettings: Cached settings instance.
    """
    return PasswordCheckSettings()
