"""Strength oracle adapters.

The oracle variant is chosen once, at startup: zxcvbn when it is installed,
otherwise an absent oracle that never objects.
"""

from passwordcheck.core.logging import get_logger
from passwordcheck.domain.services.collaborators import (
    AbsentStrengthOracle,
    StrengthOracle,
    StrengthOracleError,
)

logger = get_logger(__name__)


def build_strength_oracle(min_score: int = 3) -> StrengthOracle:
    """Select the strength oracle for this process.

    Args:
        min_score: Lowest accepted zxcvbn score.

    Returns:
        A zxcvbn-backed oracle, or an absent oracle if zxcvbn is not installed.
    """
    try:
        from passwordcheck.infrastructure.strength.zxcvbn_oracle import ZxcvbnStrengthOracle
    except ImportError:
        logger.info("zxcvbn is not installed, external strength check will be skipped")
        return AbsentStrengthOracle()
    return ZxcvbnStrengthOracle(min_score=min_score)


__all__ = [
    "AbsentStrengthOracle",
    "StrengthOracle",
    "StrengthOracleError",
    "build_strength_oracle",
]
