"""Strength oracle backed by zxcvbn.

zxcvbn estimates how many guesses an attacker needs, matching the password
against frequency-ranked dictionaries, keyboard walks, dates and sequences.
Scores run from 0 (too guessable) to 4 (very unguessable).
"""

from zxcvbn import zxcvbn

from passwordcheck.core.logging import get_logger
from passwordcheck.domain.services.collaborators import StrengthOracle, StrengthOracleError

logger = get_logger(__name__)

# zxcvbn rejects longer input; matching beyond this adds nothing to the estimate
ZXCVBN_MAX_LENGTH = 72


class ZxcvbnStrengthOracle(StrengthOracle):
    """Rejects passwords whose zxcvbn score is below a minimum."""

    def __init__(self, min_score: int = 3) -> None:
        """Initialize the oracle.

        Args:
            min_score: Lowest accepted zxcvbn score (0-4, default 3).
        """
        if not 0 <= min_score <= 4:
            raise ValueError(f"min_score must be between 0 and 4, got {min_score}")
        self.min_score = min_score

    @property
    def available(self) -> bool:
        return True

    def check(self, password: str) -> str | None:
        try:
            report = zxcvbn(password[:ZXCVBN_MAX_LENGTH])
        except Exception as exc:
            raise StrengthOracleError(f"zxcvbn failed to score the password: {exc}") from exc

        score: int = report["score"]
        if score >= self.min_score:
            return None

        logger.debug("Password scored below minimum", score=score, min_score=self.min_score)
        feedback = report.get("feedback") or {}
        warning: str = feedback.get("warning") or ""
        if warning:
            return warning
        suggestions: list[str] = feedback.get("suggestions") or []
        if suggestions:
            return " ".join(suggestions)
        return f"strength score {score} is below the required {self.min_score}"
