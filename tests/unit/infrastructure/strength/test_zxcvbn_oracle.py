"""Unit tests for the strength oracles."""

import builtins
from unittest.mock import patch

import pytest

from passwordcheck.infrastructure.strength import (
    AbsentStrengthOracle,
    StrengthOracleError,
    build_strength_oracle,
)

pytest.importorskip("zxcvbn")

from passwordcheck.infrastructure.strength.zxcvbn_oracle import ZxcvbnStrengthOracle  # noqa: E402

ORACLE_MODULE = "passwordcheck.infrastructure.strength.zxcvbn_oracle"


def report(score: int, warning: str = "", suggestions: list[str] | None = None) -> dict:
    return {"score": score, "feedback": {"warning": warning, "suggestions": suggestions or []}}


class TestZxcvbnStrengthOracle:
    """Tests for ZxcvbnStrengthOracle."""

    def test_common_password_is_weak(self):
        """Test a top dictionary password is rejected with zxcvbn's warning."""
        reason = ZxcvbnStrengthOracle().check("password")

        assert reason
        assert "common" in reason.lower()

    def test_random_password_is_strong(self):
        assert ZxcvbnStrengthOracle().check("vR7#qL2!mZ9$kT4@") is None

    def test_min_score_zero_accepts_everything(self):
        assert ZxcvbnStrengthOracle(min_score=0).check("password") is None

    def test_invalid_min_score(self):
        with pytest.raises(ValueError):
            ZxcvbnStrengthOracle(min_score=5)

    def test_warning_passed_through_verbatim(self):
        with patch(f"{ORACLE_MODULE}.zxcvbn", return_value=report(1, "This is similar to a commonly used password.")):
            reason = ZxcvbnStrengthOracle().check("Passw0rd!")

        assert reason == "This is similar to a commonly used password."

    def test_suggestions_used_without_warning(self):
        fake = report(2, "", ["Add another word or two.", "Avoid sequences."])
        with patch(f"{ORACLE_MODULE}.zxcvbn", return_value=fake):
            reason = ZxcvbnStrengthOracle().check("Abcd1234!")

        assert reason == "Add another word or two. Avoid sequences."

    def test_score_sentence_without_feedback(self):
        with patch(f"{ORACLE_MODULE}.zxcvbn", return_value=report(2)):
            reason = ZxcvbnStrengthOracle(min_score=4).check("Abcd1234!")

        assert reason == "strength score 2 is below the required 4"

    def test_input_truncated_to_zxcvbn_limit(self):
        with patch(f"{ORACLE_MODULE}.zxcvbn", return_value=report(4)) as mock_zxcvbn:
            ZxcvbnStrengthOracle().check("x" * 128)

        assert mock_zxcvbn.call_args.args[0] == "x" * 72

    def test_library_error_wrapped(self):
        with patch(f"{ORACLE_MODULE}.zxcvbn", side_effect=RuntimeError("boom")):
            with pytest.raises(StrengthOracleError, match="boom"):
                ZxcvbnStrengthOracle().check("Ab3!defg")

    def test_available(self):
        assert ZxcvbnStrengthOracle().available is True


class TestBuildStrengthOracle:
    """Tests for build_strength_oracle."""

    def test_present_when_zxcvbn_installed(self):
        oracle = build_strength_oracle(min_score=2)

        assert isinstance(oracle, ZxcvbnStrengthOracle)
        assert oracle.min_score == 2

    def test_absent_when_zxcvbn_missing(self):
        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == ORACLE_MODULE:
                raise ImportError("No module named 'zxcvbn'")
            return real_import(name, *args, **kwargs)

        with patch("builtins.__import__", side_effect=fake_import):
            oracle = build_strength_oracle()

        assert isinstance(oracle, AbsentStrengthOracle)
        assert oracle.available is False
        assert oracle.check("password") is None
