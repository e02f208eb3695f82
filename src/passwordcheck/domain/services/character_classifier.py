"""Character classification for password composition rules.

Four fixed class sets are used for the minimum-count rules. Characters in
none of them are legal and only count toward the password length. The
operator's disallowed set is independent of the classes: a character may be
special and disallowed at once, or disallowed without belonging to any class.
"""

from collections.abc import Set
from enum import Enum


class CharacterClass(str, Enum):
    """Character classes counted by the composition rules."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SPECIAL = "special"


UPPER_CASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGIT_CHARS = "0123456789"
# Includes a few accented letters and Latin-1 symbols from European keyboards
SPECIAL_CHARS = "<>,?;.:/!§ù%*µ^¨$£²&é~\"#'{([-|è`_\\ç^à@)]°=}+"

_CLASS_SETS: tuple[tuple[CharacterClass, frozenset[str]], ...] = (
    (CharacterClass.LOWER, frozenset(LOWER_CASE_CHARS)),
    (CharacterClass.UPPER, frozenset(UPPER_CASE_CHARS)),
    (CharacterClass.DIGIT, frozenset(DIGIT_CHARS)),
    (CharacterClass.SPECIAL, frozenset(SPECIAL_CHARS)),
)

_CLASSIFICATION: dict[str, frozenset[CharacterClass]] = {}
for _cls, _chars in _CLASS_SETS:
    for _char in _chars:
        _CLASSIFICATION[_char] = _CLASSIFICATION.get(_char, frozenset()) | {_cls}

_NO_CLASS: frozenset[CharacterClass] = frozenset()


def classify(char: str) -> frozenset[CharacterClass]:
    """Return the classes a single character belongs to.

    Args:
        char: One character.

    Returns:
        The matching classes; empty for characters in no class.
    """
    return _CLASSIFICATION.get(char, _NO_CLASS)


def is_disallowed(char: str, disallowed: Set[str]) -> bool:
    """Check whether a character is in the operator's disallowed set."""
    return char in disallowed
