"""
charsets.py - Character classes, length bounds and alphabet assembly
"""
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

PASSWORD_LENGTH_MIN = 12
PASSWORD_LENGTH_MAX = 64
MAX_IDENTICAL_CONSECUTIVE_CHARS = 2

NUMERIC_CHARS = "1234567890"
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
SPECIAL_CHARS = "-~`!@#$%^&*_+=|:;',.?"
SPACE_CHARS = " "

# Order in which enabled classes are concatenated into the alphabet
CLASS_ORDER: Tuple[str, ...] = ("lowercase", "uppercase", "space", "numeric", "special")

CHARACTER_SETS: Mapping[str, str] = MappingProxyType({
    "lowercase": LOWERCASE_CHARS,
    "uppercase": UPPERCASE_CHARS,
    "space": SPACE_CHARS,
    "numeric": NUMERIC_CHARS,
    "special": SPECIAL_CHARS,
})


def enabled_classes(
    include_lowercase: bool,
    include_uppercase: bool,
    include_numeric: bool,
    include_special: bool,
    include_spaces: bool
) -> Dict[str, bool]:
    """Map each class name to its flag."""
    return {
        "lowercase": bool(include_lowercase),
        "uppercase": bool(include_uppercase),
        "space": bool(include_spaces),
        "numeric": bool(include_numeric),
        "special": bool(include_special),
    }


def build_alphabet(
    include_lowercase: bool,
    include_uppercase: bool,
    include_numeric: bool,
    include_special: bool,
    include_spaces: bool
) -> str:
    """
    Build the set of characters eligible for selection.

    Enabled classes are concatenated in CLASS_ORDER (lowercase, uppercase,
    space, numeric, special). The result is empty when every flag is off.
    """
    flags = enabled_classes(
        include_lowercase,
        include_uppercase,
        include_numeric,
        include_special,
        include_spaces
    )

    characters = ""
    for name in CLASS_ORDER:
        if flags[name]:
            characters += CHARACTER_SETS[name]

    return characters
