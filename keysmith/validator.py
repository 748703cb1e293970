"""
validator.py - Character class presence checks for generated passwords
"""
import re
from typing import Dict

from .charsets import SPECIAL_CHARS, enabled_classes

CLASS_PATTERNS = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "numeric": re.compile(r"\d"),
    "special": re.compile("[" + re.escape(SPECIAL_CHARS) + "]"),
    "space": re.compile(r"\s"),
}


def class_presence(password: str) -> Dict[str, bool]:
    """
    Report which character classes occur in a password.

    Each class is tested on its own, so one character may count for
    several classes.
    """
    return {
        name: bool(pattern.search(password))
        for name, pattern in CLASS_PATTERNS.items()
    }


def is_password_valid(
    include_lowercase: bool,
    include_uppercase: bool,
    include_numeric: bool,
    include_special: bool,
    include_spaces: bool,
    password: str
) -> bool:
    """
    Check a password against the class flags.

    An enabled class must occur at least once and a disabled class must
    not occur at all.

    Returns:
        True only if every class's presence matches its flag
    """
    wanted = enabled_classes(
        include_lowercase,
        include_uppercase,
        include_numeric,
        include_special,
        include_spaces
    )
    found = class_presence(password)

    return all(found[name] == wanted[name] for name in CLASS_PATTERNS)
