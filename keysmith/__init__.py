"""
Keysmith - Constrained random password generation.

Features:
- Cryptographically secure character selection
- Per-class include/exclude flags (lowercase, uppercase, numeric, special, space)
- No more than two identical characters in a row
- Validation of class presence and absence
"""
import logging

from .charsets import (
    CHARACTER_SETS,
    CLASS_ORDER,
    LOWERCASE_CHARS,
    MAX_IDENTICAL_CONSECUTIVE_CHARS,
    NUMERIC_CHARS,
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    SPACE_CHARS,
    SPECIAL_CHARS,
    UPPERCASE_CHARS,
    build_alphabet,
)
from .errors import (
    ConfigError,
    ConvergenceError,
    EmptyAlphabetError,
    KeysmithError,
    PasswordLengthError,
    UnsatisfiableRunError,
)
from .generator import generate_password, has_excess_run
from .validator import class_presence, is_password_valid

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "generate_password",
    "is_password_valid",
    "class_presence",
    "build_alphabet",
    "has_excess_run",
    "KeysmithError",
    "ConfigError",
    "PasswordLengthError",
    "EmptyAlphabetError",
    "UnsatisfiableRunError",
    "ConvergenceError",
    "CHARACTER_SETS",
    "CLASS_ORDER",
    "LOWERCASE_CHARS",
    "UPPERCASE_CHARS",
    "NUMERIC_CHARS",
    "SPECIAL_CHARS",
    "SPACE_CHARS",
    "PASSWORD_LENGTH_MIN",
    "PASSWORD_LENGTH_MAX",
    "MAX_IDENTICAL_CONSECUTIVE_CHARS",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def get_version():
    """Get the current version string."""
    return __version__
