"""
generator.py - Random passwords with class, length and run constraints
"""
import logging
import secrets
from typing import List, Optional, Protocol, Sequence

from .charsets import (
    MAX_IDENTICAL_CONSECUTIVE_CHARS,
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    build_alphabet,
)
from .errors import (
    ConvergenceError,
    EmptyAlphabetError,
    PasswordLengthError,
    UnsatisfiableRunError,
)
from .validator import is_password_valid

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 1000
MAX_POSITION_REDRAWS = 1000


class ChoiceSource(Protocol):
    """Anything that can pick one element of a sequence, like random.Random."""

    def choice(self, seq: Sequence[str]) -> str:
        ...


# Stateless, shared across threads
_sysrand = secrets.SystemRandom()


def generate_password(
    include_lowercase: bool = True,
    include_uppercase: bool = True,
    include_numeric: bool = True,
    include_special: bool = True,
    include_spaces: bool = False,
    length: int = 16,
    *,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    rng: Optional[ChoiceSource] = None
) -> str:
    """
    Generate a cryptographically secure random password.

    Every enabled class appears at least once, every disabled class is
    absent, and from position 3 onwards no character repeats the two
    characters before it.

    Args:
        include_lowercase: Include lowercase letters a-z
        include_uppercase: Include uppercase letters A-Z
        include_numeric: Include digits 0-9
        include_special: Include the special punctuation set
        include_spaces: Include the space character
        length: Length of the password, between 12 and 64 inclusive
        max_attempts: Number of full regenerations allowed before giving up
        rng: Object with a ``choice`` method; defaults to SystemRandom

    Returns:
        A random password of exactly ``length`` characters

    Raises:
        PasswordLengthError: If length is outside the allowed range
        EmptyAlphabetError: If no character types are selected
        UnsatisfiableRunError: If the alphabet has a single distinct character
        ConvergenceError: If no valid password was produced in max_attempts
    """
    _check_length(length)

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    characters = build_alphabet(
        include_lowercase,
        include_uppercase,
        include_numeric,
        include_special,
        include_spaces
    )

    if not characters:
        logger.warning("Refusing to generate: no character types selected")
        raise EmptyAlphabetError()

    if len(set(characters)) < 2 and length > MAX_IDENTICAL_CONSECUTIVE_CHARS + 1:
        logger.warning("Refusing to generate: alphabet %r cannot avoid runs", characters)
        raise UnsatisfiableRunError(characters, MAX_IDENTICAL_CONSECUTIVE_CHARS)

    if rng is None:
        rng = _sysrand

    logger.debug("Generating %d characters from an alphabet of %d", length, len(characters))

    for attempt in range(1, max_attempts + 1):
        password = _draw_password(characters, length, rng)

        if is_password_valid(
            include_lowercase,
            include_uppercase,
            include_numeric,
            include_special,
            include_spaces,
            password
        ):
            return password

        logger.debug("Attempt %d failed class validation, regenerating", attempt)

    logger.warning("Gave up after %d attempts", max_attempts)
    raise ConvergenceError(max_attempts)


def has_excess_run(password: str, max_run: int = MAX_IDENTICAL_CONSECUTIVE_CHARS) -> bool:
    """
    Return True if a character repeats the max_run characters before it.

    Only positions after index max_run are checked, so a leading run of
    max_run + 1 identical characters is not reported.
    """
    return any(
        _completes_run(password[:position], password[position], max_run)
        for position in range(len(password))
    )


def _check_length(length: int) -> None:
    """Reject lengths outside [PASSWORD_LENGTH_MIN, PASSWORD_LENGTH_MAX]."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, not {type(length).__name__}")

    if length < PASSWORD_LENGTH_MIN or length > PASSWORD_LENGTH_MAX:
        logger.warning("Refusing to generate: length %d out of range", length)
        raise PasswordLengthError(length, PASSWORD_LENGTH_MIN, PASSWORD_LENGTH_MAX)


def _completes_run(previous: Sequence[str], char: str, max_run: int) -> bool:
    """Would placing char after previous extend a run past max_run?"""
    position = len(previous)
    if position <= max_run:
        return False
    return all(c == char for c in previous[position - max_run:])


def _draw_password(characters: str, length: int, rng: ChoiceSource) -> str:
    """Fill length slots left to right, redrawing any slot that completes a run."""
    slots: List[str] = []

    for _ in range(length):
        char = rng.choice(characters)
        redraws = 0

        while _completes_run(slots, char, MAX_IDENTICAL_CONSECUTIVE_CHARS):
            redraws += 1
            if redraws > MAX_POSITION_REDRAWS:
                raise ConvergenceError(redraws, f"position {len(slots)} kept repeating {char!r}")
            char = rng.choice(characters)

        slots.append(char)

    return "".join(slots)
