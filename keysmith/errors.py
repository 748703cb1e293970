"""
errors.py - Exceptions raised by the generator
"""


class KeysmithError(Exception):
    """Base class for every error raised by keysmith"""


class ConfigError(KeysmithError, ValueError):
    """The requested configuration can never produce a password"""


class PasswordLengthError(ConfigError):
    """Requested length is outside the allowed range"""

    def __init__(self, length: int, minimum: int, maximum: int):
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Password length minimum: {minimum}\n"
            f"Password length maximum: {maximum}"
        )


class EmptyAlphabetError(ConfigError):
    """No character class was enabled"""

    def __init__(self):
        super().__init__("At least one character type must be selected")


class UnsatisfiableRunError(ConfigError):
    """The alphabet is too small to avoid runs of identical characters"""

    def __init__(self, alphabet: str, max_run: int):
        self.alphabet = alphabet
        self.max_run = max_run
        super().__init__(
            f"Alphabet {alphabet!r} has a single distinct character; "
            f"cannot avoid more than {max_run} identical characters in a row"
        )


class ConvergenceError(KeysmithError, RuntimeError):
    """Generation gave up after too many rejected attempts"""

    def __init__(self, attempts: int, reason: str = "no valid password produced"):
        self.attempts = attempts
        super().__init__(f"{reason} after {attempts} attempts")
