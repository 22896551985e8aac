from typing import Any


class PlayfairError(Exception):
    """Base exception for all Playfair errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PlayfairError):
    """Raised when input validation fails."""

    pass


class OddLengthError(ValidationError):
    """Raised when normalized ciphertext cannot be split into digrams."""

    def __init__(self, length: int):
        super().__init__(
            f"Ciphertext has an odd number of letters ({length})",
            {"length": length},
        )


class InvalidPadError(ValidationError):
    """Raised when the pad is not a single character."""

    def __init__(self, pad: str):
        super().__init__(
            f"Pad must be a single character, got {pad!r}",
            {"pad": pad},
        )


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(PlayfairError):
    """Base exception for cipher engine errors."""

    pass


class KeySquareLookupError(EngineError):
    """Raised when a letter is not present in the key square."""

    def __init__(self, letter: str, key_square: str):
        super().__init__(
            f"Character '{letter}' not found in key square",
            {"letter": letter, "key_square": key_square},
        )


class InvalidKeySquareError(ValidationError):
    """Raised when a key square is not a permutation of the 25-letter alphabet."""

    def __init__(self, letters: str):
        super().__init__(
            f"Invalid key square: {letters!r}",
            {"letters": letters},
        )
