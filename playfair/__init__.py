"""Playfair cipher: key-square derivation and digram encryption."""

from playfair.core.exceptions import (
    EngineError,
    InvalidKeySquareError,
    InvalidPadError,
    KeySquareLookupError,
    OddLengthError,
    PlayfairError,
    TextTooLongError,
    ValidationError,
)
from playfair.services.cipher import DecryptionResult, PlayfairEngine, decrypt, encrypt
from playfair.services.key_square import KeySquare, build_key_square

__all__ = [
    "DecryptionResult",
    "EngineError",
    "InvalidKeySquareError",
    "InvalidPadError",
    "KeySquare",
    "KeySquareLookupError",
    "OddLengthError",
    "PlayfairEngine",
    "PlayfairError",
    "TextTooLongError",
    "ValidationError",
    "build_key_square",
    "decrypt",
    "encrypt",
]
