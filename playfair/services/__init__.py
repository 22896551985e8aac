"""Playfair cipher services."""

from playfair.services.cipher import (
    DecryptionResult,
    PlayfairEngine,
    decrypt,
    decrypt_with_square,
    encrypt,
    encrypt_with_square,
)
from playfair.services.key_square import KeySquare, build_key_square

__all__ = [
    "DecryptionResult",
    "KeySquare",
    "PlayfairEngine",
    "build_key_square",
    "decrypt",
    "decrypt_with_square",
    "encrypt",
    "encrypt_with_square",
]
