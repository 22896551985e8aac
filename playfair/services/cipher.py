"""
Playfair encryption and decryption.

The Playfair cipher encrypts digrams (pairs of letters) using a 5x5 key
square. The alphabet is reduced to 25 letters (I and J are combined).

Rules for encryption:
1. Same row: replace each letter with the one to its right
2. Same column: replace each letter with the one below
3. Rectangle: swap columns, keep rows

Decryption applies the opposite shifts; the rectangle rule is its own
inverse.
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from playfair.services.digrams import Digram, prepare_ciphertext, prepare_plaintext
from playfair.services.key_square import KeySquare

logger = logging.getLogger(__name__)

ENCRYPT = 1
DECRYPT = -1


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: str
    key_square: KeySquare
    explanation: str


def _transform(square: KeySquare, digrams: list[Digram], shift: int) -> str:
    """Apply the Playfair rules to each digram, moving ``shift`` cells."""
    result = []
    for a, b in digrams:
        row_a, col_a = square.coordinates(a)
        row_b, col_b = square.coordinates(b)

        if row_a == row_b:
            result.append(square.letter_at(row_a, col_a + shift))
            result.append(square.letter_at(row_b, col_b + shift))
        elif col_a == col_b:
            result.append(square.letter_at(row_a + shift, col_a))
            result.append(square.letter_at(row_b + shift, col_b))
        else:
            result.append(square.letter_at(row_a, col_b))
            result.append(square.letter_at(row_b, col_a))

    return "".join(result)


def encrypt_with_square(square: KeySquare, plaintext: str, pad: str = "x") -> str:
    """Encrypt plaintext with an already built key square."""
    digrams = prepare_plaintext(plaintext, pad)
    logger.debug("Encrypting %d digrams", len(digrams))
    return _transform(square, digrams, ENCRYPT)


def decrypt_with_square(square: KeySquare, ciphertext: str) -> str:
    """Decrypt ciphertext with an already built key square."""
    digrams = prepare_ciphertext(ciphertext)
    logger.debug("Decrypting %d digrams", len(digrams))
    return _transform(square, digrams, DECRYPT)


def encrypt(keyword: str, plaintext: str, pad: str = "x") -> str:
    """
    Encrypt plaintext with the Playfair cipher.

    Example:
        >>> encrypt("playfair example", "hide the gold in the tree stump", "x")
        'bmodzbxdnabekudmuixmmouvif'

    Raises:
        InvalidPadError: If ``pad`` is not a single character
        KeySquareLookupError: If a letter (usually the pad) is not in the square
    """
    return encrypt_with_square(KeySquare.from_keyword(keyword), plaintext, pad)


def decrypt(keyword: str, ciphertext: str) -> str:
    """
    Decrypt ciphertext with the Playfair cipher.

    Example:
        >>> decrypt("playfair example", "bmodzbxdnabekudmuixmmouvif")
        'hidethegoldinthetrexestump'

    Raises:
        OddLengthError: If the ciphertext has an odd number of letters
        KeySquareLookupError: If a letter is not in the square (e.g. 'j')
    """
    return decrypt_with_square(KeySquare.from_keyword(keyword), ciphertext)


class PlayfairEngine:
    """
    Keyword-driven Playfair engine.

    Wraps :func:`encrypt` and :func:`decrypt` for callers that pass keys
    around as strings or as ``{"keyword": ...}`` dicts.
    """

    name = "Playfair Cipher"
    description = (
        "A digram substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    DEFAULT_PAD: ClassVar[str] = "x"

    def __init__(self, pad: str | None = None):
        self.pad = self.DEFAULT_PAD if pad is None else pad

    def encrypt(
        self,
        plaintext: str,
        key: str | dict[str, Any],
        pad: str | None = None,
    ) -> str:
        """Encrypt using the keyword."""
        return encrypt(self._parse_key(key), plaintext, self.pad if pad is None else pad)

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: str | dict[str, Any],
    ) -> DecryptionResult:
        """Decrypt with a known keyword."""
        key_str = self._parse_key(key)
        square = KeySquare.from_keyword(key_str)
        plaintext = decrypt_with_square(square, ciphertext)

        return DecryptionResult(
            plaintext=plaintext,
            key=key_str,
            key_square=square,
            explanation=self._describe(key_str, square),
        )

    def key_square(self, key: str | dict[str, Any]) -> KeySquare:
        return KeySquare.from_keyword(self._parse_key(key))

    def validate_key(self, key: str | dict[str, Any]) -> bool:
        """A keyword is usable when it contains at least one letter."""
        try:
            key_str = self._parse_key(key)
        except TypeError:
            return False
        return any(c.isascii() and c.isalpha() for c in key_str)

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        key_str = self._parse_key(key)
        return self._describe(key_str, KeySquare.from_keyword(key_str))

    def _describe(self, keyword: str, square: KeySquare) -> str:
        return (
            f"Playfair cipher with keyword '{keyword}'. "
            f"5x5 key square:\n{square}\n"
            f"Letters are processed in pairs using row/column rules."
        )

    def _parse_key(self, key: str | dict[str, Any]) -> str:
        """Parse key to string."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise TypeError(f"Keyword must be a string, got {type(key).__name__}")
        return key
