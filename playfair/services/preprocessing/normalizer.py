import string
from dataclasses import dataclass
from enum import Enum


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    PLAINTEXT = "plaintext"  # Letters only, lowercase, J folded into I
    CIPHERTEXT = "ciphertext"  # Letters only, lowercase


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]
    mode: NormalizationMode


class TextNormalizer:
    """
    Normalizes text into a Playfair letter stream.

    Handles:
    - Case conversion
    - Non-letter character removal (anything outside ASCII a-z)
    - Folding 'j' into 'i' for plaintext

    Ciphertext is not folded: a well-formed Playfair ciphertext never
    contains 'j', so one that does is reported by the key square lookup.
    """

    ALPHABET = string.ascii_lowercase

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.PLAINTEXT,
    ) -> str:
        """Return only the letter stream of ``text``."""
        result = self.normalize_full(text, mode)
        return result.text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.PLAINTEXT,
    ) -> NormalizedText:
        """
        Reduce text to a lowercase letter stream.

        Args:
            text: Plaintext or ciphertext as the caller supplied it
            mode: PLAINTEXT also folds 'j' into 'i'

        Returns:
            NormalizedText holding the stream and a tally of dropped characters
        """
        removed_chars: dict[str, int] = {}
        normalized = self._filter_chars(text.lower(), self.ALPHABET, removed_chars)

        if mode == NormalizationMode.PLAINTEXT:
            normalized = normalized.replace("j", "i")

        return NormalizedText(
            text=normalized,
            original=text,
            removed_chars=removed_chars,
            mode=mode,
        )

    def _filter_chars(
        self,
        text: str,
        allowed: str,
        removed_chars: dict[str, int],
    ) -> str:
        """Filter text to only allowed characters, tracking removed ones."""
        result = []
        allowed_set = set(allowed)

        for char in text:
            if char in allowed_set:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)
