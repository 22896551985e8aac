"""Text preprocessing for the cipher."""

from playfair.services.preprocessing.normalizer import (
    NormalizationMode,
    NormalizedText,
    TextNormalizer,
)

__all__ = [
    "NormalizationMode",
    "NormalizedText",
    "TextNormalizer",
]
