import logging

from playfair.core.exceptions import InvalidPadError, OddLengthError
from playfair.services.preprocessing.normalizer import NormalizationMode, TextNormalizer

logger = logging.getLogger(__name__)

Digram = tuple[str, str]


def _letters(text: str, mode: NormalizationMode) -> str:
    result = TextNormalizer().normalize_full(text, mode)
    if result.removed_chars:
        logger.debug(
            "Dropped %d non-letter characters from %s: %s",
            sum(result.removed_chars.values()),
            mode.value,
            result.removed_chars,
        )
    return result.text


def prepare_plaintext(text: str, pad: str) -> list[Digram]:
    """
    Split plaintext into digrams ready for encryption.

    - Convert to lowercase and keep only letters
    - Replace J with I
    - Separate a repeated letter from its twin with ``pad``
    - Complete a trailing single letter with ``pad``

    The pad is used exactly as given. Repeats are checked as the stream
    advances, so the letter that was split off starts the next digram.
    """
    if len(pad) != 1:
        raise InvalidPadError(pad)

    letters = _letters(text, NormalizationMode.PLAINTEXT)

    digrams: list[Digram] = []
    pending: str | None = None
    for letter in letters:
        if pending is None:
            pending = letter
        elif letter == pending:
            digrams.append((pending, pad))
        else:
            digrams.append((pending, letter))
            pending = None

    if pending is not None:
        digrams.append((pending, pad))

    return digrams


def prepare_ciphertext(text: str) -> list[Digram]:
    """Split ciphertext into digrams, rejecting an odd number of letters."""
    letters = _letters(text, NormalizationMode.CIPHERTEXT)

    if len(letters) % 2 != 0:
        raise OddLengthError(len(letters))

    return [(letters[i], letters[i + 1]) for i in range(0, len(letters), 2)]
