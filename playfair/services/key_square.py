import logging
import string
from dataclasses import dataclass
from typing import ClassVar

from playfair.core.exceptions import InvalidKeySquareError, KeySquareLookupError

logger = logging.getLogger(__name__)

SIZE = 5


def build_key_square(keyword: str) -> str:
    """
    Build the 25-letter key square for a keyword.

    Letters of the keyword come first, in order of first appearance,
    followed by the rest of the alphabet. 'j' is merged into 'i' and
    anything that is not an ASCII letter is ignored, so every keyword
    (including an empty one) yields a valid square.
    """
    letters: list[str] = []
    seen: set[str] = set()

    for char in keyword.lower() + string.ascii_lowercase:
        if char not in string.ascii_lowercase:
            continue
        if char == "j":
            char = "i"
        if char not in seen:
            seen.add(char)
            letters.append(char)

    return "".join(letters)


@dataclass(frozen=True)
class KeySquare:
    """
    A 5x5 Playfair key square stored as a flat sequence of 25 letters.

    The cell at ``position`` sits at ``row = position // 5`` and
    ``column = position % 5``.
    """

    letters: str

    ALPHABET: ClassVar[str] = "abcdefghiklmnopqrstuvwxyz"  # 25 letters, i=j

    def __post_init__(self) -> None:
        if len(self.letters) != SIZE * SIZE or set(self.letters) != set(self.ALPHABET):
            raise InvalidKeySquareError(self.letters)

    @classmethod
    def from_keyword(cls, keyword: str) -> "KeySquare":
        square = cls(build_key_square(keyword))
        logger.debug("Built key square %s for keyword %r", square.letters, keyword)
        return square

    def position(self, letter: str) -> int:
        """Return the flat index of a letter."""
        index = self.letters.find(letter) if len(letter) == 1 else -1
        if index < 0:
            raise KeySquareLookupError(letter, self.letters)
        return index

    def coordinates(self, letter: str) -> tuple[int, int]:
        """Return the (row, column) of a letter."""
        return divmod(self.position(letter), SIZE)

    def letter_at(self, row: int, column: int) -> str:
        """Return the letter at a cell, wrapping both indices around the grid."""
        return self.letters[(row % SIZE) * SIZE + column % SIZE]

    def rows(self) -> list[str]:
        return [self.letters[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and len(letter) == 1 and letter in self.letters

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows())
