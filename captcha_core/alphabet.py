"""Mapping between class indices and the characters they stand for.

Indices 0-9 are the digits, 10-35 the letters ``A``-``Z``. Lowercase letters
are accepted on input and folded to the same index.
"""

from __future__ import annotations

import string
from typing import Dict, Iterable, List

ALPHABET = string.digits + string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)

_INDEX: Dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}
_INDEX.update({char.lower(): index for char, index in _INDEX.items() if char.isalpha()})


class InvalidSolutionError(ValueError):
    pass


def to_char(index: int) -> str:
    if not 0 <= index < ALPHABET_SIZE:
        raise InvalidSolutionError(f"Class index out of range: {index}")
    return ALPHABET[index]


def to_index(char: str) -> int:
    try:
        return _INDEX[char]
    except KeyError:
        raise InvalidSolutionError(f"Character outside the alphabet: {char!r}") from None


def encode(text: str) -> List[int]:
    """Map ``text`` to class indices, raising on the first unknown character."""
    return [to_index(char) for char in text]


def decode(indices: Iterable[int]) -> str:
    return "".join(to_char(index) for index in indices)
