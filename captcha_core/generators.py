"""Random identifiers and solutions."""

from __future__ import annotations

import secrets
import string

from .alphabet import ALPHABET_SIZE

ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 20


def random_id(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def random_solution(length: int) -> bytes:
    """Return ``length`` uniformly drawn class indices in ``[0, 36)``."""
    if length < 1:
        raise ValueError("Solution length must be positive")
    return bytes(secrets.randbelow(ALPHABET_SIZE) for _ in range(length))
