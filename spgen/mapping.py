"""
Mapping logic: turn a secure random stream into password characters.
"""

from __future__ import annotations

from .engine import SecureEngine
from .errors import EmptyCharacterSet


def generate(
    universe: str,
    length: int,
    engine: SecureEngine | None = None,
) -> str:
    """
    Draw `length` characters from `universe`, each independently and
    uniformly.

    A fresh OS-seeded engine is created for every call unless one is
    passed in. Seeding failures surface as RngInitializationError.
    """
    if not universe:
        raise EmptyCharacterSet("Cannot sample from an empty character universe.")
    if length < 0:
        raise ValueError(f"Password length cannot be negative, got {length}.")

    rng = engine or SecureEngine()
    size = len(universe)

    password_chars: list[str] = []
    for _ in range(length):
        password_chars.append(universe[rng.randbelow(size)])

    return "".join(password_chars)
