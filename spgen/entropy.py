"""
OS entropy source: the only place spgen reads seed material from.
"""

from __future__ import annotations

import os

from .errors import RngInitializationError


def os_entropy(num_bytes: int) -> bytes:
    """
    Read `num_bytes` from the operating system CSPRNG.

    Any failure is reported as RngInitializationError. There is no
    fallback: a missing entropy source stops generation.
    """
    try:
        data = os.urandom(num_bytes)
    except (NotImplementedError, OSError) as exc:
        raise RngInitializationError(
            f"OS entropy source unavailable: {exc}"
        ) from exc

    if len(data) != num_bytes:
        raise RngInitializationError(
            f"OS entropy source returned {len(data)} bytes, expected {num_bytes}."
        )
    return data
