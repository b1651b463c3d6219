"""
Secure engine: a ChaCha20 keystream seeded from OS entropy, used as the
random byte stream for one password.
"""

from __future__ import annotations

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .entropy import os_entropy
from .errors import RngInitializationError

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 16


class SecureEngine:
    """
    Encapsulates the seeded generator for a single generation call.

    Create one per password and let it go afterwards; an instance is
    not meant to be shared between calls or threads.
    """

    def __init__(self, key: bytes | None = None, nonce: bytes | None = None) -> None:
        if key is None:
            key = os_entropy(KEY_SIZE)
        if nonce is None:
            nonce = os_entropy(NONCE_SIZE)

        if len(key) != KEY_SIZE or len(nonce) != NONCE_SIZE:
            raise ValueError(
                f"SecureEngine needs a {KEY_SIZE}-byte key and a "
                f"{NONCE_SIZE}-byte nonce."
            )

        try:
            cipher = Cipher(algorithms.ChaCha20(key, nonce), mode=None)
            self._keystream = cipher.encryptor()
        except UnsupportedAlgorithm as exc:
            raise RngInitializationError(
                f"ChaCha20 is not available in this cryptography build: {exc}"
            ) from exc

        logger.debug("Seeded ChaCha20 engine")

    @classmethod
    def from_seed(cls, key: bytes, nonce: bytes) -> "SecureEngine":
        """
        Build an engine from explicit seed material.

        The same key and nonce always give the same stream; only use this
        for reproducible tests.
        """
        return cls(key=key, nonce=nonce)

    def read_bytes(self, n: int) -> bytes:
        """
        Return the next `n` bytes of keystream.
        """
        # Encrypting zeros yields the raw keystream.
        return self._keystream.update(bytes(n))

    def randbelow(self, n: int) -> int:
        """
        Return a uniformly distributed integer in [0, n).

        Draws just enough bits to cover n - 1 and rejects values that land
        outside the range, so every index is exactly equally likely.
        """
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}.")
        if n == 1:
            return 0

        bits = (n - 1).bit_length()
        num_bytes = (bits + 7) // 8
        mask = (1 << bits) - 1

        while True:
            value = int.from_bytes(self.read_bytes(num_bytes), "big") & mask
            if value < n:
                return value
