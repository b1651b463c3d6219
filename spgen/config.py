"""
Configuration for the secure password generator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidLength, InvalidSymbolCombination

MIN_LENGTH = 1
MAX_LENGTH = 512


@dataclass(frozen=True)
class PassConfig:
    # Desired password length in characters, within [MIN_LENGTH, MAX_LENGTH].
    length: int = 36

    # Append the symbol set !@#$%^&*()-_=+[]{}|;:,.<>? to the universe.
    include_symbols: bool = False

    # Append ` " ' / \ as well. Only meaningful on top of include_symbols.
    include_extended_symbols: bool = False

    # Append a single space character.
    allow_space: bool = False

    def validate(self) -> "PassConfig":
        """
        Reject configurations the generator must never see:

        - a length that is not an integer in [MIN_LENGTH, MAX_LENGTH]
        - extended symbols requested without the base symbol set

        Returns self so callers can chain it.
        """
        # bool is an int subclass, but True is not a length.
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidLength(
                f"Password length must be an integer, got {self.length!r}."
            )
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidLength(
                f"Password length must be between {MIN_LENGTH} and "
                f"{MAX_LENGTH}, got {self.length}."
            )
        if self.include_extended_symbols and not self.include_symbols:
            raise InvalidSymbolCombination(
                "Extended symbols can only be enabled together with symbols."
            )
        return self


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PassConfig()
