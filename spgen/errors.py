"""Errors raised while validating a configuration or generating a password."""

__all__ = [
    "ConfigurationError",
    "EmptyCharacterSet",
    "InvalidLength",
    "InvalidSymbolCombination",
    "PasswordGenerationError",
    "RngInitializationError",
]


class PasswordGenerationError(Exception):
    """Base exception for spgen errors."""


class ConfigurationError(PasswordGenerationError, ValueError):
    """The configuration was rejected before generation started."""


class InvalidLength(ConfigurationError):
    """Requested length is outside the supported range."""


class InvalidSymbolCombination(ConfigurationError):
    """Extended symbols were requested without the base symbol set."""


class EmptyCharacterSet(PasswordGenerationError):
    """The character universe ended up with no characters."""


class RngInitializationError(PasswordGenerationError):
    """The OS entropy source could not seed the generator."""
