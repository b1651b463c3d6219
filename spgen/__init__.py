"""
Secure fixed-length password generator package.
"""

__version__ = "1.0.0"

from .charsets import build_universe
from .cli import generate_password
from .config import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, PassConfig
from .errors import (
    ConfigurationError,
    EmptyCharacterSet,
    InvalidLength,
    InvalidSymbolCombination,
    PasswordGenerationError,
    RngInitializationError,
)
from .mapping import generate

__all__ = [
    "PassConfig",
    "DEFAULT_CONFIG",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "build_universe",
    "generate",
    "generate_password",
    "ConfigurationError",
    "EmptyCharacterSet",
    "InvalidLength",
    "InvalidSymbolCombination",
    "PasswordGenerationError",
    "RngInitializationError",
]
