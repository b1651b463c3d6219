"""
Character universe: the ordered pool of characters a password is drawn from.
"""

from __future__ import annotations

import logging
import string

from .errors import EmptyCharacterSet

logger = logging.getLogger(__name__)

# Base set: digits, then lowercase, then uppercase (62 characters).
ALPHANUMERIC = string.digits + string.ascii_lowercase + string.ascii_uppercase
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"
# Opt-in only: quotes and slashes tend to break shells and config files.
EXTENDED_SYMBOLS = "`\"'/\\"
SPACE = " "


def build_universe(
    include_symbols: bool,
    include_extended: bool,
    allow_space: bool,
    *,
    include_alphanumeric: bool = True,
) -> str:
    """
    Assemble the characters eligible for sampling, in a fixed order.

    Extended symbols are only added on top of the symbol set; asking for
    them alone adds nothing here (the config gate rejects that combination).
    Raises EmptyCharacterSet if nothing ends up in the universe.
    """
    parts: list[str] = []
    if include_alphanumeric:
        parts.append(ALPHANUMERIC)
    if include_symbols:
        parts.append(SYMBOLS)
        if include_extended:
            parts.append(EXTENDED_SYMBOLS)
    if allow_space:
        parts.append(SPACE)

    universe = "".join(parts)
    if not universe:
        raise EmptyCharacterSet("No characters are enabled for the password.")

    logger.debug("Built character universe of %d characters", len(universe))
    return universe
