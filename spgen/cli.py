"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .charsets import build_universe
from .config import DEFAULT_CONFIG, MAX_LENGTH, PassConfig
from .errors import ConfigurationError, PasswordGenerationError
from .logging_config import setup_logging
from .mapping import generate

logger = logging.getLogger(__name__)


def generate_password(config: PassConfig | None = None) -> str:
    """
    High-level function:
    - Validate the configuration.
    - Build the character universe for it.
    - Sample the password from a freshly seeded engine.
    """
    cfg = (config or DEFAULT_CONFIG).validate()

    universe = build_universe(
        cfg.include_symbols,
        cfg.include_extended_symbols,
        cfg.allow_space,
    )
    return generate(universe, cfg.length)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spgen",
        description=(
            "Generate a random string of fixed length from alphanumeric "
            "characters and, optionally, symbols acceptable in passwords."
        ),
    )
    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=DEFAULT_CONFIG.length,
        help=f"number of characters, max {MAX_LENGTH} (default: %(default)s)",
    )
    parser.add_argument(
        "-s",
        "--symbols",
        action="store_true",
        help="include symbols !@#$%%^&*()-_=+[]{}|;:,.<>?",
    )
    parser.add_argument(
        "-e",
        "--extended-symbols",
        action="store_true",
        help="also include ` \" ' / \\ (requires --symbols)",
    )
    parser.add_argument(
        "--space", action="store_true", help="allow the space character"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `spgen` script or `run_spgen.py`.

    Prints the password alone on stdout. Returns 2 for a rejected
    configuration, 1 if generation itself failed.
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = PassConfig(
        length=args.length,
        include_symbols=args.symbols,
        include_extended_symbols=args.extended_symbols,
        allow_space=args.space,
    )

    try:
        password = generate_password(config)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except PasswordGenerationError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(password)
    return 0
