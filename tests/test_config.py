import dataclasses

import pytest

from spgen.config import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, PassConfig
from spgen.errors import ConfigurationError, InvalidLength, InvalidSymbolCombination


def test_defaults() -> None:
    assert DEFAULT_CONFIG.length == 36
    assert not DEFAULT_CONFIG.include_symbols
    assert not DEFAULT_CONFIG.include_extended_symbols
    assert not DEFAULT_CONFIG.allow_space
    assert DEFAULT_CONFIG.validate() is DEFAULT_CONFIG


def test_config_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.length = 10  # type: ignore[misc]


@pytest.mark.parametrize("length", [MIN_LENGTH, 2, 256, MAX_LENGTH])
def test_valid_lengths(length: int) -> None:
    PassConfig(length=length).validate()


@pytest.mark.parametrize("length", [-1, 0, MAX_LENGTH + 1, 10_000])
def test_out_of_range_lengths(length: int) -> None:
    with pytest.raises(InvalidLength):
        PassConfig(length=length).validate()


@pytest.mark.parametrize("length", [True, 12.0, "12", None])
def test_non_integer_lengths(length: object) -> None:
    with pytest.raises(InvalidLength):
        PassConfig(length=length).validate()  # type: ignore[arg-type]


def test_extended_requires_symbols() -> None:
    with pytest.raises(InvalidSymbolCombination):
        PassConfig(include_extended_symbols=True).validate()


def test_extended_with_symbols_is_valid() -> None:
    PassConfig(include_symbols=True, include_extended_symbols=True).validate()


def test_configuration_errors_are_value_errors() -> None:
    assert issubclass(InvalidLength, ConfigurationError)
    assert issubclass(InvalidSymbolCombination, ValueError)
