import logging

import pytest

from jargs import OptionRegistry, OptionSpec
from jargs.exceptions import InvalidOptionError


def noop(value):
    pass


def test_register_preserves_order():
    registry = OptionRegistry()
    first = OptionSpec.value("a", "alpha", "Alpha", noop)
    second = OptionSpec.value("b", None, "Beta", noop)
    third = OptionSpec.value(None, "gamma", "Gamma", noop)
    for spec in (first, second, third):
        registry.register(spec)

    assert list(registry) == [first, second, third]
    assert len(registry) == 3
    assert str(registry) == "OptionRegistry(options=3)"


def test_find_by_short_and_long():
    registry = OptionRegistry()
    spec = OptionSpec.value("a", "alpha", "Alpha", noop)
    registry.register(spec)

    assert registry.find_by_short("a") is spec
    assert registry.find_by_long("alpha") is spec
    assert registry.find_by_short("b") is None
    assert registry.find_by_long("alp") is None
    assert registry.find_by_long("") is None


def test_long_only_option_never_matches_short_lookup():
    registry = OptionRegistry()
    registry.register(OptionSpec.value(None, "alpha", "Alpha", noop))
    assert registry.find_by_short("\0") is None


def test_duplicates_first_wins_and_warn(caplog):
    registry = OptionRegistry()
    first = OptionSpec.value("a", "alpha", "First", noop)
    second = OptionSpec.value("a", "alpha", "Second", noop)
    registry.register(first)
    with caplog.at_level(logging.WARNING, logger="jargs"):
        registry.register(second)

    assert registry.find_by_short("a") is first
    assert registry.find_by_long("alpha") is first
    assert "Short option '-a' is already registered" in caplog.text
    assert "Long option '--alpha' is already registered" in caplog.text


@pytest.mark.parametrize(
    "short_name, long_name",
    [
        (None, None),
        ("ab", None),
        ("", None),
        ("-", None),
        (None, ""),
        (None, "--alpha"),
        (None, "al=pha"),
    ],
)
def test_invalid_names_rejected(short_name, long_name):
    registry = OptionRegistry()
    with pytest.raises(InvalidOptionError):
        registry.register(OptionSpec(short_name, long_name, "Bad", False, noop))
    assert len(registry) == 0


def test_non_callable_action_rejected():
    registry = OptionRegistry()
    with pytest.raises(InvalidOptionError, match="must be callable"):
        registry.register(OptionSpec("a", None, "Bad", False, "not callable"))
