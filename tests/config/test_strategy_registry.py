import pytest

from blazenaming import (
    DefaultNamingStrategy,
    LenientNamingStrategy,
    NamingConfigurationError,
    NamingStrategy,
    StrictNamingStrategy,
    available_naming_strategies,
    get_naming_strategy,
    register_naming_strategy,
)
from blazenaming import config


def test_default_strategy_is_lenient():
    assert type(get_naming_strategy()) is LenientNamingStrategy


@pytest.mark.parametrize(
    "name, expected",
    [
        ("lenient", LenientNamingStrategy),
        ("postgres", LenientNamingStrategy),
        (" Strict ", StrictNamingStrategy),
        ("SNAKE", StrictNamingStrategy),
    ],
)
def test_lookup_by_name(name, expected):
    assert type(get_naming_strategy(name)) is expected


def test_instances_pass_through():
    strategy = StrictNamingStrategy()
    assert get_naming_strategy(strategy) is strategy


def test_unknown_name_lists_known_strategies():
    with pytest.raises(NamingConfigurationError) as excinfo:
        get_naming_strategy("camel")
    assert "strict" in str(excinfo.value)


def test_register_custom_strategy(monkeypatch):
    monkeypatch.setattr(config, "_registry", dict(config._registry))

    class ShoutingStrategy(LenientNamingStrategy):
        def relation_name(self, property_name):
            return super().relation_name(property_name).upper()

    register_naming_strategy("Shouting", ShoutingStrategy)
    assert "shouting" in available_naming_strategies()
    assert get_naming_strategy("shouting").relation_name("authorId") == "AUTHOR_ID"


def test_register_rejects_empty_name():
    with pytest.raises(NamingConfigurationError):
        register_naming_strategy("  ", LenientNamingStrategy)


@pytest.mark.parametrize("name", available_naming_strategies())
def test_registered_strategies_satisfy_protocol(name):
    strategy = get_naming_strategy(name)
    assert isinstance(strategy, NamingStrategy)
    assert strategy.join_table_inverse_column_name("users", "id") == "user_id"
    assert strategy.primary_key_name("users", ["id"]).startswith("PK_")


def test_default_strategy_is_not_a_full_naming_strategy():
    assert not isinstance(DefaultNamingStrategy(), NamingStrategy)
