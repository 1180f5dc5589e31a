"""Tests for join configuration parsing and default resolution."""

import pytest
from pydantic import ValidationError

from orm_helpers import JoinConfig, JoinConfigError, UnresolvedNameError, resolve_defaults


class Foo_Bar:
    __module__ = "myapp"


def test_from_params_merges_keywords_over_mapping():
    config = JoinConfig.from_params({"left_class": "Foo", "right_class": "Bar"}, right_class="Baz")
    assert config.left_class == "Foo"
    assert config.right_class == "Baz"


def test_from_params_returns_existing_config():
    config = JoinConfig(left_class="Foo", right_class="Bar")
    assert JoinConfig.from_params(config) is config
    assert JoinConfig.from_params(config, left_method="f").left_method == "f"


@pytest.mark.parametrize(
    "params",
    [
        {"right_class": "Bar"},
        {"left_class": "Foo"},
        {"left_class": "  ", "right_class": "Bar"},
        {"left_class": "Foo", "right_class": "Bar", "bogus": "x"},
        {"left_class": None, "right_class": "Bar"},
    ],
)
def test_invalid_params_fail_fast(params):
    with pytest.raises(JoinConfigError):
        JoinConfig.from_params(params)


def test_non_mapping_params_rejected():
    with pytest.raises(JoinConfigError):
        JoinConfig.from_params(["Foo", "Bar"])


def test_join_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        JoinConfig.from_params({})


def test_blank_optional_names_are_absent():
    config = JoinConfig.from_params(left_class="Foo", right_class="Bar", left_method="", namespace=" ")
    assert config.left_method is None
    assert config.namespace is None


def test_config_is_frozen():
    config = JoinConfig(left_class="Foo", right_class="Bar")
    with pytest.raises(ValidationError):
        config.left_class = "Baz"


def test_resolve_fills_every_name():
    config = resolve_defaults(JoinConfig(left_class="CityHall", right_class="Bar"), Foo_Bar)

    assert config.namespace == "myapp"
    assert config.left_method == "city_hall"
    assert config.right_method == "bar"
    assert config.self_method == "foo_bar"
    assert config.left_method_plural == "city_halls"
    assert config.right_method_plural == "bars"
    assert config.self_method_plural == "foo_bars"


def test_resolve_keeps_explicit_values():
    given = JoinConfig(
        left_class="Foo",
        right_class="Bar",
        left_method="lefty",
        right_method="righty",
        namespace="other",
        self_method_plural="links",
    )
    config = resolve_defaults(given, Foo_Bar)

    assert config.left_method == "lefty"
    assert config.right_method == "righty"
    assert config.namespace == "other"
    assert config.self_method_plural == "links"
    assert config.left_method_plural == "lefties"
    assert config.right_method_plural == "righties"


def test_resolve_does_not_mutate_input():
    given = JoinConfig(left_class="Foo", right_class="Bar")
    resolve_defaults(given, Foo_Bar)
    assert given.left_method is None


def test_resolve_reaches_fixed_point_in_one_pass():
    once = resolve_defaults(JoinConfig(left_class="Foo", right_class="Bar"), Foo_Bar)
    twice = resolve_defaults(once, Foo_Bar)
    assert twice == once
    assert twice is once


def test_resolve_without_decamelizer_leaves_methods_unresolved():
    config = resolve_defaults(JoinConfig(left_class="Foo", right_class="Bar"), Foo_Bar, decamelize=None)

    assert config.namespace == "myapp"
    assert config.left_method is None
    assert config.left_method_plural is None
    with pytest.raises(UnresolvedNameError) as info:
        config.foreign_keys()
    assert info.value.field == "left_method"


def test_resolve_without_decamelizer_uses_explicit_methods():
    given = JoinConfig(left_class="Foo", right_class="Bar", left_method="foo", right_method="bar")
    config = resolve_defaults(given, Foo_Bar, decamelize=None)

    assert config.foreign_keys() == ("foo_id", "bar_id")
    assert config.right_method_plural == "bars"
    assert config.self_method is None


def test_resolve_with_injected_naming_functions():
    config = resolve_defaults(
        JoinConfig(left_class="Foo", right_class="Bar"),
        Foo_Bar,
        decamelize=str.lower,
        pluralize=lambda name: name + "z",
    )
    assert config.left_method == "foo"
    assert config.self_method == "foo_bar"
    assert config.left_method_plural == "fooz"


def test_table_name_and_refs():
    config = resolve_defaults(JoinConfig(left_class="Foo", right_class="Bar"), Foo_Bar)
    assert config.table_name() == "Foo_Bar"
    assert str(config.left_ref()) == "myapp.Foo"
    assert str(config.right_ref()) == "myapp.Bar"
