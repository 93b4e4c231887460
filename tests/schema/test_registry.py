import pytest
from pydantic import ValidationError

from prefhints.domain.types import ValueType
from prefhints.schema.models import PreferenceDefinition, SchemaEntry
from prefhints.schema.registry import SchemaRegistry, merge_entries

from tests.conftest import PREFERENCES


def test_builtin_root_entries_always_exist() -> None:
    registry = SchemaRegistry.build({})

    assert list(registry) == ["language", "path"]
    assert registry["language"].value_type is ValueType.OBJECT
    assert registry["language"].description == "Language specific preferences"


def test_discovered_entry_amends_builtin(registry) -> None:
    assert registry["path"].description == "Per-path overrides"
    assert registry["path"].value_type is ValueType.OBJECT


def test_excluded_and_malformed_descriptors_are_skipped(registry) -> None:
    assert "styleActiveLine" not in registry
    assert "broken" not in registry
    assert "closeBrackets" in registry


def test_registry_keeps_registration_order(registry) -> None:
    expected = ["language", "path"] + [
        key for key in PREFERENCES if key not in ("path", "styleActiveLine", "broken")
    ]

    assert list(registry) == expected


def test_nested_keys_become_child_entries(registry) -> None:
    children = registry.children_of("jslint.options")

    assert list(children) == ["es5", "indent", "predef"]
    assert children["indent"].allowed_values == (2, 4)


def test_option_lookup_prefers_nested_definition(registry) -> None:
    assert registry.option_for("jslint.options", "indent").value_type is ValueType.NUMBER
    assert registry.option_for("javascript", "spaceUnits").key == "spaceUnits"
    assert registry.option_for("", "missing") is None


def test_unknown_type_degrades_to_none() -> None:
    definition = PreferenceDefinition.model_validate({"type": "color"})

    assert definition.type is ValueType.NONE


def test_children_require_object_type() -> None:
    with pytest.raises(ValidationError):
        SchemaEntry(key="x", value_type=ValueType.STRING, children={})


def test_merge_is_last_write_wins_without_erasing() -> None:
    existing = SchemaEntry(key="k", value_type=ValueType.STRING, description="old", allowed_values=("a",))
    incoming = SchemaEntry(key="k", value_type=ValueType.NONE, description="new")

    merged = merge_entries(existing, incoming)

    assert merged.value_type is ValueType.STRING
    assert merged.description == "new"
    assert merged.allowed_values == ("a",)


def test_merge_unions_nested_keys() -> None:
    existing = SchemaEntry(
        key="k",
        value_type=ValueType.OBJECT,
        children={
            "a": SchemaEntry(key="a", value_type=ValueType.BOOLEAN, description="first"),
            "b": SchemaEntry(key="b", value_type=ValueType.NUMBER),
        },
    )
    incoming = SchemaEntry(
        key="k",
        value_type=ValueType.OBJECT,
        children={
            "a": SchemaEntry(key="a", value_type=ValueType.BOOLEAN),
            "c": SchemaEntry(key="c", value_type=ValueType.STRING),
        },
    )

    merged = merge_entries(existing, incoming)

    assert list(merged.children) == ["a", "b", "c"]
    assert merged.children["a"].description == "first"


def test_merge_drops_children_when_entry_stops_being_an_object() -> None:
    existing = SchemaEntry(
        key="k", value_type=ValueType.OBJECT, children={"a": SchemaEntry(key="a")}
    )

    merged = merge_entries(existing, SchemaEntry(key="k", value_type=ValueType.STRING))

    assert merged.children is None
    assert merged.value_type is ValueType.STRING


def test_build_accepts_definition_instances() -> None:
    registry = SchemaRegistry.build(
        {"wordWrap": PreferenceDefinition(type=ValueType.BOOLEAN, description="Wrap lines")}
    )

    assert registry["wordWrap"].description == "Wrap lines"
