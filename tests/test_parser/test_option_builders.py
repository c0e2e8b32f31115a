import pytest
from pydantic import TypeAdapter, ValidationError

from argtree.exceptions import StructuralDefinitionError
from argtree.parser import (
    BooleanOption,
    NumberOption,
    Option,
    PositionalOption,
    StringOption,
    boolean,
    number,
    positional,
    string,
)


def test_builders_produce_tagged_variants():
    assert isinstance(string(), StringOption) and string().kind == "string"
    assert isinstance(number(), NumberOption) and number().kind == "number"
    assert isinstance(boolean(), BooleanOption) and boolean().kind == "boolean"
    assert isinstance(positional(), PositionalOption) and positional().kind == "positional"


def test_modifiers_return_new_instances():
    base = string().alias("e")
    env = base.enum("prod", "dev").required()
    region = base.default("eu-west-1")

    assert base.choices is None
    assert base.is_required is False
    assert base.default_value is None
    assert env.choices == ("prod", "dev")
    assert env.is_required is True
    assert env.aliases == ("e",)
    assert region.default_value == "eu-west-1"
    assert region.choices is None


def test_modifiers_chain_across_kinds():
    count = number("count").int().min(1).max(10).default(3).desc("How many").hide()
    assert count.name == "count"
    assert count.is_int is True
    assert (count.min_value, count.max_value) == (1, 10)
    assert count.default_value == 3
    assert count.description == "How many"
    assert count.is_hidden is True


def test_alias_accumulates():
    option = boolean().alias("d").alias("n", "dry-run")
    assert option.aliases == ("d", "n", "dry-run")


def test_options_are_frozen():
    option = string("name")
    with pytest.raises(ValidationError):
        option.name = "other"


def test_min_greater_than_max_rejected():
    with pytest.raises(StructuralDefinitionError):
        number().min(5).max(1)


@pytest.mark.parametrize(
    "build",
    [
        lambda: number().int().default(1.5),
        lambda: number().default("3"),
        lambda: number().default(True),
        lambda: number().min(2).default(1),
        lambda: number().max(2).default(3),
        lambda: number().max(3).min("5"),
        lambda: number().min(True),
        lambda: string().default(3),
        lambda: string().enum("a", "b").default("c"),
        lambda: string().enum(),
        lambda: boolean().default("yes"),
        lambda: positional().enum("a").default("b"),
    ],
)
def test_inconsistent_definitions_rejected(build):
    with pytest.raises(StructuralDefinitionError):
        build()


def test_option_dicts_validate_by_kind():
    adapter = TypeAdapter(Option)
    option = adapter.validate_python({"kind": "number", "is_int": True, "min_value": 1})
    assert isinstance(option, NumberOption)
    assert option.is_int is True

    option = adapter.validate_python({"kind": "positional", "choices": ["a", "b"]})
    assert isinstance(option, PositionalOption)
    assert option.choices == ("a", "b")


def test_unknown_fields_rejected_for_kind():
    with pytest.raises(ValidationError):
        TypeAdapter(Option).validate_python({"kind": "boolean", "choices": ["a"]})
