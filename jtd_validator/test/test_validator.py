"""
Unit tests for instance validation.

Expected indicators are written as (instance_path, schema_path) tuples and
compared as exact, ordered sequences.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from jtd_validator import (
    InvalidReferenceError,
    MaxDepthExceededError,
    OptionsError,
    ValidateOptions,
    ValidationErrorIndicator,
    Validator,
    is_valid,
    parse_schema,
    validate,
)


def run(definition, instance, **options):
    errors = validate(parse_schema(definition), instance, ValidateOptions(**options))
    return [(list(e.instance_path), list(e.schema_path)) for e in errors]


DISCRIMINATOR = {
    "discriminator": "kind",
    "mapping": {"a": {"properties": {"x": {"type": "string"}}}},
}

TREE = {
    "definitions": {"node": {"optionalProperties": {"child": {"ref": "node"}}}},
    "ref": "node",
}


def nested(depth):
    instance = {}
    for _ in range(depth):
        instance = {"child": instance}
    return instance


# Basic cases


def test_string_accepts_string():
    assert run({"type": "string"}, "abc") == []


def test_string_rejects_number():
    assert run({"type": "string"}, 42) == [([], ["type"])]


def test_elements_report_bad_index():
    assert run({"elements": {"type": "string"}}, ["a", 1, "c"]) == [(["1"], ["elements", "type"])]


def test_missing_required_property_reported_at_parent():
    assert run({"properties": {"name": {"type": "string"}}}, {}) == [([], ["properties", "name"])]


def test_discriminator_tag_not_in_mapping():
    assert run(DISCRIMINATOR, {"kind": "b"}) == [(["kind"], ["mapping"])]


def test_ref_cycle_with_max_depth_aborts():
    with pytest.raises(MaxDepthExceededError) as exc_info:
        run(TREE, nested(5), max_depth=3)
    assert exc_info.value.max_depth == 3
    assert exc_info.value.instance_path == ("child", "child", "child")


# Forms


def test_empty_accepts_anything():
    for instance in (None, True, 1, 1.5, "a", [1], {"a": 1}):
        assert run({}, instance) == []


@pytest.mark.parametrize(
    "type_name, instance, valid",
    [
        ("boolean", True, True),
        ("boolean", False, True),
        ("boolean", 1, False),
        ("boolean", None, False),
        ("string", "", True),
        ("string", 1, False),
        ("float32", 1, True),
        ("float32", 1.5, True),
        ("float64", -3.25e10, True),
        ("float64", True, False),
        ("float64", "1", False),
        ("int8", 127, True),
        ("int8", -128, True),
        ("int8", 128, False),
        ("int8", -129, False),
        ("int8", 1.0, True),
        ("int8", 1.5, False),
        ("int8", True, False),
        ("uint8", 0, True),
        ("uint8", 255, True),
        ("uint8", -1, False),
        ("uint8", 256, False),
        ("int16", -32768, True),
        ("int16", 32768, False),
        ("uint16", 65535, True),
        ("uint16", 65536, False),
        ("int32", 2147483647, True),
        ("int32", -2147483649, False),
        ("uint32", 4294967295, True),
        ("uint32", 4294967296, False),
        ("uint32", "1", False),
        ("timestamp", "1985-04-12T23:20:50.52Z", True),
        ("timestamp", "1990-12-31T23:59:60Z", True),
        ("timestamp", "1990-12-31t15:59:60-08:00", True),
        ("timestamp", "1937-01-01T12:00:27.87+00:20", True),
        ("timestamp", "2020-02-29T00:00:00Z", True),
        ("timestamp", "2021-02-29T00:00:00Z", False),
        ("timestamp", "1985-04-12", False),
        ("timestamp", "1985-04-12T23:20:50", False),
        ("timestamp", "1985-04-12T24:00:00Z", False),
        ("timestamp", "1985-04-12T23:20:50Z\n", False),
        ("timestamp", 0, False),
    ],
)
def test_type_form(type_name, instance, valid):
    expected = [] if valid else [([], ["type"])]
    assert run({"type": type_name}, instance) == expected


def test_nullable():
    assert run({"type": "string", "nullable": True}, None) == []
    assert run({"type": "string"}, None) == [([], ["type"])]
    assert run({"elements": {}, "nullable": True}, None) == []


def test_enum_form():
    schema = {"enum": ["a", "b"]}
    assert run(schema, "a") == []
    assert run(schema, "c") == [([], ["enum"])]
    assert run(schema, 1) == [([], ["enum"])]


def test_elements_not_array():
    assert run({"elements": {}}, {"0": 1}) == [([], ["elements"])]


def test_values_form():
    schema = {"values": {"type": "uint8"}}
    assert run(schema, {}) == []
    assert run(schema, {"a": 1, "b": 300, "c": -1}) == [
        (["b"], ["values", "type"]),
        (["c"], ["values", "type"]),
    ]
    assert run(schema, [1]) == [([], ["values"])]


def test_properties_not_object():
    assert run({"properties": {"a": {}}}, []) == [([], ["properties"])]
    assert run({"optionalProperties": {"a": {}}}, 3) == [([], ["optionalProperties"])]
    assert run({"properties": {}, "optionalProperties": {"a": {}}}, "x") == [([], ["properties"])]


def test_properties_error_order():
    schema = {
        "properties": {"b": {"type": "string"}, "a": {"type": "string"}},
        "optionalProperties": {"c": {"type": "string"}},
    }
    instance = {"z": 1, "c": 1, "y": 2}
    assert run(schema, instance) == [
        ([], ["properties", "b"]),
        ([], ["properties", "a"]),
        (["c"], ["optionalProperties", "c", "type"]),
        (["z"], []),
        (["y"], []),
    ]


def test_additional_properties_allowed():
    schema = {"properties": {"a": {}}, "additionalProperties": True}
    assert run(schema, {"a": 1, "b": 2}) == []


def test_additional_property_path_is_properties_node():
    schema = {"elements": {"optionalProperties": {"a": {}}}}
    assert run(schema, [{"a": 1}, {"b": 2}]) == [(["1", "b"], ["elements"])]


def test_ref_restarts_schema_path_at_definition():
    schema = {
        "definitions": {"s": {"type": "string"}},
        "properties": {"a": {"ref": "s"}},
    }
    assert run(schema, {"a": 1}) == [(["a"], ["definitions", "s", "type"])]


def test_nullable_ref():
    schema = {"definitions": {"s": {"type": "string"}}, "ref": "s", "nullable": True}
    assert run(schema, None) == []


def test_recursive_schema_validates_nested_data():
    assert run(TREE, nested(5)) == []
    assert run(TREE, {"child": {"child": {"child": 3}}}) == [
        (["child", "child", "child"], ["definitions", "node", "optionalProperties"])
    ]


# Discriminator


@pytest.mark.parametrize(
    "instance, expected",
    [
        ("foo", [([], ["discriminator"])]),
        ({}, [([], ["discriminator"])]),
        ({"kind": 1}, [(["kind"], ["discriminator"])]),
        ({"kind": None}, [(["kind"], ["discriminator"])]),
        ({"kind": "a", "x": "s"}, []),
        ({"kind": "a"}, [([], ["mapping", "a", "properties", "x"])]),
        ({"kind": "a", "x": 1}, [(["x"], ["mapping", "a", "properties", "x", "type"])]),
        ({"kind": "a", "x": "s", "extra": 1}, [(["extra"], ["mapping", "a"])]),
    ],
)
def test_discriminator_form(instance, expected):
    assert run(DISCRIMINATOR, instance) == expected


def test_nullable_discriminator():
    assert run(dict(DISCRIMINATOR, nullable=True), None) == []


# Options


def test_max_errors_truncates():
    assert len(run({"elements": {"type": "string"}}, [None] * 5, max_errors=3)) == 3


def test_max_errors_results_are_prefixes():
    schema = {
        "properties": {"a": {"type": "string"}, "b": {"elements": {"type": "int8"}}},
        "optionalProperties": {"c": {"values": {"type": "boolean"}}},
    }
    instance = {"b": [1, 1000, "x", 2.5], "c": {"p": 1, "q": True, "r": "no"}, "d": 0}
    full = run(schema, instance)
    assert len(full) == 7
    for k in range(1, len(full) + 2):
        assert run(schema, instance, max_errors=k) == full[:k]


def test_max_depth_loop_on_null():
    schema = {"definitions": {"loop": {"ref": "loop"}}, "ref": "loop"}
    with pytest.raises(MaxDepthExceededError):
        run(schema, None, max_depth=3)


def test_max_depth_counts_nested_refs():
    schema = {
        "definitions": {
            "a": {"ref": "b"},
            "b": {"ref": "c"},
            "c": {"type": "string"},
        },
        "ref": "a",
    }
    assert run(schema, "x", max_depth=3) == []
    with pytest.raises(MaxDepthExceededError):
        run(schema, "x", max_depth=2)


def test_max_depth_applies_per_path():
    schema = {
        "definitions": {"s": {"type": "string"}},
        "elements": {"ref": "s"},
    }
    assert run(schema, ["a", "b", "c", "d"], max_depth=1) == []


@pytest.mark.parametrize(
    "options",
    [
        {"max_depth": -1},
        {"max_errors": -5},
        {"max_errors": "3"},
        {"max_depth": 1.5},
        {"max_depth": True},
    ],
)
def test_invalid_options(options):
    with pytest.raises(OptionsError):
        ValidateOptions(**options)
    with pytest.raises(ValueError):
        ValidateOptions(**options)


def test_options_builders():
    options = ValidateOptions().with_max_depth(4).with_max_errors(2)
    assert options == ValidateOptions(max_depth=4, max_errors=2)


# Validator / entry points


def test_invalid_schema_is_rejected():
    schema = parse_schema({"ref": "missing"})
    with pytest.raises(InvalidReferenceError):
        validate(schema, "anything")
    with pytest.raises(InvalidReferenceError):
        Validator(schema)


def test_validation_is_idempotent():
    validator = Validator(parse_schema({"values": {"enum": ["x"]}}))
    instance = {"a": "x", "b": "y", "c": 3}
    assert validator.validate(instance) == validator.validate(instance)


def test_validator_options_override():
    validator = Validator(parse_schema({"elements": {"type": "string"}}), ValidateOptions(max_errors=1))
    assert len(validator.validate([1, 2, 3])) == 1
    assert len(validator.validate([1, 2, 3], ValidateOptions())) == 3


def test_is_valid():
    schema = parse_schema({"elements": {"type": "uint8"}})
    assert is_valid(schema, [1, 2, 3])
    assert not is_valid(schema, [1, 2, 300])
    assert Validator(schema).is_valid([])


def test_validator_shared_between_threads():
    validator = Validator(parse_schema(TREE))
    instances = [nested(n) for n in range(20)] + [{"child": 1}] * 5
    expected = [validator.validate(i) for i in instances]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(validator.validate, instances))

    assert results == expected


# Indicators


def test_indicator_pointers_and_dict():
    indicator = ValidationErrorIndicator(("a/b", "0"), ("properties", "a~b", "type"))
    assert indicator.instance_pointer == "/a~1b/0"
    assert indicator.schema_pointer == "/properties/a~0b/type"
    assert indicator.to_dict() == {
        "instancePath": ["a/b", "0"],
        "schemaPath": ["properties", "a~b", "type"],
    }


def test_indicators_are_hashable_and_comparable():
    first = ValidationErrorIndicator((), ("type",))
    second = ValidationErrorIndicator((), ("type",))
    assert first == second
    assert len({first, second}) == 1
    assert str(first) == "/ rejected by /type"
