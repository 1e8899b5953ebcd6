# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Conversion between schema-definition trees and the schema model.

A schema-definition tree is the already-parsed JSON form of a JTD schema,
e.g. ``{"properties": {"name": {"type": "string"}}}``. Parsing it checks
keyword names and keyword value types (against the bundled JSON Schema) and
the combination of form keywords. It does not resolve refs or look at
relations between nodes; that is done by the validity checker.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from jsonschema.exceptions import best_match

from ..exceptions import MalformedSchemaError
from ..models.json_schema_loader import get_validator
from ..models.schema import (
    DiscriminatorForm,
    ElementsForm,
    EmptyForm,
    EnumForm,
    Form,
    PropertiesForm,
    RefForm,
    Schema,
    TypeForm,
    TypeKind,
    ValuesForm,
)
from ..utils.json_pointer import join_path, to_pointer

logger = logging.getLogger(__name__)


# Keywords that decide the form, in signature order. "definitions",
# "nullable" and "metadata" restrict nothing and are left out.
FORM_KEYWORDS: Tuple[str, ...] = (
    "ref",
    "type",
    "enum",
    "elements",
    "properties",
    "optionalProperties",
    "additionalProperties",
    "values",
    "discriminator",
    "mapping",
)


def _signature(*present: str) -> Tuple[bool, ...]:
    return tuple(keyword in present for keyword in FORM_KEYWORDS)


VALID_FORM_SIGNATURES = frozenset(
    {
        _signature(),
        _signature("ref"),
        _signature("type"),
        _signature("enum"),
        _signature("elements"),
        # additionalProperties is never valid on its own
        _signature("properties"),
        _signature("optionalProperties"),
        _signature("properties", "optionalProperties"),
        _signature("properties", "additionalProperties"),
        _signature("optionalProperties", "additionalProperties"),
        _signature("properties", "optionalProperties", "additionalProperties"),
        _signature("values"),
        _signature("discriminator", "mapping"),
    }
)


def parse_schema(definition: Any) -> Schema:
    """Build a :class:`Schema` from a schema-definition tree.

    Args:
        definition: Parsed JSON value describing the schema

    Returns:
        The schema model

    Raises:
        MalformedSchemaError: If a keyword is unknown, has the wrong JSON type,
            or the form keywords are mixed
    """
    if not isinstance(definition, dict):
        raise MalformedSchemaError(
            f"Schema must be a JSON object, got {type(definition).__name__}"
        )

    error = best_match(get_validator().iter_errors(definition))
    if error is not None:
        raise MalformedSchemaError(error.message, to_pointer(error.absolute_path))

    schema = _build(definition, "")
    logger.debug("Parsed schema of form '%s' with %d definitions", schema.form_name, len(schema.definitions))
    return schema


def _build(definition: Dict[str, Any], pointer: str) -> Schema:
    signature = tuple(keyword in definition for keyword in FORM_KEYWORDS)
    if signature not in VALID_FORM_SIGNATURES:
        used = ", ".join(k for k in FORM_KEYWORDS if k in definition)
        raise MalformedSchemaError(f"Invalid combination of keywords in schema: {used}", pointer)

    definitions = {
        name: _build(sub, join_path(join_path(pointer, "definitions"), name))
        for name, sub in definition.get("definitions", {}).items()
    }

    return Schema(
        form=_build_form(definition, pointer),
        nullable=definition.get("nullable", False),
        metadata=dict(definition.get("metadata", {})),
        definitions=definitions,
    )


def _build_form(definition: Dict[str, Any], pointer: str) -> Form:
    if "ref" in definition:
        return RefForm(definition["ref"])

    if "type" in definition:
        return TypeForm(TypeKind(definition["type"]))

    if "enum" in definition:
        return EnumForm(tuple(definition["enum"]))

    if "elements" in definition:
        return ElementsForm(_build(definition["elements"], join_path(pointer, "elements")))

    if "properties" in definition or "optionalProperties" in definition:
        return PropertiesForm(
            required=_build_map(definition.get("properties", {}), join_path(pointer, "properties")),
            optional=_build_map(
                definition.get("optionalProperties", {}), join_path(pointer, "optionalProperties")
            ),
            additional_allowed=definition.get("additionalProperties", False),
            required_present="properties" in definition,
        )

    if "values" in definition:
        return ValuesForm(_build(definition["values"], join_path(pointer, "values")))

    if "discriminator" in definition:
        return DiscriminatorForm(
            tag=definition["discriminator"],
            mapping=_build_map(definition["mapping"], join_path(pointer, "mapping")),
        )

    return EmptyForm()


def _build_map(definitions: Dict[str, Any], pointer: str) -> Dict[str, Schema]:
    return {name: _build(sub, join_path(pointer, name)) for name, sub in definitions.items()}


def schema_to_definition(schema: Schema) -> Dict[str, Any]:
    """Convert a :class:`Schema` back into a schema-definition tree.

    Keywords holding default values (``nullable: false``, empty ``metadata``,
    ``additionalProperties: false``, ...) are left out.
    """
    result: Dict[str, Any] = {}

    if schema.definitions:
        result["definitions"] = {
            name: schema_to_definition(sub) for name, sub in schema.definitions.items()
        }
    if schema.nullable:
        result["nullable"] = True
    if schema.metadata:
        result["metadata"] = dict(schema.metadata)

    form = schema.form
    if isinstance(form, RefForm):
        result["ref"] = form.name
    elif isinstance(form, TypeForm):
        result["type"] = TypeKind(form.kind).value
    elif isinstance(form, EnumForm):
        result["enum"] = list(form.values)
    elif isinstance(form, ElementsForm):
        result["elements"] = schema_to_definition(form.schema)
    elif isinstance(form, PropertiesForm):
        if form.required_present or form.required:
            result["properties"] = _map_to_definition(form.required)
        if form.optional or "properties" not in result:
            result["optionalProperties"] = _map_to_definition(form.optional)
        if form.additional_allowed:
            result["additionalProperties"] = True
    elif isinstance(form, ValuesForm):
        result["values"] = schema_to_definition(form.schema)
    elif isinstance(form, DiscriminatorForm):
        result["discriminator"] = form.tag
        result["mapping"] = _map_to_definition(form.mapping)

    return result


def _map_to_definition(schemas) -> Dict[str, Any]:
    return {name: schema_to_definition(sub) for name, sub in schemas.items()}
