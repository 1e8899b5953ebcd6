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

"""Static validity checks for schema models.

The checks run as separate passes over every node, in this order:

1. ``definitions`` only on the root schema
2. every ``ref`` names an existing root definition
3. every discriminator mapping value is a non-nullable properties schema that
   does not itself declare the discriminator tag
4. enums are non-empty and hold no repeated values
5. no property is both required and optional
6. every type names one of the known type kinds

Ref cycles are legal and are not reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence, Tuple, Type

from ..exceptions import (
    InvalidDiscriminatorMappingError,
    InvalidEnumError,
    InvalidPropertiesError,
    InvalidReferenceError,
    InvalidTypeError,
    NonRootDefinitionsError,
    SchemaValidityError,
)
from ..models.schema import (
    DiscriminatorForm,
    EnumForm,
    PropertiesForm,
    RefForm,
    Schema,
    TypeForm,
    TypeKind,
    walk_schema,
)
from ..utils.json_pointer import JsonPointer, to_pointer

logger = logging.getLogger(__name__)

Nodes = Sequence[Tuple[Tuple[str, ...], Schema]]


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    schema_pointer: JsonPointer
    error_type: Type[SchemaValidityError]

    def to_exception(self) -> SchemaValidityError:
        return self.error_type(self.message, self.schema_pointer)


def _check_definitions_placement(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    for path, node in nodes:
        if path and node.definitions:
            yield SchemaIssue(
                "'definitions' is only allowed on the root schema",
                to_pointer(path),
                NonRootDefinitionsError,
            )


def _check_refs(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    for path, node in nodes:
        if isinstance(node.form, RefForm) and node.form.name not in root.definitions:
            yield SchemaIssue(
                f"No such definition: '{node.form.name}'",
                to_pointer(path + ("ref",)),
                InvalidReferenceError,
            )


def _check_discriminators(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    for path, node in nodes:
        form = node.form
        if not isinstance(form, DiscriminatorForm):
            continue
        for tag_value, mapped in form.mapping.items():
            pointer = to_pointer(path + ("mapping", tag_value))
            mapped_form = mapped.form
            if not isinstance(mapped_form, PropertiesForm):
                yield SchemaIssue(
                    f"Discriminator mapping '{tag_value}' must be a properties schema, "
                    f"got {mapped.form_name}",
                    pointer,
                    InvalidDiscriminatorMappingError,
                )
            elif mapped.nullable:
                yield SchemaIssue(
                    f"Discriminator mapping '{tag_value}' must not be nullable",
                    pointer,
                    InvalidDiscriminatorMappingError,
                )
            elif form.tag in mapped_form.required or form.tag in mapped_form.optional:
                yield SchemaIssue(
                    f"Discriminator mapping '{tag_value}' redefines the tag '{form.tag}'",
                    pointer,
                    InvalidDiscriminatorMappingError,
                )


def _check_enums(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    for path, node in nodes:
        if not isinstance(node.form, EnumForm):
            continue
        pointer = to_pointer(path + ("enum",))
        values = node.form.values
        if not values:
            yield SchemaIssue("Enum must contain at least one value", pointer, InvalidEnumError)
            continue
        seen = set()
        for value in values:
            if value in seen:
                yield SchemaIssue(f"Repeated enum value '{value}'", pointer, InvalidEnumError)
                break
            seen.add(value)


def _check_properties(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    for path, node in nodes:
        form = node.form
        if not isinstance(form, PropertiesForm):
            continue
        for key in form.required:
            if key in form.optional:
                yield SchemaIssue(
                    f"Property '{key}' is both required and optional",
                    to_pointer(path + ("optionalProperties", key)),
                    InvalidPropertiesError,
                )


def _check_types(root: Schema, nodes: Nodes) -> Iterator[SchemaIssue]:
    # Parsed schemas always carry a TypeKind; programmatic ones may not.
    known = TypeKind.get_all_types()
    for path, node in nodes:
        form = node.form
        if isinstance(form, TypeForm) and form.kind not in known:
            yield SchemaIssue(
                f"Unknown type '{form.kind}'. Valid types: {list(known)}",
                to_pointer(path + ("type",)),
                InvalidTypeError,
            )


CHECK_PASSES: Tuple[Callable[[Schema, Nodes], Iterator[SchemaIssue]], ...] = (
    _check_definitions_placement,
    _check_refs,
    _check_discriminators,
    _check_enums,
    _check_properties,
    _check_types,
)


def _iter_issues(schema: Schema) -> Iterator[SchemaIssue]:
    nodes = list(walk_schema(schema))
    for check in CHECK_PASSES:
        yield from check(schema, nodes)


def find_schema_issues(schema: Schema) -> List[SchemaIssue]:
    """Return every validity problem of ``schema``, in check-pass order."""
    return list(_iter_issues(schema))


def check_schema(schema: Schema) -> None:
    """Check that ``schema`` is a valid JSON Type Definition schema.

    Raises:
        SchemaValidityError: The first problem found. The concrete subclass
            tells which rule was broken.
    """
    for issue in _iter_issues(schema):
        logger.debug("Schema check failed: %s at %s", issue.message, issue.schema_pointer or "(root)")
        raise issue.to_exception()
