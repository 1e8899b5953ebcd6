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

"""In-memory schema model.

A :class:`Schema` is an envelope holding the shared keywords (``nullable``,
``metadata``, ``definitions``) and exactly one form. Forms are a closed set
of frozen dataclasses combined in the :data:`Form` union; code dispatches on
them with ``isinstance``.

Refs hold the definition *name* only. The target is looked up in the root
schema's ``definitions`` whenever it is needed, which keeps recursive schemas
free of object cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Tuple, Union


class TypeKind(str, Enum):
    BOOLEAN = "boolean"
    STRING = "string"
    TIMESTAMP = "timestamp"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"

    @classmethod
    def get_all_types(cls) -> Tuple[str, ...]:
        return tuple(kind.value for kind in cls)


@dataclass(frozen=True)
class EmptyForm:
    pass


@dataclass(frozen=True)
class RefForm:
    name: str


@dataclass(frozen=True)
class TypeForm:
    kind: TypeKind


@dataclass(frozen=True)
class EnumForm:
    # Declaration order; duplicates are kept so the validity checker can report them.
    values: Tuple[str, ...]


@dataclass(frozen=True)
class ElementsForm:
    schema: "Schema"


@dataclass(frozen=True)
class PropertiesForm:
    required: Mapping[str, "Schema"] = field(default_factory=dict)
    optional: Mapping[str, "Schema"] = field(default_factory=dict)
    additional_allowed: bool = False

    # Whether the "properties" keyword was given. Picks the schema path token
    # reported for non-object instances.
    required_present: bool = True


@dataclass(frozen=True)
class ValuesForm:
    schema: "Schema"


@dataclass(frozen=True)
class DiscriminatorForm:
    tag: str
    mapping: Mapping[str, "Schema"] = field(default_factory=dict)


Form = Union[
    EmptyForm,
    RefForm,
    TypeForm,
    EnumForm,
    ElementsForm,
    PropertiesForm,
    ValuesForm,
    DiscriminatorForm,
]


@dataclass(frozen=True)
class Schema:
    form: Form = field(default_factory=EmptyForm)
    nullable: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict)

    # Only meaningful on the root schema
    definitions: Mapping[str, "Schema"] = field(default_factory=dict)

    @property
    def form_name(self) -> str:
        return _FORM_NAMES[type(self.form)]

    def children(self) -> Iterator[Tuple[Tuple[str, ...], "Schema"]]:
        """Yield ``(keyword_tokens, sub_schema)`` for the sub-schemas of this node's form.

        ``definitions`` are not included; they belong to the root only and
        are walked separately by callers that need them.
        """
        form = self.form
        if isinstance(form, ElementsForm):
            yield ("elements",), form.schema
        elif isinstance(form, ValuesForm):
            yield ("values",), form.schema
        elif isinstance(form, PropertiesForm):
            for name, sub_schema in form.required.items():
                yield ("properties", name), sub_schema
            for name, sub_schema in form.optional.items():
                yield ("optionalProperties", name), sub_schema
        elif isinstance(form, DiscriminatorForm):
            for tag_value, sub_schema in form.mapping.items():
                yield ("mapping", tag_value), sub_schema


_FORM_NAMES: Dict[type, str] = {
    EmptyForm: "empty",
    RefForm: "ref",
    TypeForm: "type",
    EnumForm: "enum",
    ElementsForm: "elements",
    PropertiesForm: "properties",
    ValuesForm: "values",
    DiscriminatorForm: "discriminator",
}


def walk_schema(root: Schema) -> Iterator[Tuple[Tuple[str, ...], Schema]]:
    """Depth-first walk over every node of ``root``, definitions first.

    Yields ``(schema_path, node)`` pairs; the root itself is yielded with an
    empty path. Refs are not followed, so cyclic schemas terminate.
    """
    yield (), root
    for name, definition in root.definitions.items():
        yield from _walk(definition, ("definitions", name))
    for tokens, child in root.children():
        yield from _walk(child, tokens)


def _walk(node: Schema, path: Tuple[str, ...]) -> Iterator[Tuple[Tuple[str, ...], Schema]]:
    yield path, node
    # Misplaced definitions are still walked so their contents get checked.
    for name, definition in node.definitions.items():
        yield from _walk(definition, path + ("definitions", name))
    for tokens, child in node.children():
        yield from _walk(child, path + tokens)
