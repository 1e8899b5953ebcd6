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

"""Instance validation against a checked schema.

Indicators are produced in walk order:

* array elements in index order;
* for objects, required properties in schema order, then optional properties
  in schema order, then disallowed additional properties in instance order;
* a ref restarts the schema path at ``definitions/<name>``.

Validation state lives in a :class:`_ValidationRun` created per call, so one
:class:`Validator` may serve several threads at once.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..checker.validity_checker import check_schema
from ..exceptions import MaxDepthExceededError
from ..models.schema import (
    DiscriminatorForm,
    ElementsForm,
    EmptyForm,
    EnumForm,
    PropertiesForm,
    RefForm,
    Schema,
    TypeForm,
    TypeKind,
    ValuesForm,
)
from ..utils.timestamp import is_rfc3339_timestamp
from ..utils.type_ranges import INTEGER_RANGES, fits_integer_range, is_number
from .indicator import ValidationErrorIndicator
from .options import ValidateOptions

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


class _ValidationRun:
    def __init__(self, root: Schema, options: ValidateOptions):
        self.root = root
        self.options = options
        self.errors: List[ValidationErrorIndicator] = []

    @property
    def full(self) -> bool:
        return bool(self.options.max_errors) and len(self.errors) >= self.options.max_errors

    def push_error(self, instance_path: Path, schema_path: Path) -> None:
        if not self.full:
            self.errors.append(ValidationErrorIndicator(instance_path, schema_path))

    def validate(
        self,
        schema: Schema,
        instance: Any,
        instance_path: Path,
        schema_path: Path,
        depth: int,
        parent_tag: Optional[str] = None,
    ) -> None:
        if self.full:
            return
        if instance is None and schema.nullable:
            return

        form = schema.form
        if isinstance(form, EmptyForm):
            return

        if isinstance(form, RefForm):
            depth += 1
            if self.options.max_depth and depth > self.options.max_depth:
                raise MaxDepthExceededError(self.options.max_depth, instance_path)
            self.validate(
                self.root.definitions[form.name],
                instance,
                instance_path,
                ("definitions", form.name),
                depth,
            )

        elif isinstance(form, TypeForm):
            if not _matches_type(form.kind, instance):
                self.push_error(instance_path, schema_path + ("type",))

        elif isinstance(form, EnumForm):
            if not isinstance(instance, str) or instance not in form.values:
                self.push_error(instance_path, schema_path + ("enum",))

        elif isinstance(form, ElementsForm):
            if not isinstance(instance, list):
                self.push_error(instance_path, schema_path + ("elements",))
                return
            for index, element in enumerate(instance):
                if self.full:
                    return
                self.validate(
                    form.schema,
                    element,
                    instance_path + (str(index),),
                    schema_path + ("elements",),
                    depth,
                )

        elif isinstance(form, PropertiesForm):
            self._validate_properties(form, instance, instance_path, schema_path, depth, parent_tag)

        elif isinstance(form, ValuesForm):
            if not isinstance(instance, dict):
                self.push_error(instance_path, schema_path + ("values",))
                return
            for key, value in instance.items():
                if self.full:
                    return
                self.validate(form.schema, value, instance_path + (key,), schema_path + ("values",), depth)

        elif isinstance(form, DiscriminatorForm):
            self._validate_discriminator(form, instance, instance_path, schema_path, depth)

    def _validate_properties(
        self,
        form: PropertiesForm,
        instance: Any,
        instance_path: Path,
        schema_path: Path,
        depth: int,
        parent_tag: Optional[str],
    ) -> None:
        if not isinstance(instance, dict):
            keyword = "properties" if form.required_present else "optionalProperties"
            self.push_error(instance_path, schema_path + (keyword,))
            return

        for key, sub_schema in form.required.items():
            if self.full:
                return
            if key in instance:
                self.validate(
                    sub_schema,
                    instance[key],
                    instance_path + (key,),
                    schema_path + ("properties", key),
                    depth,
                )
            else:
                # missing value: reported at the parent object
                self.push_error(instance_path, schema_path + ("properties", key))

        for key, sub_schema in form.optional.items():
            if self.full:
                return
            if key in instance:
                self.validate(
                    sub_schema,
                    instance[key],
                    instance_path + (key,),
                    schema_path + ("optionalProperties", key),
                    depth,
                )

        if form.additional_allowed:
            return
        for key in instance:
            if self.full:
                return
            if key == parent_tag or key in form.required or key in form.optional:
                continue
            self.push_error(instance_path + (key,), schema_path)

    def _validate_discriminator(
        self,
        form: DiscriminatorForm,
        instance: Any,
        instance_path: Path,
        schema_path: Path,
        depth: int,
    ) -> None:
        if not isinstance(instance, dict) or form.tag not in instance:
            self.push_error(instance_path, schema_path + ("discriminator",))
            return

        tag_value = instance[form.tag]
        if not isinstance(tag_value, str):
            self.push_error(instance_path + (form.tag,), schema_path + ("discriminator",))
            return

        mapped = form.mapping.get(tag_value)
        if mapped is None:
            self.push_error(instance_path + (form.tag,), schema_path + ("mapping",))
            return

        self.validate(
            mapped,
            instance,
            instance_path,
            schema_path + ("mapping", tag_value),
            depth,
            parent_tag=form.tag,
        )


def _matches_type(kind: TypeKind, instance: Any) -> bool:
    kind = TypeKind(kind)
    if kind == TypeKind.BOOLEAN:
        return isinstance(instance, bool)
    if kind == TypeKind.STRING:
        return isinstance(instance, str)
    if kind == TypeKind.TIMESTAMP:
        return isinstance(instance, str) and is_rfc3339_timestamp(instance)
    if kind in (TypeKind.FLOAT32, TypeKind.FLOAT64):
        return is_number(instance)
    if kind.value in INTEGER_RANGES:
        return fits_integer_range(instance, kind.value)
    return False


def _run(schema: Schema, instance: Any, options: ValidateOptions) -> List[ValidationErrorIndicator]:
    run = _ValidationRun(schema, options)
    try:
        run.validate(schema, instance, (), (), 0)
    except MaxDepthExceededError as e:
        logger.debug("Validation aborted at %s: %s", list(e.instance_path), e)
        raise
    return run.errors


class Validator:
    """Validator bound to one schema.

    The schema is checked once here; afterwards :meth:`validate` can be
    called any number of times, including concurrently.

    Raises:
        SchemaValidityError: If ``schema`` is not a valid JTD schema.
    """

    def __init__(self, schema: Schema, options: Optional[ValidateOptions] = None):
        check_schema(schema)
        self.schema = schema
        self.options = options or ValidateOptions()

    def validate(
        self, instance: Any, options: Optional[ValidateOptions] = None
    ) -> List[ValidationErrorIndicator]:
        return _run(self.schema, instance, options or self.options)

    def is_valid(self, instance: Any) -> bool:
        return not _run(self.schema, instance, self.options.with_max_errors(1))


def validate(
    schema: Schema, instance: Any, options: Optional[ValidateOptions] = None
) -> List[ValidationErrorIndicator]:
    """Validate ``instance`` against ``schema``.

    The schema is checked on every call; use :class:`Validator` to check it
    once and validate many instances.

    Args:
        schema: Schema model to validate against
        instance: Parsed JSON value
        options: Depth and error-count limits

    Returns:
        Error indicators in walk order; empty if the instance is valid

    Raises:
        SchemaValidityError: If ``schema`` is not a valid JTD schema
        MaxDepthExceededError: If ``options.max_depth`` nested refs were exceeded
    """
    return Validator(schema, options).validate(instance)


def is_valid(schema: Schema, instance: Any, options: Optional[ValidateOptions] = None) -> bool:
    return Validator(schema, options).is_valid(instance)
