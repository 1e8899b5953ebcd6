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

"""Custom exceptions for the JSON Type Definition validator.

Three families never overlap:

* :class:`MalformedSchemaError` - the schema-definition tree breaks the
  keyword rules and no schema model could be built.
* :class:`SchemaValidityError` - the model was built but is not a valid
  JSON Type Definition schema (dangling refs, bad mappings, ...).
* :class:`ValidateError` - a single validation call was aborted.

Instance data that does not match a schema is never an exception; it is
reported as validation error indicators.
"""

from typing import Optional


class JtdError(Exception):
    """Base exception for JSON Type Definition errors."""
    pass


class MalformedSchemaError(JtdError):
    """Exception raised when a schema-definition tree cannot be turned into a schema."""

    def __init__(self, message: str, schema_pointer: str = ""):
        self.message = message
        self.schema_pointer = schema_pointer
        location = schema_pointer or "(root)"
        super().__init__(f"{message} (at {location})")


class SchemaValidityError(JtdError):
    """Exception raised when a schema is well-formed but not a valid JTD schema."""

    def __init__(self, message: str, schema_pointer: str = ""):
        self.message = message
        self.schema_pointer = schema_pointer
        location = schema_pointer or "(root)"
        super().__init__(f"{message} (at {location})")


class NonRootDefinitionsError(SchemaValidityError):
    """Exception raised when 'definitions' appears below the root schema."""
    pass


class InvalidReferenceError(SchemaValidityError):
    """Exception raised when a 'ref' names a definition that does not exist."""
    pass


class InvalidDiscriminatorMappingError(SchemaValidityError):
    """Exception raised for discriminator mappings that are not usable."""
    pass


class InvalidEnumError(SchemaValidityError):
    """Exception raised for empty enums or enums with repeated values."""
    pass


class InvalidTypeError(SchemaValidityError):
    """Exception raised when a 'type' names an unknown type."""
    pass


class InvalidPropertiesError(SchemaValidityError):
    """Exception raised when a property is both required and optional."""
    pass


class ValidateError(JtdError):
    """Base exception for aborted validation calls."""
    pass


class MaxDepthExceededError(ValidateError):
    """Exception raised when reference resolution goes deeper than allowed."""

    def __init__(self, max_depth: int, instance_path: Optional[tuple] = None):
        self.max_depth = max_depth
        self.instance_path = tuple(instance_path or ())
        super().__init__(f"Max depth of {max_depth} nested refs exceeded")


class OptionsError(JtdError, ValueError):
    """Exception raised for invalid validation options."""
    pass
