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

"""JSON Type Definition (RFC 8927) schema model, validity checker and validator.

Typical use::

    from jtd_validator import parse_schema, Validator

    validator = Validator(parse_schema({"elements": {"type": "uint8"}}))
    validator.validate([1, 2, 300])
    # [ValidationErrorIndicator(instance_path=('2',), schema_path=('elements', 'type'))]
"""

import logging

from .checker import SchemaIssue, check_schema, find_schema_issues
from .exceptions import (
    InvalidDiscriminatorMappingError,
    InvalidEnumError,
    InvalidPropertiesError,
    InvalidReferenceError,
    InvalidTypeError,
    JtdError,
    MalformedSchemaError,
    MaxDepthExceededError,
    NonRootDefinitionsError,
    OptionsError,
    SchemaValidityError,
    ValidateError,
)
from .models import (
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
from .parsers import parse_schema, schema_to_definition
from .validator import ValidateOptions, ValidationErrorIndicator, Validator, is_valid, validate

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
