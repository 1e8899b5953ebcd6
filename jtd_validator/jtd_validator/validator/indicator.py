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

"""Validation error indicators returned for instances that do not match."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..utils.json_pointer import JsonPointer, to_pointer


@dataclass(frozen=True, order=True)
class ValidationErrorIndicator:
    """One rejected part of an instance.

    This is a result value, not an exception. ``instance_path`` locates the
    rejected value (object keys and array indices as strings) and
    ``schema_path`` the keyword chain of the schema that rejected it.
    """

    instance_path: Tuple[str, ...]
    schema_path: Tuple[str, ...]

    @property
    def instance_pointer(self) -> JsonPointer:
        return to_pointer(self.instance_path)

    @property
    def schema_pointer(self) -> JsonPointer:
        return to_pointer(self.schema_path)

    def to_dict(self) -> Dict[str, List[str]]:
        """Return the indicator in the ``instancePath``/``schemaPath`` test-suite shape."""
        return {
            "instancePath": list(self.instance_path),
            "schemaPath": list(self.schema_path),
        }

    def __str__(self) -> str:
        return f"{self.instance_pointer or '/'} rejected by {self.schema_pointer or '/'}"
