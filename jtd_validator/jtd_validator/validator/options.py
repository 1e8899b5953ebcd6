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

"""Options that bound a single validation call."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import OptionsError


@dataclass(frozen=True)
class ValidateOptions:
    """Limits applied to a single validation call.

    Attributes:
        max_depth: Maximum number of nested refs followed along one path.
            Exceeding it aborts validation with ``MaxDepthExceededError``.
            0 means unbounded, in which case a ref cycle that never consumes
            instance data recurses until Python's recursion limit.
        max_errors: Stop after this many error indicators and return them.
            0 means all indicators are returned.
    """

    max_depth: int = 0
    max_errors: int = 0

    def __post_init__(self) -> None:
        for name in ("max_depth", "max_errors"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise OptionsError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
            if value < 0:
                raise OptionsError(f"{name} must not be negative, got {value}")

    def with_max_depth(self, max_depth: int) -> "ValidateOptions":
        return ValidateOptions(max_depth=max_depth, max_errors=self.max_errors)

    def with_max_errors(self, max_errors: int) -> "ValidateOptions":
        return ValidateOptions(max_depth=self.max_depth, max_errors=max_errors)
