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

"""Numeric tests and value ranges for the JSON Type Definition number types."""

from __future__ import annotations

from typing import Any, Dict, Tuple


INTEGER_RANGES: Dict[str, Tuple[int, int]] = {
    "int8": (-128, 127),
    "uint8": (0, 255),
    "int16": (-32768, 32767),
    "uint16": (0, 65535),
    "int32": (-2147483648, 2147483647),
    "uint32": (0, 4294967295),
}


def is_number(value: Any) -> bool:
    # bool is a subclass of int
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def fits_integer_range(value: Any, type_name: str) -> bool:
    """Return True if ``value`` is an integral number inside the range of ``type_name``.

    Floats with a zero fractional part (``3.0``) count as integers.
    """
    if not is_number(value):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
        value = int(value)
    low, high = INTEGER_RANGES[type_name]
    return low <= value <= high
