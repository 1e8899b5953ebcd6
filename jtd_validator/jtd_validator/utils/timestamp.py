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

"""RFC 3339 ``date-time`` recognition for the ``timestamp`` type.

Accepted shape::

    YYYY-MM-DDTHH:MM:SS[.fraction](Z | +HH:MM | -HH:MM)

``T`` and ``Z`` may be lower case, and a leap second (``:60``) is allowed.
"""

from __future__ import annotations

import calendar
import re


_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"[Tt]"
    r"(\d{2}):(\d{2}):(\d{2})(?:\.\d+)?"
    r"(?:[Zz]|[+-](\d{2}):(\d{2}))",
    re.ASCII,
)


def is_rfc3339_timestamp(value: str) -> bool:
    m = _RFC3339_RE.fullmatch(value)
    if m is None:
        return False

    year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
    if not 1 <= month <= 12:
        return False
    _, max_day = calendar.monthrange(year, month)
    if not 1 <= day <= max_day:
        return False
    if hour > 23 or minute > 59 or second > 60:
        return False

    offset_hour, offset_minute = m.group(7, 8)
    if offset_hour is not None and (int(offset_hour) > 23 or int(offset_minute) > 59):
        return False

    return True
