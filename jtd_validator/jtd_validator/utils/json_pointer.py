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

"""RFC 6901 JSON pointer helpers for instance and schema paths."""

from __future__ import annotations

from typing import Iterable, Optional


JsonPointer = str


def escape_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: str) -> JsonPointer:
    if not base:
        return f"/{escape_token(token)}"
    return f"{base}/{escape_token(token)}"


def to_pointer(tokens: Iterable[object]) -> JsonPointer:
    """Render a token sequence as a JSON pointer (``""`` for the root)."""
    pointer = ""
    for token in tokens:
        pointer = join_path(pointer, str(token))
    return pointer
