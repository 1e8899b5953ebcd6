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

"""Loader for the bundled JSON Schema describing JTD schema-definition trees."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema

logger = logging.getLogger(__name__)

META_SCHEMA_NAME = "jtd_schema"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}
_VALIDATOR_CACHE: Dict[str, Any] = {}


def get_schema_path(name: str) -> Path:
    """Get the path to a bundled JSON Schema file.

    Args:
        name: Schema name without extension (e.g., "jtd_schema")

    Returns:
        Path to the schema file
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{name}.json"


def load_schema(name: str = META_SCHEMA_NAME) -> dict:
    """Load a bundled JSON Schema file.

    Args:
        name: Schema name without extension

    Returns:
        Schema dictionary

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[name]

    schema_path = get_schema_path(name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found for {name}: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e

    logger.debug("Loaded JSON Schema %s from %s", name, schema_path)
    _SCHEMA_CACHE[name] = schema
    return schema


def get_validator(name: str = META_SCHEMA_NAME) -> Any:
    """Return a cached jsonschema validator for a bundled schema."""
    if name in _VALIDATOR_CACHE:
        return _VALIDATOR_CACHE[name]

    schema = load_schema(name)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    validator = validator_cls(schema)
    _VALIDATOR_CACHE[name] = validator
    return validator


def clear_cache() -> None:
    """Clear the schema caches. Useful for testing."""
    _SCHEMA_CACHE.clear()
    _VALIDATOR_CACHE.clear()
