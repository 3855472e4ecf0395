"""
Enumeration loader for YAML configuration files.

    enumerations:
      relationship_status:
        sort_by: value
        values:
          single: [1, Single]
          married: {value: 2, label: Married}
          widow: 3

Each entry becomes a Base subclass named after the camelized key and is
registered like any enumeration declared in code.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from enumerate_it.base import Base
from enumerate_it.exceptions import InvalidEnumerationError
from enumerate_it.inflection import camelize

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "enumerations.yaml"


class EnumerationLoader:
    """Load enumeration definitions from YAML files."""

    def __init__(self, config_dir: Path, module: str = __name__):
        self.config_dir = Path(config_dir)
        self.module = module

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        filepath = self.config_dir / filename
        if not filepath.exists():
            logger.warning(f"Config file not found: {filepath}")
            return {}

        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        return data or {}

    def _build_enumeration(self, name: str, data: dict[str, Any]) -> type:
        values = data.get("values")
        if not values:
            raise InvalidEnumerationError(
                f"Enumeration {name} declares no values",
                enumeration=name,
            )
        if not isinstance(values, (dict, list)):
            raise InvalidEnumerationError(
                f"values of {name} must be a mapping or a list of keys",
                enumeration=name,
            )

        # YAML 1.1 reads unquoted yes/no/on/off as booleans.
        for key in values:
            if not isinstance(key, str):
                raise InvalidEnumerationError(
                    f"Key {key!r} of {name} is not a string; quote it in the YAML file",
                    enumeration=name,
                    key=key,
                )

        namespace = {
            "__module__": self.module,
            "__doc__": data.get("description") or f"{camelize(name)} enumeration loaded from YAML.",
            "associate_values": values,
        }
        if data.get("sort_by"):
            namespace["sort_by"] = data["sort_by"]

        return type(camelize(name), (Base,), namespace)

    def load_enumerations(self, filename: str = DEFAULT_FILENAME) -> dict[str, type]:
        """Build and register every enumeration in the file, keyed by class name."""
        data = self._load_yaml(filename)

        loaded = {}
        for name, enum_data in (data.get("enumerations") or {}).items():
            enumeration = self._build_enumeration(str(name), enum_data or {})
            loaded[enumeration.__name__] = enumeration

        logger.info(f"Loaded {len(loaded)} enumerations from {self.config_dir / filename}")
        return loaded
