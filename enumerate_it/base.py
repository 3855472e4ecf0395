"""
Enumeration base class.

Subclasses declare a closed set of named codes:

    class RelationshipStatus(Base):
        associate_values = dict(
            single=(1, "Single"),
            married=(2, "Married"),
            widow=(3, "Widow"),
            divorced=(4, "Divorced"),
        )

Each key becomes an upper-case class constant (RelationshipStatus.MARRIED == 2)
and the class exposes listing, lookup and translation helpers. Entries may
also be declared as bare codes (label comes from translations or the humanized
key) or as a list of keys whose code is the key itself.

Classes nested inside an enumeration and named after the camelized key act as
per-value behavior classes for polymorphic helpers.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Iterator

from enumerate_it.exceptions import (
    BehaviorNotFoundError,
    ConfigurationError,
    InvalidEnumerationError,
)
from enumerate_it.inflection import camelize, constant_name, humanize, underscore
from enumerate_it.registry import EnumerationRegistry
from enumerate_it.settings import SortMode, get_settings
from enumerate_it.translations import get_catalog
from enumerate_it.validations import matches_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumerationValue:
    """One declared entry of an enumeration."""
    key: str
    value: Any
    label: str | None = None
    behavior: str | None = None

    @property
    def constant(self) -> str:
        return constant_name(self.key)

    @property
    def behavior_name(self) -> str:
        return self.behavior or camelize(self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "value": self.value,
            "label": self.label,
            "behavior": self.behavior,
        }


def _parse_entry(enumeration: str, key: str, entry: Any) -> EnumerationValue:
    if isinstance(entry, EnumerationValue):
        return EnumerationValue(key, entry.value, entry.label, entry.behavior)

    if isinstance(entry, Mapping):
        if "value" not in entry:
            raise InvalidEnumerationError(
                f"Entry {key} of {enumeration} has no 'value'",
                enumeration=enumeration,
                key=key,
            )
        return EnumerationValue(
            key=key,
            value=entry["value"],
            label=entry.get("label"),
            behavior=entry.get("behavior"),
        )

    if isinstance(entry, (list, tuple)):
        if len(entry) == 1:
            return EnumerationValue(key, entry[0])
        if len(entry) == 2:
            return EnumerationValue(key, entry[0], entry[1])
        raise InvalidEnumerationError(
            f"Entry {key} of {enumeration} must be (value, label), got {len(entry)} items",
            enumeration=enumeration,
            key=key,
        )

    return EnumerationValue(key, entry)


def parse_values(
    enumeration: str,
    keys: Iterable[Any] = (),
    pairs: Mapping[Any, Any] | None = None,
) -> dict[str, EnumerationValue]:
    """Normalize the accepted declaration forms into ordered EnumerationValues."""
    values: dict[str, EnumerationValue] = {}
    entries = [(str(key), str(key)) for key in keys]
    entries.extend((str(key), entry) for key, entry in (pairs or {}).items())

    for key, entry in entries:
        if not key.isidentifier():
            raise InvalidEnumerationError(
                f"Key {key!r} of {enumeration} is not a valid identifier",
                enumeration=enumeration,
                key=key,
            )
        if key in values:
            raise InvalidEnumerationError(
                f"Duplicate key {key} in {enumeration}",
                enumeration=enumeration,
                key=key,
            )
        values[key] = _parse_entry(enumeration, key, entry)

    return values


class Base:
    """Base class for enumerations."""

    sort_by: ClassVar[str | None] = None

    _values: ClassVar[dict[str, EnumerationValue]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if cls.sort_by is not None and cls.sort_by not in {m.value for m in SortMode}:
            raise ConfigurationError(
                f"Invalid sort mode for {cls.__name__}: {cls.sort_by}",
                option="sort_by",
                value=cls.sort_by,
            )

        cls._values = dict(cls._values)

        declared = cls.__dict__.get("associate_values")
        if declared is not None and not isinstance(declared, classmethod):
            delattr(cls, "associate_values")
            if isinstance(declared, Mapping):
                cls._associate((), declared)
            elif isinstance(declared, (list, tuple)):
                cls._associate(declared, {})
            else:
                raise InvalidEnumerationError(
                    f"associate_values of {cls.__name__} must be a mapping or a sequence of keys",
                    enumeration=cls.__name__,
                )
        elif cls._values:
            EnumerationRegistry.register(cls)

    # ---- declaration ----

    @classmethod
    def associate_values(cls, *keys: str, **pairs: Any) -> None:
        """Declare (or redeclare) the enumeration's entries."""
        cls._associate(keys, pairs)

    @classmethod
    def _associate(cls, keys: Iterable[Any], pairs: Mapping[Any, Any]) -> None:
        values = parse_values(cls.__name__, keys, pairs)

        for item in values.values():
            if item.behavior_name == item.constant and isinstance(getattr(cls, item.constant, None), type):
                raise InvalidEnumerationError(
                    f"Constant {item.constant} of {cls.__name__} would replace its behavior class; "
                    f"name the class explicitly with {{'behavior': ...}}",
                    enumeration=cls.__name__,
                    key=item.key,
                )

        for stale in cls._values.values():
            if stale.key not in values and stale.constant in cls.__dict__:
                delattr(cls, stale.constant)

        cls._values = values
        for item in values.values():
            setattr(cls, item.constant, item.value)

        EnumerationRegistry.register(cls)
        logger.debug(f"Registered enumeration {cls.__name__} with keys {list(values)}")

    # ---- introspection ----

    @classmethod
    def enumeration_name(cls) -> str:
        """Name used for translation lookups (RelationshipStatus -> relationship_status)."""
        return underscore(cls.__name__)

    @classmethod
    def sort_mode(cls) -> SortMode:
        return SortMode(cls.sort_by or get_settings().sort_by)

    @classmethod
    def definitions(cls) -> list[EnumerationValue]:
        return list(cls._values.values())

    @classmethod
    def enumeration(cls) -> dict[str, tuple[Any, str]]:
        """Declared key -> (value, label) mapping in declaration order."""
        return {key: (item.value, cls._label(item)) for key, item in cls._values.items()}

    @classmethod
    def keys(cls) -> list[str]:
        return list(cls._values.keys())

    @classmethod
    def length(cls) -> int:
        return len(cls._values)

    # ---- listing ----

    @classmethod
    def list(cls) -> list[Any]:
        """All codes, sorted."""
        return sorted(item.value for item in cls._values.values())

    @classmethod
    def to_a(cls) -> list[tuple[str, Any]]:
        """(label, value) pairs ready for a select box, ordered by sort mode."""
        items = list(cls._values.values())
        mode = cls.sort_mode()

        if mode == SortMode.TRANSLATION:
            items.sort(key=cls._label)
        elif mode == SortMode.VALUE:
            items.sort(key=lambda item: item.value)
        elif mode == SortMode.NAME:
            items.sort(key=lambda item: item.key)

        return [(cls._label(item), item.value) for item in items]

    @classmethod
    def to_json(cls) -> str:
        return json.dumps(
            [{"value": value, "label": label} for label, value in cls.to_a()],
            ensure_ascii=False,
            default=str,
        )

    @classmethod
    def translations(cls) -> list[str]:
        return [label for label, _ in cls.to_a()]

    @classmethod
    def each_value(cls) -> Iterator[Any]:
        return iter(cls.list())

    @classmethod
    def each_translation(cls) -> Iterator[str]:
        return iter(cls.translations())

    # ---- lookup ----

    @classmethod
    def value_for(cls, name: str) -> Any:
        """Code for a constant name ("MARRIED"), None when unknown."""
        wanted = constant_name(name)
        for item in cls._values.values():
            if item.constant == wanted:
                return item.value
        return None

    @classmethod
    def values_for(cls, names: Iterable[str]) -> list[Any]:
        return [cls.value_for(name) for name in names]

    @classmethod
    def value_from_key(cls, key: str) -> Any:
        item = cls._values.get(str(key))
        return item.value if item else None

    @classmethod
    def key_for(cls, value: Any) -> str | None:
        item = cls._find(value)
        return item.key if item else None

    @classmethod
    def includes(cls, value: Any) -> bool:
        return cls._find(value) is not None

    @classmethod
    def translate(cls, value: Any) -> Any:
        """Label for a code; codes outside the enumeration come back unchanged."""
        item = cls._find(value)
        return cls._label(item) if item else value

    @classmethod
    def behavior_class_for(cls, value: Any) -> type | None:
        """Nested behavior class for a code, None when the code is not declared."""
        item = cls._find(value)
        if item is None:
            return None

        behavior = getattr(cls, item.behavior_name, None)
        if not isinstance(behavior, type):
            raise BehaviorNotFoundError(cls.__name__, item.behavior_name)
        return behavior

    # ---- internals ----

    @classmethod
    def _find(cls, value: Any) -> EnumerationValue | None:
        for item in cls._values.values():
            if matches_code(value, item.value):
                return item
        return None

    @classmethod
    def _label(cls, item: EnumerationValue) -> str:
        if item.label is not None:
            return item.label
        translated = get_catalog().lookup(cls.enumeration_name(), item.key)
        return translated if translated is not None else humanize(item.key)
