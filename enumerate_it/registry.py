"""
Registries for enumerations and their attribute associations.

Provides:
- EnumerationRegistry: enumeration class name -> enumeration class
- AssociationRegistry: (owner class, attribute) -> AttributeEnumeration
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

from enumerate_it.exceptions import EnumerationNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Generic class-level registry."""

    _types: dict[Hashable, T] = {}

    @classmethod
    def key_for(cls, item: T) -> Hashable:
        raise NotImplementedError

    @classmethod
    def register(cls, item: T) -> None:
        cls._types[cls.key_for(item)] = item

    @classmethod
    def get(cls, key: Hashable) -> T | None:
        return cls._types.get(key)

    @classmethod
    def get_or_raise(cls, key: Hashable) -> T:
        item = cls._types.get(key)
        if item is None:
            raise KeyError(key)
        return item

    @classmethod
    def list_all(cls) -> list[T]:
        return list(cls._types.values())

    @classmethod
    def exists(cls, key: Hashable) -> bool:
        return key in cls._types

    @classmethod
    def clear(cls) -> None:
        cls._types.clear()


class EnumerationRegistry(Registry[type]):
    """Enumeration classes indexed by class name."""

    _types: dict[Hashable, type] = {}

    @classmethod
    def key_for(cls, item: type) -> str:
        return item.__name__

    @classmethod
    def register(cls, item: type) -> None:
        name = cls.key_for(item)
        previous = cls._types.get(name)
        if previous is not None and previous is not item:
            logger.debug(
                f"Enumeration {name} from {item.__module__} replaces the one from {previous.__module__}"
            )
        super().register(item)

    @classmethod
    def get_or_raise(cls, key: Hashable) -> type:
        enumeration = cls._types.get(key)
        if enumeration is None:
            raise EnumerationNotFoundError(str(key))
        return enumeration


@dataclass
class AttributeEnumeration:
    """An enumeration attached to one attribute of an owner class."""
    owner: type
    attribute: str
    enumeration: type
    create_helpers: bool = False
    prefix: bool = False
    polymorphic: bool = False
    polymorphic_suffix: str = "_object"
    create_scopes: bool = False
    required: bool = False

    @property
    def humanize_name(self) -> str:
        return f"{self.attribute}_humanize"

    @property
    def object_name(self) -> str:
        return f"{self.attribute}{self.polymorphic_suffix}"

    def predicate_name(self, key: str) -> str:
        if self.prefix:
            return f"is_{self.attribute}_{key}"
        return f"is_{key}"

    def scope_name(self, key: str) -> str:
        if self.prefix:
            return f"{self.attribute}_{key}"
        return key

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner": self.owner.__qualname__,
            "attribute": self.attribute,
            "enumeration": self.enumeration.__name__,
            "create_helpers": self.create_helpers,
            "prefix": self.prefix,
            "polymorphic": self.polymorphic,
            "polymorphic_suffix": self.polymorphic_suffix,
            "create_scopes": self.create_scopes,
            "required": self.required,
        }


class AssociationRegistry(Registry[AttributeEnumeration]):
    """Attribute associations indexed by (owner class, attribute name)."""

    _types: dict[Hashable, AttributeEnumeration] = {}

    @classmethod
    def key_for(cls, item: AttributeEnumeration) -> tuple[type, str]:
        return (item.owner, item.attribute)

    @classmethod
    def lookup(cls, owner: type, attribute: str) -> AttributeEnumeration | None:
        """Association for an attribute, searching the owner's base classes too."""
        for klass in owner.__mro__:
            association = cls._types.get((klass, attribute))
            if association is not None:
                return association
        return None

    @classmethod
    def for_owner(cls, owner: type) -> list[AttributeEnumeration]:
        found: dict[str, AttributeEnumeration] = {}
        for klass in reversed(owner.__mro__):
            for (registered_owner, attribute), association in cls._types.items():
                if registered_owner is klass:
                    found[attribute] = association
        return list(found.values())
