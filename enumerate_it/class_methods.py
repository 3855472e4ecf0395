"""
Attach enumerations to attributes of arbitrary classes.

    class Person(EnumerateIt, ValidationsMixin):
        def __init__(self, relationship_status=None):
            self.relationship_status = relationship_status

    Person.has_enumeration_for(
        "relationship_status",
        with_=RelationshipStatus,
        create_helpers=True,
    )

    person = Person(RelationshipStatus.MARRIED)
    person.relationship_status_humanize  # "Married"
    person.is_married                    # True

The same wiring is available as a class decorator for classes that do not
inherit from EnumerateIt:

    @has_enumeration_for("relationship_status", create_helpers={"prefix": True})
    class Person:
        ...
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from enumerate_it.base import Base
from enumerate_it.exceptions import ConfigurationError
from enumerate_it.inflection import camelize
from enumerate_it.registry import (
    AssociationRegistry,
    AttributeEnumeration,
    EnumerationRegistry,
)
from enumerate_it.scopes import build_scopes
from enumerate_it.settings import get_settings
from enumerate_it.validations import is_blank, matches_code

logger = logging.getLogger(__name__)

HELPER_OPTIONS = {"prefix", "polymorphic"}
POLYMORPHIC_OPTIONS = {"suffix"}


def _parse_helper_options(create_helpers: bool | Mapping[str, Any]) -> dict[str, Any]:
    options = {
        "create_helpers": False,
        "prefix": False,
        "polymorphic": False,
        "polymorphic_suffix": get_settings().polymorphic_suffix,
    }

    if not create_helpers:
        return options

    options["create_helpers"] = True
    if create_helpers is True:
        return options

    if not isinstance(create_helpers, Mapping):
        raise ConfigurationError(
            "create_helpers must be a bool or a mapping",
            option="create_helpers",
            value=create_helpers,
        )

    unknown = set(create_helpers) - HELPER_OPTIONS
    if unknown:
        raise ConfigurationError(
            f"Unknown create_helpers options: {sorted(unknown)}",
            option="create_helpers",
            value=sorted(unknown),
        )

    options["prefix"] = bool(create_helpers.get("prefix", False))

    polymorphic = create_helpers.get("polymorphic", False)
    if isinstance(polymorphic, Mapping):
        unknown = set(polymorphic) - POLYMORPHIC_OPTIONS
        if unknown:
            raise ConfigurationError(
                f"Unknown polymorphic options: {sorted(unknown)}",
                option="polymorphic",
                value=sorted(unknown),
            )
        options["polymorphic"] = True
        options["polymorphic_suffix"] = polymorphic.get("suffix", options["polymorphic_suffix"])
    else:
        options["polymorphic"] = bool(polymorphic)

    return options


def _resolve_enumeration(attribute: str, with_: type | None) -> type:
    enumeration = with_ if with_ is not None else EnumerationRegistry.get_or_raise(camelize(attribute))

    if not (isinstance(enumeration, type) and issubclass(enumeration, Base)):
        raise ConfigurationError(
            f"Enumeration for {attribute} must be a subclass of enumerate_it.Base",
            option="with_",
            value=enumeration,
        )
    return enumeration


def _define(owner: type, name: str, helper: Any) -> None:
    if hasattr(owner, name):
        logger.warning(f"{owner.__qualname__}.{name} already exists and is replaced by an enumeration helper")
    setattr(owner, name, helper)


def _humanize_property(attribute: str, enumeration: type) -> property:
    def humanize(self: Any) -> Any:
        value = getattr(self, attribute, None)
        if value is None:
            return None
        return enumeration.translate(value)

    return property(humanize, doc=f"Label of the current {attribute}.")


def _predicate_property(attribute: str, value: Any) -> property:
    def predicate(self: Any) -> bool:
        return matches_code(getattr(self, attribute, None), value)

    return property(predicate, doc=f"Whether {attribute} is {value!r}.")


def _object_property(attribute: str, enumeration: type) -> property:
    def behavior_object(self: Any) -> Any:
        value = getattr(self, attribute, None)
        if is_blank(value):
            return None
        behavior = enumeration.behavior_class_for(value)
        return behavior() if behavior is not None else None

    return property(behavior_object, doc=f"Behavior object for the current {attribute}.")


def _store_enumeration(owner: type, attribute: str, enumeration: type) -> None:
    # Copy on write so subclasses never leak declarations into their parents.
    enumerations = dict(getattr(owner, "enumerations", None) or {})
    enumerations[attribute] = enumeration
    owner.enumerations = enumerations


def attach_enumeration(
    owner: type,
    attribute: str,
    with_: type | None = None,
    create_helpers: bool | Mapping[str, Any] = False,
    create_scopes: bool = False,
    required: bool = False,
) -> AttributeEnumeration:
    """
    Wire an enumeration into an attribute of owner.

    Args:
        owner: Class receiving the helpers
        attribute: Attribute holding the enumeration code
        with_: Enumeration class; looked up by the camelized attribute name when omitted
        create_helpers: True for is_<key> predicates, or a mapping with
            "prefix" and/or "polymorphic" (True or {"suffix": ...})
        create_scopes: Add one query scope per key (SQLAlchemy mapped classes only)
        required: Also validate presence when the owner supports it

    Returns:
        The registered AttributeEnumeration
    """
    enumeration = _resolve_enumeration(attribute, with_)
    options = _parse_helper_options(create_helpers)

    association = AttributeEnumeration(
        owner=owner,
        attribute=attribute,
        enumeration=enumeration,
        create_scopes=create_scopes,
        required=required,
        **options,
    )

    scopes = build_scopes(association) if create_scopes else {}

    _store_enumeration(owner, attribute, enumeration)

    if hasattr(owner, "validates_inclusion_of"):
        owner.validates_inclusion_of(attribute, in_=enumeration.list, allow_blank=True)

    if required:
        if hasattr(owner, "validates_presence_of"):
            owner.validates_presence_of(attribute)
        else:
            logger.debug(f"{owner.__qualname__} has no validates_presence_of, required={required} ignored")

    _define(owner, association.humanize_name, _humanize_property(attribute, enumeration))

    if association.create_helpers:
        for item in enumeration.definitions():
            _define(owner, association.predicate_name(item.key), _predicate_property(attribute, item.value))

    if association.polymorphic:
        _define(owner, association.object_name, _object_property(attribute, enumeration))

    for name, scope in scopes.items():
        _define(owner, name, scope)

    AssociationRegistry.register(association)
    logger.debug(
        f"Attached {enumeration.__name__} to {owner.__qualname__}.{attribute}",
        extra={"context": association.to_dict()},
    )
    return association


def has_enumeration_for(attribute: str, **options: Any) -> Callable[[type], type]:
    """Class decorator form of attach_enumeration."""

    def decorator(owner: type) -> type:
        attach_enumeration(owner, attribute, **options)
        return owner

    return decorator


class EnumerateIt:
    """Mixin giving a class the has_enumeration_for classmethod."""

    enumerations = {}

    @classmethod
    def has_enumeration_for(
        cls,
        attribute: str,
        with_: type | None = None,
        create_helpers: bool | Mapping[str, Any] = False,
        create_scopes: bool = False,
        required: bool = False,
    ) -> AttributeEnumeration:
        return attach_enumeration(
            cls,
            attribute,
            with_=with_,
            create_helpers=create_helpers,
            create_scopes=create_scopes,
            required=required,
        )
