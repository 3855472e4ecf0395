"""
Compatibility layer for the Renum API.

Renum is the predecessor of EnumerateIt: enumerations are declared the same
way, but has_enumeration_for only adds the inclusion validation and the
humanize helper, and humanize returns None for codes outside the enumeration.

DEPRECATED: Import from 'enumerate_it' instead.
"""

import warnings
from typing import Any

from enumerate_it.base import Base
from enumerate_it.class_methods import attach_enumeration
from enumerate_it.registry import AttributeEnumeration

warnings.warn(
    "Importing from 'renum' is deprecated. "
    "Use 'enumerate_it' instead.",
    DeprecationWarning,
    stacklevel=2
)


def _humanize_property(attribute: str, enumeration: type) -> property:
    def humanize(self: Any) -> str | None:
        value = getattr(self, attribute, None)
        if not enumeration.includes(value):
            return None
        return enumeration.translate(value)

    return property(humanize, doc=f"Label of the current {attribute}.")


class Renum:
    """Mixin giving a class the Renum flavour of has_enumeration_for."""

    enumerations = {}

    @classmethod
    def has_enumeration_for(cls, attribute: str, with_: type) -> AttributeEnumeration:
        association = attach_enumeration(cls, attribute, with_=with_)
        setattr(cls, association.humanize_name, _humanize_property(attribute, with_))
        return association


__all__ = [
    "Base",
    "Renum",
]
