"""
SQLAlchemy query scopes for enumerated attributes.

With create_scopes=True each enumeration key becomes a classmethod on the
mapped owner returning a Select filtered on that key's code:

    Person.married()  # SELECT ... FROM people WHERE people.relationship_status = :param
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.sql import Select

from enumerate_it.exceptions import ConfigurationError
from enumerate_it.registry import AttributeEnumeration

logger = logging.getLogger(__name__)


def is_mapped(owner: type) -> bool:
    """Whether the class is a SQLAlchemy mapped class."""
    return inspect(owner, raiseerr=False) is not None


def _scope_for(attribute: str, value: Any) -> classmethod:
    def scope(cls: type) -> Select:
        return select(cls).where(getattr(cls, attribute) == value)

    scope.__doc__ = f"Rows whose {attribute} is {value!r}."
    return classmethod(scope)


def build_scopes(association: AttributeEnumeration) -> dict[str, classmethod]:
    """Scope classmethods for every key of the association's enumeration."""
    owner = association.owner
    if not is_mapped(owner):
        raise ConfigurationError(
            f"create_scopes requires a SQLAlchemy mapped class, {owner.__qualname__} is not mapped",
            option="create_scopes",
        )

    mapper = inspect(owner)
    if association.attribute not in mapper.all_orm_descriptors:
        raise ConfigurationError(
            f"{owner.__qualname__} has no mapped attribute {association.attribute}",
            option="create_scopes",
            value=association.attribute,
        )

    scopes = {
        association.scope_name(item.key): _scope_for(association.attribute, item.value)
        for item in association.enumeration.definitions()
    }
    logger.debug(f"Built scopes {list(scopes)} for {owner.__qualname__}.{association.attribute}")
    return scopes
