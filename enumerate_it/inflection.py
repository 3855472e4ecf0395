"""
Name inflection helpers.

Derives lookup names and helper method names from enumeration keys,
attribute names and class names.
"""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[-\s]+")


def underscore(name: str) -> str:
    """
    Convert a CamelCase name to snake_case.

    >>> underscore("RelationshipStatus")
    'relationship_status'
    >>> underscore("HTTPStatus")
    'http_status'
    """
    name = name.rsplit(".", 1)[-1]
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    name = _SEPARATORS.sub("_", name)
    return name.lower()


def camelize(name: str) -> str:
    """
    Convert a snake_case name to CamelCase.

    >>> camelize("relationship_status")
    'RelationshipStatus'
    """
    return "".join(part[:1].upper() + part[1:] for part in str(name).split("_") if part)


def humanize(name: str) -> str:
    """
    Turn a key into a label: underscores become spaces, first letter upper-cased.

    >>> humanize("not_married")
    'Not married'
    """
    text = str(name)
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip().lower()
    return text[:1].upper() + text[1:]


def constant_name(key: str) -> str:
    """Class constant name for an enumeration key."""
    return str(key).upper()
