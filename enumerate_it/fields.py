"""
pydantic integration.

    class PersonSchema(BaseModel):
        relationship_status: EnumerationField(RelationshipStatus) = None

Codes outside the enumeration fail validation with "is not included in the
list". Blank values pass unless required=True.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator

from enumerate_it.validations import BLANK_MESSAGE, INCLUSION_MESSAGE, is_blank


def EnumerationField(enumeration: type, required: bool = False) -> Any:
    """Annotated type accepting only the codes of an enumeration."""

    def check(value: Any) -> Any:
        if is_blank(value):
            if required:
                raise ValueError(BLANK_MESSAGE)
            return value
        if not enumeration.includes(value):
            raise ValueError(INCLUSION_MESSAGE)
        return value

    return Annotated[Any, AfterValidator(check)]
