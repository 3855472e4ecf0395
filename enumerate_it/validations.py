"""
Validation hooks for classes using enumerations.

has_enumeration_for registers validations only on classes that expose
validates_inclusion_of / validates_presence_of. ValidationsMixin provides
both for plain classes and SQLAlchemy models:

    class Person(ValidationsMixin):
        ...

    Person.validates_presence_of("name")
    person.is_valid()
    person.errors["name"]  # ["can't be blank"]
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterator
from dataclasses import dataclass, field
from typing import Any

INCLUSION_MESSAGE = "is not included in the list"
BLANK_MESSAGE = "can't be blank"


def is_blank(value: Any) -> bool:
    """None, whitespace-only strings and empty containers are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def matches_code(value: Any, code: Any) -> bool:
    """Equality that keeps True/False apart from the codes 1/0."""
    if isinstance(value, bool) is not isinstance(code, bool):
        return False
    return value == code


class Errors:
    """Validation messages grouped by attribute."""

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, attribute: str, message: str) -> None:
        self._messages.setdefault(attribute, []).append(message)

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self._messages.get(attribute, []))

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def is_empty(self) -> bool:
        return not self._messages

    def full_messages(self) -> list[str]:
        return [
            f"{attribute.replace('_', ' ').capitalize()} {message}"
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def to_dict(self) -> dict[str, list[str]]:
        return {attribute: list(messages) for attribute, messages in self._messages.items()}

    def clear(self) -> None:
        self._messages.clear()


@dataclass
class ValidationResult:
    """Validation result."""
    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def merge(self, other: ValidationResult) -> ValidationResult:
        merged = {attribute: list(messages) for attribute, messages in self.errors.items()}
        for attribute, messages in other.errors.items():
            merged.setdefault(attribute, []).extend(messages)
        return ValidationResult(valid=self.valid and other.valid, errors=merged)


@dataclass
class Validator:
    """Base attribute validator."""
    attribute: str
    message: str

    def validate(self, instance: Any, errors: Errors) -> None:
        raise NotImplementedError


@dataclass
class InclusionValidator(Validator):
    """Rejects values outside an allowed collection."""
    allowed: Collection[Any] | Callable[[], Collection[Any]] = ()
    allow_blank: bool = False

    def allowed_values(self) -> Collection[Any]:
        return self.allowed() if callable(self.allowed) else self.allowed

    def validate(self, instance: Any, errors: Errors) -> None:
        value = getattr(instance, self.attribute, None)
        if self.allow_blank and is_blank(value):
            return
        if not any(matches_code(value, code) for code in self.allowed_values()):
            errors.add(self.attribute, self.message)


@dataclass
class PresenceValidator(Validator):
    """Rejects blank values."""

    def validate(self, instance: Any, errors: Errors) -> None:
        if is_blank(getattr(instance, self.attribute, None)):
            errors.add(self.attribute, self.message)


class ValidationsMixin:
    """Adds declarative validations to any class."""

    _validators = []

    @classmethod
    def _add_validator(cls, validator: Validator) -> None:
        if "_validators" not in cls.__dict__:
            cls._validators = list(cls._validators)
        cls._validators.append(validator)

    @classmethod
    def validates_inclusion_of(
        cls,
        attribute: str,
        in_: Collection[Any] | Callable[[], Collection[Any]],
        allow_blank: bool = False,
        message: str = INCLUSION_MESSAGE,
    ) -> None:
        cls._add_validator(
            InclusionValidator(
                attribute=attribute,
                message=message,
                allowed=in_,
                allow_blank=allow_blank,
            )
        )

    @classmethod
    def validates_presence_of(cls, attribute: str, message: str = BLANK_MESSAGE) -> None:
        cls._add_validator(PresenceValidator(attribute=attribute, message=message))

    @classmethod
    def validators(cls) -> list[Validator]:
        return list(cls._validators)

    @property
    def errors(self) -> Errors:
        errors = self.__dict__.get("_errors")
        if errors is None:
            errors = Errors()
            self.__dict__["_errors"] = errors
        return errors

    def validate(self) -> ValidationResult:
        errors = self.errors
        errors.clear()
        for validator in self._validators:
            validator.validate(self, errors)
        return ValidationResult(valid=errors.is_empty(), errors=errors.to_dict())

    def is_valid(self) -> bool:
        return self.validate().valid
