"""
Exception hierarchy for EnumerateIt.

Values outside an enumeration are never raised: they are reported through
validation results. These exceptions cover declaration and wiring mistakes
made while defining enumerations or attaching them to classes.
"""

from __future__ import annotations

from typing import Any


class EnumerateItError(Exception):
    """Base exception for EnumerateIt errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidEnumerationError(EnumerateItError):
    """Malformed enumeration declaration (duplicate keys, bad entry shape)."""

    def __init__(
        self,
        message: str,
        enumeration: str | None = None,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {}) or {}
        if enumeration:
            details["enumeration"] = enumeration
        if key:
            details["key"] = key

        super().__init__(message=message, details=details)


class EnumerationNotFoundError(EnumerateItError):
    """No enumeration registered under the requested name."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        details = kwargs.pop("details", {}) or {}
        details["name"] = name
        super().__init__(
            message=f"Unknown enumeration: {name}",
            details=details,
        )


class BehaviorNotFoundError(EnumerateItError):
    """A polymorphic helper was asked for a behavior class that does not exist."""

    def __init__(
        self,
        enumeration: str,
        behavior: str,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {}) or {}
        details["enumeration"] = enumeration
        details["behavior"] = behavior
        super().__init__(
            message=f"{enumeration} does not define a behavior class named {behavior}",
            details=details,
        )


class ConfigurationError(EnumerateItError):
    """Invalid options passed to an enumeration or to has_enumeration_for."""

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {}) or {}
        if option:
            details["option"] = option
        if value is not None:
            details["value"] = str(value)

        super().__init__(message=message, details=details)
