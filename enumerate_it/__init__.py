"""
EnumerateIt - enumerations with codes and labels for Python classes.

Provides:
- Base: declare a closed set of named codes with labels
- has_enumeration_for / EnumerateIt: attach an enumeration to an attribute
  (humanize, predicates, behavior objects, validations, SQLAlchemy scopes)
- ValidationsMixin: inclusion/presence validations for plain classes and models
- EnumerationField: pydantic field accepting only an enumeration's codes
- EnumerationLoader: build enumerations from YAML
- Translations: locale YAML catalog for labels
"""

from enumerate_it.base import Base, EnumerationValue
from enumerate_it.class_methods import EnumerateIt, attach_enumeration, has_enumeration_for
from enumerate_it.exceptions import (
    BehaviorNotFoundError,
    ConfigurationError,
    EnumerateItError,
    EnumerationNotFoundError,
    InvalidEnumerationError,
)
from enumerate_it.fields import EnumerationField
from enumerate_it.loader import EnumerationLoader
from enumerate_it.logging_config import get_logger, log_context, set_log_level, setup_logging
from enumerate_it.registry import AssociationRegistry, AttributeEnumeration, EnumerationRegistry
from enumerate_it.settings import EnumerateItSettings, SortMode, get_settings, reset_settings
from enumerate_it.translations import TranslationCatalog, current_locale, get_catalog, with_locale
from enumerate_it.validations import Errors, ValidationResult, ValidationsMixin

__version__ = "1.0.0"

__all__ = [
    # Enumerations
    "Base",
    "EnumerationValue",
    "SortMode",
    # Attribute wiring
    "EnumerateIt",
    "attach_enumeration",
    "has_enumeration_for",
    # Registries
    "EnumerationRegistry",
    "AssociationRegistry",
    "AttributeEnumeration",
    # Validation
    "ValidationsMixin",
    "ValidationResult",
    "Errors",
    "EnumerationField",
    # Loading and translations
    "EnumerationLoader",
    "TranslationCatalog",
    "get_catalog",
    "current_locale",
    "with_locale",
    # Logging
    "setup_logging",
    "get_logger",
    "set_log_level",
    "log_context",
    # Settings
    "EnumerateItSettings",
    "get_settings",
    "reset_settings",
    # Errors
    "EnumerateItError",
    "InvalidEnumerationError",
    "EnumerationNotFoundError",
    "BehaviorNotFoundError",
    "ConfigurationError",
]
