"""
Translation catalog for enumeration labels.

Locale files use the Rails I18n layout:

    pt-BR:
      enumerations:
        relationship_status:
          married: Casado
          single: Solteiro

Labels declared explicitly on an enumeration always win; the catalog is only
consulted for keys declared without a label.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Iterator

import yaml

from enumerate_it.settings import get_settings

logger = logging.getLogger(__name__)

_locale_override: ContextVar[str | None] = ContextVar("enumerate_it_locale", default=None)


def current_locale() -> str:
    """Locale in effect for the running context."""
    return _locale_override.get() or get_settings().locale


@contextmanager
def with_locale(locale: str) -> Iterator[str]:
    """
    Resolve labels in another locale for the duration of a block.

    Usage:
        with with_locale("pt-BR"):
            person.relationship_status_humanize  # "Casado"
    """
    token = _locale_override.set(locale)
    try:
        yield locale
    finally:
        _locale_override.reset(token)


class TranslationCatalog:
    """In-memory store of locale -> enumeration -> key -> label."""

    def __init__(self) -> None:
        self._translations: dict[str, dict[str, dict[str, str]]] = {}

    def store(self, data: dict[str, Any]) -> None:
        """Merge a parsed locale document into the catalog."""
        for locale, tree in (data or {}).items():
            enumerations = (tree or {}).get("enumerations") or {}
            for enumeration, labels in enumerations.items():
                self.add_all(str(locale), str(enumeration), labels or {})

    def add(self, locale: str, enumeration: str, key: str, label: str) -> None:
        self._translations.setdefault(locale, {}).setdefault(enumeration, {})[str(key)] = str(label)

    def add_all(self, locale: str, enumeration: str, labels: dict[str, Any]) -> None:
        for key, label in labels.items():
            self.add(locale, enumeration, key, label)

    def load_file(self, filepath: Path) -> None:
        filepath = Path(filepath)
        if not filepath.exists():
            logger.warning(f"Locale file not found: {filepath}")
            return

        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        self.store(data or {})
        logger.debug(f"Loaded translations from {filepath}")

    def load_path(self, path: Path) -> None:
        """Load a single locale file or every *.yml/*.yaml file in a directory."""
        path = Path(path)
        if path.is_dir():
            for filepath in sorted([*path.glob("*.yml"), *path.glob("*.yaml")]):
                self.load_file(filepath)
        else:
            self.load_file(path)

    def lookup(
        self,
        enumeration: str,
        key: str,
        locale: str | None = None,
    ) -> str | None:
        """Label for a key, trying the given locale then the default locale."""
        locale = locale or current_locale()
        candidates = [locale, get_settings().default_locale]

        for candidate in candidates:
            label = self._translations.get(candidate, {}).get(enumeration, {}).get(str(key))
            if label is not None:
                return label
        return None

    def locales(self) -> list[str]:
        return list(self._translations.keys())

    def clear(self) -> None:
        self._translations.clear()


_catalog: TranslationCatalog | None = None


def get_catalog() -> TranslationCatalog:
    """Get the global catalog, loading the configured locale paths on first use."""
    global _catalog
    if _catalog is None:
        _catalog = TranslationCatalog()
        for path in get_settings().locale_paths:
            _catalog.load_path(path)
    return _catalog


def reset_catalog() -> None:
    global _catalog
    _catalog = None
