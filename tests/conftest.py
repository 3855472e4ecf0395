"""
Shared fixtures for EnumerateIt tests.
"""

import logging
import os

import pytest

from enumerate_it import logging_config
from enumerate_it.logging_config import LIBRARY_LOGGER
from enumerate_it.registry import AssociationRegistry, EnumerationRegistry
from enumerate_it.settings import reset_settings
from enumerate_it.translations import reset_catalog


@pytest.fixture(autouse=True)
def isolated_registries():
    """Restore both registries after each test."""
    enumerations = dict(EnumerationRegistry._types)
    associations = dict(AssociationRegistry._types)
    yield
    EnumerationRegistry._types.clear()
    EnumerationRegistry._types.update(enumerations)
    AssociationRegistry._types.clear()
    AssociationRegistry._types.update(associations)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test with default settings and an empty translation catalog."""
    for var in list(os.environ):
        if var.startswith("ENUMERATE_IT_"):
            monkeypatch.delenv(var)
    reset_settings()
    reset_catalog()
    yield
    reset_settings()
    reset_catalog()


@pytest.fixture
def library_logger(monkeypatch):
    monkeypatch.setattr(logging_config, "_current_log_level", None)
    logger = logging.getLogger(LIBRARY_LOGGER)
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(level)
