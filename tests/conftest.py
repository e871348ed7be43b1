import logging
import os
import pytest
from unittest.mock import Mock

from pattern_catalog.application.catalog import PatternCatalog
from pattern_catalog.application.runner import ExampleRunner
from pattern_catalog.bootstrap import build_default_catalog
from pattern_catalog.domain.catalog.value_objects import ExampleDescriptor, PatternCategory


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep PATTERN_CATALOG_* overrides from leaking into tests."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("PATTERN_CATALOG_")}
    for key in saved:
        del os.environ[key]
    yield
    for key in [k for k in os.environ if k.startswith("PATTERN_CATALOG_")]:
        del os.environ[key]
    os.environ.update(saved)


@pytest.fixture
def catalog():
    return PatternCatalog()


@pytest.fixture
def default_catalog():
    return build_default_catalog()


@pytest.fixture
def runner(default_catalog):
    return ExampleRunner(default_catalog)


@pytest.fixture
def make_descriptor():
    """Factory for descriptors backed by a mock run callable."""
    def _make(name="Sample", category=PatternCategory.CREATIONAL, run=None):
        return ExampleDescriptor(
            name=name,
            category=category,
            description=f"{name} example",
            run=run or Mock(return_value=name),
        )
    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI runs reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
