import os
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).resolve().parent
project_root = src_path.parent

if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Configure test environment BEFORE any imports from the package
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ["LOG_COLOR"] = "false"
os.environ.pop("LOG_DIR", None)

from inflector.DefaultInflections import load_defaults
from inflector.Environment import env, push_env_update
from inflector.Inflections import Inflections, get_inflections
from inflector.Logging import get_logger

logger = get_logger("test_setup")
logger.debug(f"Added to sys.path: {src_path}")

TEST_SETTINGS = {
    "INFLECTOR_NAMESPACE_SEPARATOR": "::",
    "INFLECTOR_LOAD_DEFAULTS": "true",
    "MISSPELLINGS_REVERSE": "true",
}


@pytest.fixture(autouse=True)
def configure_test_environment():
    """Pin the settings every test relies on, and restore them afterwards."""
    original = {key: env(key) for key in TEST_SETTINGS}
    push_env_update(TEST_SETTINGS)
    yield
    push_env_update(original)


@pytest.fixture
def inflections():
    """A registry with the default English rules, separate from the global one."""
    return load_defaults(Inflections())


@pytest.fixture
def empty_inflections():
    return Inflections()


@pytest.fixture
def global_inflections():
    """The process-wide registry, reset to the defaults after the test."""
    registry = get_inflections()
    yield registry
    registry.clear()
    load_defaults(registry)
