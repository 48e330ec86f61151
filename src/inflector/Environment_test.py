import os

import pytest
from pydantic import ValidationError

from inflector.Environment import (
    DATA_DIR,
    AppSettings,
    env,
    env_flag,
    push_env_update,
    settings,
)


def test_defaults():
    defaults = AppSettings()
    assert defaults.INFLECTOR_NAMESPACE_SEPARATOR == "::"
    assert defaults.INFLECTOR_LOAD_DEFAULTS == "true"
    assert defaults.HOMOPHONES_PATH == os.path.join(DATA_DIR, "homophones.txt")
    assert defaults.MISSPELLINGS_PATH == os.path.join(
        DATA_DIR, "common-misspellings.txt"
    )


def test_bundled_data_files_exist():
    defaults = AppSettings()
    assert os.path.isfile(defaults.HOMOPHONES_PATH)
    assert os.path.isfile(defaults.MISSPELLINGS_PATH)


def test_settings_read_from_mapping():
    custom = AppSettings.model_validate(
        {
            "INFLECTOR_NAMESPACE_SEPARATOR": ".",
            "HOMOPHONES_PATH": "/tmp/homophones.txt",
            "UNRELATED_VARIABLE": "ignored",
        }
    )
    assert custom.INFLECTOR_NAMESPACE_SEPARATOR == "."
    assert custom.HOMOPHONES_PATH == "/tmp/homophones.txt"


def test_settings_hold_only_what_the_package_reads():
    assert set(AppSettings.model_fields) == {
        "LOG_LEVEL",
        "LOG_COLOR",
        "LOG_DIR",
        "INFLECTOR_NAMESPACE_SEPARATOR",
        "INFLECTOR_LOAD_DEFAULTS",
        "HOMOPHONES_PATH",
        "MISSPELLINGS_PATH",
        "MISSPELLINGS_REVERSE",
    }


def test_empty_separator_is_rejected():
    with pytest.raises(ValidationError):
        AppSettings.model_validate({"INFLECTOR_NAMESPACE_SEPARATOR": ""})


def test_push_env_update_updates_settings_and_environ():
    push_env_update({"INFLECTOR_NAMESPACE_SEPARATOR": "/"})
    assert settings.INFLECTOR_NAMESPACE_SEPARATOR == "/"
    assert os.environ["INFLECTOR_NAMESPACE_SEPARATOR"] == "/"
    assert env("INFLECTOR_NAMESPACE_SEPARATOR") == "/"


def test_env_falls_back_to_environ(monkeypatch):
    monkeypatch.setenv("INFLECTOR_TEST_ONLY_VARIABLE", "value")
    assert env("INFLECTOR_TEST_ONLY_VARIABLE") == "value"
    assert env("INFLECTOR_TEST_MISSING_VARIABLE") == ""


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("True", True), ("1", True), ("yes", True), ("false", False), ("0", False), ("", False)],
)
def test_env_flag(value, expected):
    push_env_update({"INFLECTOR_LOAD_DEFAULTS": value})
    assert env_flag("INFLECTOR_LOAD_DEFAULTS") is expected
