import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class AppSettings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_COLOR: Optional[str] = None
    LOG_DIR: Optional[str] = None

    INFLECTOR_NAMESPACE_SEPARATOR: str = "::"
    INFLECTOR_LOAD_DEFAULTS: str = "true"

    HOMOPHONES_PATH: Optional[str] = None
    MISSPELLINGS_PATH: Optional[str] = None
    MISSPELLINGS_REVERSE: str = "true"

    @field_validator("HOMOPHONES_PATH", mode="before")
    @classmethod
    def set_homophones_default(cls, v):
        if not v:
            return os.path.join(DATA_DIR, "homophones.txt")
        return v

    @field_validator("MISSPELLINGS_PATH", mode="before")
    @classmethod
    def set_misspellings_default(cls, v):
        if not v:
            return os.path.join(DATA_DIR, "common-misspellings.txt")
        return v

    @field_validator("INFLECTOR_NAMESPACE_SEPARATOR")
    @classmethod
    def check_separator(cls, v):
        if not v:
            raise ValueError("INFLECTOR_NAMESPACE_SEPARATOR must not be empty")
        return v

    model_config = {
        "extra": "ignore",
        "validate_default": True,
    }


settings = AppSettings.model_validate(os.environ)


def push_env_update(updates: Dict[str, Any]) -> None:
    """
    Update both os.environ and the cached settings object with new values.

    This is particularly useful for test environments where settings need to be
    modified after the initial load.

    Args:
        updates: Dictionary of environment variables to update
    """
    for key, value in updates.items():
        os.environ[key] = str(value)

    for key, value in updates.items():
        if hasattr(settings, key):
            setattr(settings, key, value)


def env(var: str) -> str:
    """
    Get a setting with fallback to the raw environment variable.
    """
    if hasattr(settings, var):
        return getattr(settings, var)
    return os.getenv(var, "")


def env_flag(var: str) -> bool:
    """Read a "true"/"false" style setting as a bool."""
    return str(env(var)).strip().lower() in ("1", "true", "yes", "on")
