"""
Configuration loading for academia applications.
"""

import json
import os
from typing import Optional

import pydantic
from pydantic import BaseModel, Field

from .core.exceptions import ConfigurationError
from .core.models import ContactInfo

CONFIG_ENV_VAR = "ACADEMIA_CONFIG"


class AcademiaConfig(BaseModel):
    """Settings for building a University."""

    university_name: str = Field("University", min_length=1)
    id_start: int = Field(1, ge=1)
    default_contact: ContactInfo = Field(default_factory=ContactInfo)
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def load_config(path: Optional[str] = None) -> AcademiaConfig:
    """Load configuration from a JSON file.

    The path falls back to the ACADEMIA_CONFIG environment variable. With
    neither set, the defaults are returned.

    Raises:
        ConfigurationError: If the file cannot be read or does not hold a
            valid configuration.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AcademiaConfig()

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}",
                                 details={'path': path}) from e

    try:
        return AcademiaConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}",
                                 details={'path': path, 'errors': e.errors()}) from e
