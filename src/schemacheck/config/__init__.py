"""Settings for the schemacheck command line."""

from .models import (
    ExamplesConfigModel,
    LoggingConfigModel,
    SettingsModel,
    ValidationConfigModel,
)
from .settings import CONFIG_ENV_VAR, default_config_path, load_settings

__all__ = [
    "SettingsModel",
    "ExamplesConfigModel",
    "ValidationConfigModel",
    "LoggingConfigModel",
    "CONFIG_ENV_VAR",
    "default_config_path",
    "load_settings",
]
