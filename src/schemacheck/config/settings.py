import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from schemacheck.config.models import SettingsModel

# No logging in this module as it's used to load the logging config

__all__ = ["CONFIG_ENV_VAR", "default_config_path", "load_settings"]

CONFIG_ENV_VAR = "SCHEMACHECK_CONFIG"


def default_config_path() -> Path:
    return Path.home() / ".schemacheck" / "config.yml"


def load_settings(path: Path | None = None) -> SettingsModel:
    """Load settings from ``path``, $SCHEMACHECK_CONFIG or ~/.schemacheck/config.yml.

    A missing default file yields the default settings; a missing file that
    was asked for explicitly is an error.
    """
    explicit = path is not None or CONFIG_ENV_VAR in os.environ
    if path is None:
        path = Path(os.environ.get(CONFIG_ENV_VAR, default_config_path()))

    if not path.exists():
        if not explicit:
            return SettingsModel()
        raise FileNotFoundError(f"schemacheck config not found at {path}")

    with open(path) as f:
        config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, dict):
        raise ValueError("schemacheck config must be a mapping")

    try:
        return SettingsModel.model_validate(config_data)
    except ValidationError as exc:
        raise ValueError(f"Invalid schemacheck config: {exc}") from exc
