from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ExamplesConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(default=10, ge=0)
    required_only: bool = False


class ValidationConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    warnings: bool = True


class LoggingConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    level: LogLevel = "WARNING"
    path: str | None = None
    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    backup_count: int = Field(default=5, ge=0)


class SettingsModel(BaseModel):
    """Contents of ``~/.schemacheck/config.yml``.

    Example:
        examples:
          max_depth: 5
          required_only: true
        validation:
          warnings: false
        logging:
          level: INFO
          path: ~/.schemacheck/schemacheck.log
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    examples: ExamplesConfigModel = Field(default_factory=ExamplesConfigModel)
    validation: ValidationConfigModel = Field(default_factory=ValidationConfigModel)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)
