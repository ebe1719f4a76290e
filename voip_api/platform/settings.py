"""Application settings and configuration.

This module provides Pydantic settings classes for configuring the 911
client, loaded from environment variables with support for nested
configuration (e.g. ``X911__ENVIRONMENT=sandbox``).
"""

import logging

import pydantic_settings
from pydantic import BaseModel, Field, field_validator

from voip_api.platform.clients.x911.config import Environment, X911ClientConfig


class LoggingSettings(BaseModel):
    level: str = Field("INFO")
    json_output: bool | None = Field(
        None, description="Override log format: True=JSON, False=console, None=auto"
    )

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v):
        v_upper = v.upper()
        if v_upper not in logging._nameToLevel:
            raise ValueError(f'invalid value "{v}"')
        return v_upper


class X911Settings(BaseModel):
    """911 client configuration.

    Attributes:
        environment: Upstream environment the account executor targets
        enforce_environment: Reject actions the environment does not declare
    """

    environment: Environment = Field(Environment.PRODUCTION)
    enforce_environment: bool = Field(True)


class Settings(pydantic_settings.BaseSettings):
    model_config = pydantic_settings.SettingsConfigDict(env_nested_delimiter="__")

    logging: LoggingSettings = LoggingSettings()
    x911: X911Settings = X911Settings()

    @property
    def log_json_output(self) -> bool:
        """JSON logs unless overridden; console output against the sandbox."""
        if self.logging.json_output is not None:
            return self.logging.json_output
        return self.x911.environment != Environment.SANDBOX

    @property
    def x911_client_config(self) -> X911ClientConfig:
        """Build the client configuration from the x911 section."""
        return X911ClientConfig(
            environment=self.x911.environment,
            enforce_environment=self.x911.enforce_environment,
        )
