"""Application configuration."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aligo_sms.sms.aligo import (
    DEFAULT_DELAY,
    DEFAULT_ENDPOINT_URL,
    DEFAULT_MESSAGE_TYPE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    AligoConfig,
)


class SMSSettings(BaseModel):
    """SMS gateway selection."""

    enabled: bool = True
    provider: str = "aligo"  # aligo or mock


class AligoSettings(BaseModel):
    """Aligo account and defaults."""

    # Numbers read from YAML or env (sender "1588..." etc.) stay strings
    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: str = ""
    api_key: str = ""
    sender: str = ""
    msg_type: str = DEFAULT_MESSAGE_TYPE
    delay: int = DEFAULT_DELAY
    timeout: float = DEFAULT_TIMEOUT
    url: str = DEFAULT_ENDPOINT_URL
    user_agent: str = DEFAULT_USER_AGENT

    def to_config(self) -> AligoConfig:
        """Build the validated driver configuration.

        Raises:
            ConfigError: If a required value is missing or invalid
        """
        return AligoConfig(
            account_id=self.user_id,
            api_key=self.api_key,
            default_sender=self.sender,
            default_message_type=self.msg_type,
            default_delay=self.delay,
            timeout=self.timeout,
            endpoint_url=self.url,
            user_agent=self.user_agent,
        )


class Settings(BaseSettings):
    """Application settings.

    Loaded from:
    1. Environment variables (SMS_*)
    2. configs/{environment}.yaml
    3. configs/default.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="SMS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Subsystems
    sms: SMSSettings = Field(default_factory=SMSSettings)
    aligo: AligoSettings = Field(default_factory=AligoSettings)

    def masked(self) -> dict[str, Any]:
        """Settings as a dict with secrets hidden."""
        data = self.model_dump()
        if data["aligo"]["api_key"]:
            data["aligo"]["api_key"] = "***"
        return data


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings object loaded from config files and environment.
    """
    from dynaconf import Dynaconf

    config_dir = Path(os.getenv("SMS_CONFIG_DIR", "configs")).resolve()
    env = os.getenv("SMS_ENV", "development")

    settings_files = []
    if (config_dir / "default.yaml").exists():
        settings_files.append(str(config_dir / "default.yaml"))
    if (config_dir / f"{env}.yaml").exists():
        settings_files.append(str(config_dir / f"{env}.yaml"))

    dynaconf = Dynaconf(
        envvar_prefix="SMS",
        settings_files=settings_files,
        load_dotenv=True,
    )

    config_dict: dict[str, Any] = {}
    for key in dynaconf.keys():
        if not key.startswith("_"):
            config_dict[key.lower()] = _lower_keys(dynaconf[key])

    config_dict["environment"] = env

    return Settings(**config_dict)


def _lower_keys(value: Any) -> Any:
    """Lowercase nested mapping keys coming from YAML or env."""
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value
