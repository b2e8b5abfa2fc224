"""Configuration management for describe-tools."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    otel_enabled: bool = False
    otel_service_name: str = "describe-tools"

    salesforce_api_version: str = "59.0"
    request_timeout: float = 30.0

    model_config = {
        "env_prefix": "DESCRIBE_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
