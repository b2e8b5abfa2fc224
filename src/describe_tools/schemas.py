"""Connection and remote response schemas for describe-tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from describe_tools.core.config import settings


class SalesforceConnectionConfig(BaseModel):
    """Configuration for an authenticated Salesforce REST connection."""

    model_config = ConfigDict(extra="forbid")

    instance_url: str = Field(..., description="Instance base URL")
    access_token: str = Field(..., description="OAuth access token")
    api_version: str = Field(
        default_factory=lambda: settings.salesforce_api_version,
        description="REST API version, e.g. 59.0",
    )
    timeout: float = Field(
        default_factory=lambda: settings.request_timeout,
        description="Request timeout in seconds",
    )

    @field_validator("instance_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"instance_url must be an http(s) URL: {value}")
        return value.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def _strip_version_prefix(cls, value: str) -> str:
        return value.lstrip("vV")


class SObjectSummary(BaseModel):
    """One entry of the global describe listing."""

    model_config = ConfigDict(extra="allow")

    name: str


class DescribeGlobalResult(BaseModel):
    """Global describe response listing every object of an instance."""

    model_config = ConfigDict(extra="allow")

    sobjects: list[SObjectSummary] = Field(default_factory=list)
