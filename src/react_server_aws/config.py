"""
Configuration settings for the React Server AWS deployment.

Uses pydantic-settings for type-safe configuration management with
environment variable support.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from react_server_aws.models import CustomStackProps, DEFAULT_MAX_BEHAVIORS


class AWSSettings(BaseSettings):
    """AWS-specific configuration settings."""

    model_config = SettingsConfigDict(extra="ignore")

    # CDK toolkit exports these for the target account
    account: str | None = Field(default=None, alias="CDK_DEFAULT_ACCOUNT")
    region: str = Field(default="us-east-1", alias="CDK_DEFAULT_REGION")

    # Only used by the SSM reader when running outside a configured profile
    access_key_id: str | None = Field(default=None, alias="REACT_SERVER_AWS_ACCESS_KEY_ID")
    secret_access_key: str | None = Field(default=None, alias="REACT_SERVER_AWS_SECRET_ACCESS_KEY")


class SiteSettings(BaseSettings):
    """Custom domain configuration."""

    model_config = SettingsConfigDict(env_prefix="SITE_", extra="ignore")

    domain_name: str | None = Field(default=None, description="Apex domain, e.g. example.com")
    sub_domain: str | None = Field(default=None, description="Record name inside the zone, e.g. www")
    certificate_arn: str | None = Field(
        default=None,
        description="ACM certificate ARN (must live in us-east-1 for CloudFront)",
    )
    hosted_zone_id: str | None = Field(default=None, description="Route 53 hosted zone ID")
    hosted_zone_name: str | None = Field(
        default=None,
        description="Hosted zone name, defaults to domain_name",
    )


class BuildSettings(BaseSettings):
    """Build output configuration."""

    model_config = SettingsConfigDict(env_prefix="BUILD_", extra="ignore")

    output_dir: str = Field(
        default=".aws-react-server/output",
        description="Directory holding static/ and functions/ build output",
    )
    max_behaviors: int = Field(
        default=DEFAULT_MAX_BEHAVIORS,
        description="Maximum CloudFront cache behaviors for static directories",
    )

    @field_validator("max_behaviors")
    @classmethod
    def validate_max_behaviors(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_behaviors must not be negative")
        return v


class Settings(BaseSettings):
    """Main application settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="dev", alias="APP_ENV")
    stack_name: str = Field(default="ReactServerStack", alias="STACK_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Nested settings
    aws: AWSSettings = Field(default_factory=AWSSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)

    def to_stack_props(self) -> CustomStackProps:
        """Build the stack properties described by these settings."""
        return CustomStackProps(
            certificate=self.site.certificate_arn,
            hosted_zone_id=self.site.hosted_zone_id,
            hosted_zone_name=self.site.hosted_zone_name,
            sub_domain=self.site.sub_domain,
            domain_name=self.site.domain_name,
            max_behaviors=self.build.max_behaviors,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
