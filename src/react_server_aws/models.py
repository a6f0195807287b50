"""
Data models for the React Server AWS stack.

Defines the properties a caller threads into the stack declaration.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Default CloudFront quota for cache behaviors per distribution
# https://docs.aws.amazon.com/AmazonCloudFront/latest/DeveloperGuide/cloudfront-limits.html
DEFAULT_MAX_BEHAVIORS = 25


def distribution_url_parameter_name(stack_name: str) -> str:
    """SSM parameter name holding the public URL of a deployed stack."""
    return f"/{stack_name}/distribution/url"


class CustomStackProps(BaseModel):
    """
    Custom properties for the React Server stack.

    ``certificate`` and ``hosted_zone`` hold CDK construct references
    (``ICertificate`` / ``IHostedZone``), which pydantic cannot validate,
    so they are typed loosely. A certificate may also be given as an ACM ARN.
    """

    model_config = ConfigDict(frozen=True)

    certificate: Any = None
    hosted_zone: Any = None
    hosted_zone_id: str | None = None
    hosted_zone_name: str | None = None
    sub_domain: str | None = None
    domain_name: str | None = None
    max_behaviors: int = Field(default=DEFAULT_MAX_BEHAVIORS, ge=0)

    @property
    def site_domain_name(self) -> str | None:
        """Fully qualified site domain, or None to use the CloudFront domain."""
        if not self.domain_name:
            return None
        if self.sub_domain:
            return f"{self.sub_domain}.{self.domain_name}"
        return self.domain_name

    @property
    def resolved_hosted_zone_name(self) -> str | None:
        return self.hosted_zone_name or self.domain_name
