"""
SSM Parameter Store lookups for deployed stacks.

The stack stores its public domain under ``/{stack_name}/distribution/url``;
this service reads it back for tooling that needs the live URL.
"""

import boto3
import structlog
from botocore.exceptions import ClientError
from tenacity import (
    retry,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from react_server_aws.config import Settings, get_settings
from react_server_aws.models import distribution_url_parameter_name

logger = structlog.get_logger(__name__)


class DistributionNotDeployedError(LookupError):
    """Raised when a stack has not published its distribution URL."""

    def __init__(self, stack_name: str, parameter_name: str):
        self.stack_name = stack_name
        self.parameter_name = parameter_name
        super().__init__(
            f"No distribution URL found for stack {stack_name} (parameter {parameter_name})"
        )


class DistributionParameterService:
    """Service for reading stack parameters from AWS Systems Manager."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the parameter service."""
        self.settings = settings or get_settings()
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the SSM client."""
        if self._client is None:
            # Only pass credentials if explicitly set, otherwise use the default chain
            kwargs = {"region_name": self.settings.aws.region}
            if self.settings.aws.access_key_id and self.settings.aws.secret_access_key:
                kwargs["aws_access_key_id"] = self.settings.aws.access_key_id
                kwargs["aws_secret_access_key"] = self.settings.aws.secret_access_key
            self._client = boto3.client("ssm", **kwargs)
        return self._client

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_not_exception_type(DistributionNotDeployedError),
        reraise=True,
    )
    async def get_distribution_domain(self, stack_name: str | None = None) -> str:
        """
        Read the public domain published by a deployed stack.

        Args:
            stack_name: Stack to look up, defaults to the configured stack name

        Returns:
            The site domain, or the CloudFront domain when no custom domain is set

        Raises:
            DistributionNotDeployedError: If the parameter does not exist
        """
        stack_name = stack_name or self.settings.stack_name
        parameter_name = distribution_url_parameter_name(stack_name)

        try:
            response = self.client.get_parameter(Name=parameter_name)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ParameterNotFound":
                raise DistributionNotDeployedError(stack_name, parameter_name) from e
            logger.error("Failed to read distribution parameter", parameter=parameter_name, error=str(e))
            raise

        domain = response["Parameter"]["Value"]
        logger.debug("Distribution domain resolved", stack=stack_name, domain=domain)
        return domain

    async def get_distribution_url(self, stack_name: str | None = None) -> str:
        """Return the HTTPS URL of a deployed stack."""
        domain = await self.get_distribution_domain(stack_name)
        return f"https://{domain}"
