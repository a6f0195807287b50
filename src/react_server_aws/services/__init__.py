"""
Services module for React Server AWS.

Contains AWS service integrations used by the tooling around the stack.
"""

from react_server_aws.services.parameters import (
    DistributionNotDeployedError,
    DistributionParameterService,
)

__all__ = [
    "DistributionNotDeployedError",
    "DistributionParameterService",
]
