"""
React Server AWS - CDK infrastructure for server-rendered React applications.

Serves static assets from S3 and dynamic requests from Lambda behind a
single CloudFront distribution, with optional custom domain support.
"""

__version__ = "0.1.0"

from react_server_aws.config import Settings
from react_server_aws.models import CustomStackProps

__all__ = ["Settings", "CustomStackProps", "__version__"]
