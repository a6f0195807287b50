#!/usr/bin/env python3
"""
CDK Application entry point.

Deploy with: cdk deploy
"""

import aws_cdk as cdk

from react_server_aws.config import get_settings
from react_server_aws.log import configure_logging
from react_server_aws.stack import ReactServerStack


def main():
    """Create and configure the CDK app."""
    app = cdk.App()
    settings = get_settings()
    configure_logging(settings.log_level)

    # Get environment from context or fall back to APP_ENV
    environment = app.node.try_get_context("environment") or settings.environment

    # Configure AWS environment
    env = cdk.Environment(
        account=settings.aws.account,
        region=settings.aws.region,
    )

    ReactServerStack(
        app,
        settings.stack_name,
        custom_stack_props=settings.to_stack_props(),
        output_dir=settings.build.output_dir,
        env=env,
        description=f"React Server application hosting ({environment})",
    )

    # Add tags to all resources
    cdk.Tags.of(app).add("Project", "ReactServer")
    cdk.Tags.of(app).add("Environment", environment)
    cdk.Tags.of(app).add("ManagedBy", "CDK")

    app.synth()


if __name__ == "__main__":
    main()
