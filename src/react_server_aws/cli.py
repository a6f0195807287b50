"""
Command Line Interface for React Server AWS.

Provides CLI commands for checking the build output before synthesis
and for looking up the URL of a deployed stack.
"""

import argparse
import asyncio
import sys

import structlog

from react_server_aws.log import configure_logging

logger = structlog.get_logger(__name__)


def non_negative_int(value: str) -> int:
    """Argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def check_build(output_dir: str | None = None, max_behaviors: int | None = None) -> list[str]:
    """Run the CloudFront behavior pre-flight check against the build output."""
    from pathlib import Path

    from react_server_aws.assets import BehaviorLimitExceededError, plan_asset_behaviors
    from react_server_aws.config import get_settings

    settings = get_settings()
    static_dir = Path(output_dir or settings.build.output_dir) / "static"
    limit = settings.build.max_behaviors if max_behaviors is None else max_behaviors

    try:
        patterns = plan_asset_behaviors(static_dir, limit)
    except FileNotFoundError:
        logger.error("Static directory not found", path=str(static_dir))
        sys.exit(1)
    except BehaviorLimitExceededError as e:
        logger.error("Build output exceeds behavior quota", error=str(e))
        sys.exit(1)

    print(f"\n{len(patterns)}/{limit} CloudFront behaviors for static assets:")
    for pattern in patterns:
        print(f"  {pattern}")

    return patterns


async def show_url(stack_name: str | None = None) -> str:
    """Print the public URL of a deployed stack."""
    from react_server_aws.services.parameters import (
        DistributionNotDeployedError,
        DistributionParameterService,
    )

    service = DistributionParameterService()
    try:
        url = await service.get_distribution_url(stack_name)
    except DistributionNotDeployedError as e:
        logger.error("Stack not deployed", stack=e.stack_name, parameter=e.parameter_name)
        sys.exit(1)

    print(url)
    return url


def main():
    """Main CLI entry point."""
    from react_server_aws.config import get_settings

    parser = argparse.ArgumentParser(
        description="React Server AWS CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check build output against the behavior quota")
    check_parser.add_argument("--output-dir", help="Build output directory")
    check_parser.add_argument("--max-behaviors", type=non_negative_int, help="CloudFront behavior quota")

    # URL command
    url_parser = subparsers.add_parser("url", help="Show the URL of a deployed stack")
    url_parser.add_argument("--stack-name", help="CloudFormation stack name")

    args = parser.parse_args()

    configure_logging(get_settings().log_level)

    if args.command == "check":
        check_build(args.output_dir, args.max_behaviors)

    elif args.command == "url":
        asyncio.run(show_url(args.stack_name))

    else:
        parser.print_help()


if __name__ == "__main__":
    main()
