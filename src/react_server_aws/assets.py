"""
Static asset discovery for CloudFront routing.

Every top-level directory of the static build output is served from S3
through its own CloudFront cache behavior. CloudFront caps the number of
behaviors per distribution, so the directory count is checked up front.
"""

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class BehaviorLimitExceededError(ValueError):
    """Raised when the static directories need more behaviors than allowed."""

    def __init__(self, directory_count: int, max_behaviors: int):
        self.directory_count = directory_count
        self.max_behaviors = max_behaviors
        super().__init__(
            f"CloudFront distributions can only have up to {max_behaviors} behaviors. "
            "Please reduce the number of directories in the static directory "
            "or request a higher quota."
        )


def discover_asset_directories(static_dir: str | Path) -> list[str]:
    """
    List the immediate subdirectories of the static build output.

    Args:
        static_dir: Directory holding the prebuilt static assets

    Returns:
        Directory names, sorted

    Raises:
        FileNotFoundError: If the static directory does not exist
    """
    static_dir = Path(static_dir)
    return sorted(entry.name for entry in static_dir.iterdir() if entry.is_dir())


def check_behavior_quota(directories: list[str], max_behaviors: int) -> None:
    """Raise BehaviorLimitExceededError if directories exceed max_behaviors."""
    if len(directories) > max_behaviors:
        logger.error(
            "Too many static directories for CloudFront behaviors",
            count=len(directories),
            max_behaviors=max_behaviors,
        )
        raise BehaviorLimitExceededError(len(directories), max_behaviors)


def behavior_path_patterns(directories: list[str]) -> list[str]:
    return [f"/{directory}/*" for directory in directories]


def plan_asset_behaviors(static_dir: str | Path, max_behaviors: int) -> list[str]:
    """
    Discover static directories and return one path pattern per directory.

    Raises:
        FileNotFoundError: If the static directory does not exist
        BehaviorLimitExceededError: If the quota would be exceeded
    """
    directories = discover_asset_directories(static_dir)
    check_behavior_quota(directories, max_behaviors)

    patterns = behavior_path_patterns(directories)
    logger.info(
        "Planned static asset behaviors",
        static_dir=str(static_dir),
        count=len(patterns),
        max_behaviors=max_behaviors,
    )
    return patterns
