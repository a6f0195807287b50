"""
Pytest configuration and fixtures for React Server AWS tests.
"""

import os

import pytest
from unittest.mock import MagicMock

# Set test environment variables
os.environ["APP_ENV"] = "test"
os.environ["CDK_DEFAULT_ACCOUNT"] = "123456789012"
os.environ["CDK_DEFAULT_REGION"] = "us-east-1"
os.environ["STACK_NAME"] = "TestStack"


def make_build_output(root, directories):
    """Create a fake adapter build output with the given static directories."""
    static_dir = root / "static"
    static_dir.mkdir(parents=True)
    (static_dir / "favicon.ico").write_bytes(b"\x00")
    for name in directories:
        (static_dir / name).mkdir()
        (static_dir / name / "asset.js").write_text("console.log('asset');")

    function_dir = root / "functions" / "index.func"
    function_dir.mkdir(parents=True)
    (function_dir / "index.js").write_text("export const handler = async () => ({ statusCode: 200 });")
    return root


@pytest.fixture
def make_output(tmp_path):
    """Factory for build outputs with the given static directories."""
    def _make(directories, name="output"):
        return make_build_output(tmp_path / name, directories)
    return _make


@pytest.fixture
def build_output(make_output):
    """Build output with two static directories."""
    return make_output(["_next", "images"])


@pytest.fixture
def settings(monkeypatch):
    """Create test settings with no custom domain configured."""
    from react_server_aws.config import Settings, get_settings

    for name in (
        "SITE_DOMAIN_NAME",
        "SITE_SUB_DOMAIN",
        "SITE_CERTIFICATE_ARN",
        "SITE_HOSTED_ZONE_ID",
        "SITE_HOSTED_ZONE_NAME",
        "BUILD_OUTPUT_DIR",
        "BUILD_MAX_BEHAVIORS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture
def mock_ssm_client():
    """Create a mock SSM client."""
    client = MagicMock()
    client.get_parameter = MagicMock(return_value={
        "Parameter": {
            "Name": "/TestStack/distribution/url",
            "Type": "String",
            "Value": "d111111abcdef8.cloudfront.net",
        }
    })
    return client
