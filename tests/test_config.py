"""
Tests for settings and stack property models.
"""

import pytest
from pydantic import ValidationError

from react_server_aws.config import BuildSettings, Settings
from react_server_aws.models import (
    CustomStackProps,
    DEFAULT_MAX_BEHAVIORS,
    distribution_url_parameter_name,
)


class TestCustomStackProps:
    """Tests for CustomStackProps."""

    def test_defaults(self):
        """Props without a domain fall back to the CloudFront domain."""
        props = CustomStackProps()

        assert props.certificate is None
        assert props.hosted_zone is None
        assert props.max_behaviors == DEFAULT_MAX_BEHAVIORS == 25
        assert props.site_domain_name is None

    def test_site_domain_with_subdomain(self):
        """Subdomain and domain are joined."""
        props = CustomStackProps(sub_domain="www", domain_name="example.com")

        assert props.site_domain_name == "www.example.com"

    def test_site_domain_without_subdomain(self):
        """An empty subdomain targets the apex."""
        assert CustomStackProps(domain_name="example.com").site_domain_name == "example.com"
        assert CustomStackProps(sub_domain="", domain_name="example.com").site_domain_name == "example.com"

    def test_subdomain_without_domain(self):
        """A subdomain alone does not make a custom domain."""
        assert CustomStackProps(sub_domain="www").site_domain_name is None

    def test_hosted_zone_name(self):
        """The zone name defaults to the domain name."""
        assert CustomStackProps(domain_name="example.com").resolved_hosted_zone_name == "example.com"
        props = CustomStackProps(domain_name="app.example.com", hosted_zone_name="example.com")
        assert props.resolved_hosted_zone_name == "example.com"

    def test_negative_max_behaviors(self):
        """A negative quota is rejected."""
        with pytest.raises(ValidationError):
            CustomStackProps(max_behaviors=-1)

    def test_frozen(self):
        """Props are immutable once created."""
        props = CustomStackProps(domain_name="example.com")

        with pytest.raises(ValidationError):
            props.domain_name = "other.com"

    def test_parameter_name(self):
        """The URL parameter lives under the stack name."""
        assert distribution_url_parameter_name("MyStack") == "/MyStack/distribution/url"


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, settings):
        """Defaults for an unconfigured environment."""
        assert settings.stack_name == "TestStack"
        assert settings.aws.region == "us-east-1"
        assert settings.aws.account == "123456789012"
        assert settings.build.output_dir == ".aws-react-server/output"
        assert settings.build.max_behaviors == 25
        assert settings.site.domain_name is None

    def test_site_from_environment(self, monkeypatch, settings):
        """Site settings are read from SITE_ variables."""
        monkeypatch.setenv("SITE_DOMAIN_NAME", "example.com")
        monkeypatch.setenv("SITE_SUB_DOMAIN", "www")
        monkeypatch.setenv("SITE_HOSTED_ZONE_ID", "Z0123456789ABCDEFGHIJ")

        configured = Settings(_env_file=None)

        assert configured.site.domain_name == "example.com"
        assert configured.site.sub_domain == "www"
        assert configured.site.hosted_zone_id == "Z0123456789ABCDEFGHIJ"

    def test_build_from_environment(self, monkeypatch, settings):
        """Build settings are read from BUILD_ variables."""
        monkeypatch.setenv("BUILD_OUTPUT_DIR", "/tmp/build")
        monkeypatch.setenv("BUILD_MAX_BEHAVIORS", "10")

        build = BuildSettings(_env_file=None)

        assert build.output_dir == "/tmp/build"
        assert build.max_behaviors == 10

    def test_negative_max_behaviors(self, monkeypatch, settings):
        """A negative quota in the environment is rejected."""
        monkeypatch.setenv("BUILD_MAX_BEHAVIORS", "-5")

        with pytest.raises(ValidationError):
            BuildSettings(_env_file=None)

    def test_to_stack_props(self, monkeypatch, settings):
        """Settings map onto stack properties."""
        monkeypatch.setenv("SITE_DOMAIN_NAME", "example.com")
        monkeypatch.setenv("SITE_SUB_DOMAIN", "www")
        monkeypatch.setenv("SITE_CERTIFICATE_ARN", "arn:aws:acm:us-east-1:123456789012:certificate/abc")
        monkeypatch.setenv("BUILD_MAX_BEHAVIORS", "7")

        props = Settings(_env_file=None).to_stack_props()

        assert props.certificate == "arn:aws:acm:us-east-1:123456789012:certificate/abc"
        assert props.site_domain_name == "www.example.com"
        assert props.max_behaviors == 7
        assert props.hosted_zone is None
