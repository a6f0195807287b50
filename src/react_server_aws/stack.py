"""
AWS CDK Stack for hosting a server-rendered React application.

Creates all necessary AWS resources for serving the application:
- S3 bucket for prebuilt static assets
- Lambda function for server-side request handling behind an HTTP API
- CloudFront distribution routing static directories to S3
- Route 53 alias record (optional)
- SSM parameter holding the public URL
"""

from pathlib import Path

import structlog
from constructs import Construct
from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_apigatewayv2 as apigwv2,
    aws_apigatewayv2_integrations as integrations,
    aws_certificatemanager as acm,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
    aws_lambda as lambda_,
    aws_logs as logs,
    aws_route53 as route53,
    aws_route53_targets as targets,
    aws_s3 as s3,
    aws_s3_deployment as s3deploy,
    aws_ssm as ssm,
)

from react_server_aws.assets import plan_asset_behaviors
from react_server_aws.models import CustomStackProps, distribution_url_parameter_name

logger = structlog.get_logger(__name__)

DEFAULT_OUTPUT_DIR = Path(".aws-react-server") / "output"


class ReactServerStack(Stack):
    """
    CDK Stack for a React Server deployment.

    Expects the adapter build output under ``output_dir``:
    ``static/`` for assets served from S3 and ``functions/index.func/``
    for the Lambda request handler bundle.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        custom_stack_props: CustomStackProps | None = None,
        output_dir: str | Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        props = custom_stack_props or CustomStackProps()
        output_dir = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
        static_dir = output_dir / "static"
        function_dir = output_dir / "functions" / "index.func"

        self.distribution_url_parameter_name = distribution_url_parameter_name(self.stack_name)
        self.site_domain_name = props.site_domain_name

        # Fail before declaring anything if CloudFront cannot route every directory
        self.asset_path_patterns = plan_asset_behaviors(static_dir, props.max_behaviors)

        logger.info(
            "Declaring React Server stack",
            stack=construct_id,
            site_domain=self.site_domain_name,
            behaviors=len(self.asset_path_patterns),
        )

        certificate = self._resolve_certificate(props)
        hosted_zone = self._resolve_hosted_zone(props)

        self.bucket = s3.Bucket(
            self,
            "StaticAssetsBucket",
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )

        request_handler_logs = logs.LogGroup(
            self,
            "RequestHandlerLogs",
            retention=logs.RetentionDays.THREE_DAYS,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Lambda function for server-side rendering
        self.request_handler = lambda_.Function(
            self,
            "RequestHandler",
            runtime=lambda_.Runtime.NODEJS_20_X,
            handler="index.handler",
            code=lambda_.Code.from_asset(str(function_dir)),
            environment={
                "NODE_ENV": "production",
            },
            architecture=lambda_.Architecture.ARM_64,
            memory_size=256,
            timeout=Duration.seconds(10),
            log_group=request_handler_logs,
            tracing=lambda_.Tracing.ACTIVE,
        )

        integration = integrations.HttpLambdaIntegration(
            "RequestHandlerIntegration",
            self.request_handler,
            payload_format_version=apigwv2.PayloadFormatVersion.VERSION_2_0,
        )

        self.http_api = apigwv2.HttpApi(
            self,
            "WebsiteApi",
            default_integration=integration,
        )

        http_api_domain = f"{self.http_api.http_api_id}.execute-api.{self.region}.{self.url_suffix}"

        # CloudFront distribution, dynamic requests go to the HTTP API by default
        self.distribution = cloudfront.Distribution(
            self,
            "CloudFront",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.HttpOrigin(http_api_domain),
                allowed_methods=cloudfront.AllowedMethods.ALLOW_ALL,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
                # https://docs.aws.amazon.com/AmazonCloudFront/latest/DeveloperGuide/using-managed-origin-request-policies.html
                origin_request_policy=cloudfront.OriginRequestPolicy.ALL_VIEWER_EXCEPT_HOST_HEADER,
                compress=True,
            ),
            domain_names=[self.site_domain_name] if self.site_domain_name else None,
            certificate=certificate,
            enable_ipv6=True,
            minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
            http_version=cloudfront.HttpVersion.HTTP2_AND_3,
            price_class=cloudfront.PriceClass.PRICE_CLASS_100,
        )

        asset_origin = origins.S3BucketOrigin.with_origin_access_control(self.bucket)
        for path_pattern in self.asset_path_patterns:
            self.distribution.add_behavior(
                path_pattern,
                asset_origin,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                compress=True,
            )

        # Upload static assets and invalidate the CloudFront cache
        s3deploy.BucketDeployment(
            self,
            "DeployStaticAssets",
            sources=[s3deploy.Source.asset(str(static_dir))],
            destination_bucket=self.bucket,
            distribution=self.distribution,
            distribution_paths=["/*"],
            prune=True,
            cache_control=[
                s3deploy.CacheControl.max_age(Duration.days(365)),
                s3deploy.CacheControl.s_max_age(Duration.days(365)),
            ],
        )

        self.alias_record = None
        if hosted_zone is not None:
            # Empty record name targets the zone apex
            self.alias_record = route53.ARecord(
                self,
                "AliasRecord",
                zone=hosted_zone,
                target=route53.RecordTarget.from_alias(
                    targets.CloudFrontTarget(self.distribution)
                ),
                record_name=props.sub_domain or None,
            )

        public_domain = self.site_domain_name or self.distribution.distribution_domain_name

        ssm.StringParameter(
            self,
            "DistributionUrlParameter",
            parameter_name=self.distribution_url_parameter_name,
            string_value=public_domain,
            tier=ssm.ParameterTier.STANDARD,
        )

        # Outputs
        CfnOutput(
            self,
            "CloudFrontURL",
            value=f"https://{public_domain}",
            description="Public URL of the application",
        )

        CfnOutput(
            self,
            "CloudFrontID",
            value=self.distribution.distribution_id,
            description="CloudFront distribution ID",
        )

    def _resolve_certificate(self, props: CustomStackProps) -> acm.ICertificate | None:
        """Use the given certificate, importing it when passed as an ARN."""
        if props.certificate is None:
            return None
        if isinstance(props.certificate, str):
            if not props.certificate:
                return None
            return acm.Certificate.from_certificate_arn(self, "Certificate", props.certificate)
        return props.certificate

    def _resolve_hosted_zone(self, props: CustomStackProps) -> route53.IHostedZone | None:
        """Use the given hosted zone, importing it by ID when possible."""
        if props.hosted_zone is not None:
            return props.hosted_zone

        zone_name = props.resolved_hosted_zone_name
        if props.hosted_zone_id and zone_name:
            return route53.HostedZone.from_hosted_zone_attributes(
                self,
                "HostedZone",
                hosted_zone_id=props.hosted_zone_id,
                zone_name=zone_name,
            )
        if props.hosted_zone_id:
            logger.warning(
                "Ignoring hosted zone ID without a zone name",
                hosted_zone_id=props.hosted_zone_id,
            )
        return None
