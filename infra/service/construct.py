"""Service construct: Lambda function, optional bucket, REST API facade.

Everything here is declaration only. Validation of ids, asset paths and
grants is left to the CDK toolkit at synthesis time.
"""

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_apigateway as apigateway
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_s3 as s3
from constructs import Construct

from infra.service.models import ServiceConfig
from infra.service.runtimes import get_runtime

DATABASE_URL_ENV = "DATABASE_URL"
LOG_LEVEL_ENV = "RUST_LOG"


def build_environment(config: ServiceConfig, bucket_name: str | None = None) -> dict[str, str]:
    """Environment map handed to the deployed handler."""
    environment: dict[str, str] = {}
    if config.database_url:
        environment[DATABASE_URL_ENV] = config.database_url
    if config.handler_log_level:
        environment[LOG_LEVEL_ENV] = config.handler_log_level
    if bucket_name is not None:
        environment[config.bucket_env_var] = bucket_name
    environment.update(config.extra_environment)
    return environment


class Service(Construct):
    """One function, zero-or-one bucket, one catch-all REST API."""

    def __init__(self, scope: Construct, id: str, config: ServiceConfig) -> None:
        super().__init__(scope, id)

        self.bucket: s3.Bucket | None = None
        if config.storage_enabled:
            self.bucket = s3.Bucket(
                self,
                "GraphQLBucket",
                removal_policy=RemovalPolicy.DESTROY,
            )

        timeout = (
            Duration.seconds(config.timeout_seconds)
            if config.timeout_seconds is not None
            else None
        )
        bucket_name = self.bucket.bucket_name if self.bucket is not None else None

        self.function = _lambda.Function(
            self,
            "Function",
            runtime=get_runtime(config.runtime),
            function_name=config.function_name,
            code=_lambda.Code.from_asset(config.artifact_path),
            handler=config.handler,
            timeout=timeout,
            environment=build_environment(config, bucket_name),
        )

        if self.bucket is not None:
            self.bucket.grant_read_write(self.function)

        # Default proxy=True: every path and method goes to the one handler
        self.api = apigateway.LambdaRestApi(
            self,
            "API",
            handler=self.function,
            rest_api_name=config.api_name,
            description=config.api_description or None,
        )
