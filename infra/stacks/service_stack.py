"""Deployment stack holding exactly one Service."""

from typing import Any

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.service.construct import Service
from infra.service.models import ServiceConfig


class ServiceStack(Stack):

    def __init__(
        self,
        scope: Construct,
        id: str,
        service_config: ServiceConfig,
        service_id: str = "Service",
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.service = Service(self, service_id, service_config)

        # LambdaRestApi already exports its endpoint URL
        if self.service.bucket is not None:
            CfnOutput(self, "BucketName", value=self.service.bucket.bucket_name)
