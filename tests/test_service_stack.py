"""Tests for infra/stacks/service_stack.py — stack composition and outputs."""

import aws_cdk as cdk
from aws_cdk.assertions import Template

from infra.service.construct import Service
from infra.stacks.service_stack import ServiceStack


class TestServiceStack:

    def test_holds_one_service(self, service_config):
        app = cdk.App()
        stack = ServiceStack(app, "CdkStack", service_config=service_config)
        services = [c for c in stack.node.children if isinstance(c, Service)]
        assert services == [stack.service]
        assert stack.service.node.id == "Service"

    def test_custom_service_id(self, service_config):
        app = cdk.App()
        stack = ServiceStack(app, "CdkStack", service_config=service_config, service_id="GraphQL")
        assert stack.node.try_find_child("GraphQL") is stack.service

    def test_no_bucket_output_without_storage(self, service_config):
        app = cdk.App()
        stack = ServiceStack(app, "CdkStack", service_config=service_config)
        template = Template.from_stack(stack)
        assert template.find_outputs("BucketName") == {}

    def test_bucket_output_with_storage(self, storage_config):
        app = cdk.App()
        stack = ServiceStack(app, "CdkStack", service_config=storage_config)
        template = Template.from_stack(stack)
        bucket_id = next(iter(template.find_resources("AWS::S3::Bucket")))
        template.has_output("BucketName", {"Value": {"Ref": bucket_id}})

    def test_api_endpoint_output(self, service_config):
        app = cdk.App()
        stack = ServiceStack(app, "CdkStack", service_config=service_config)
        outputs = Template.from_stack(stack).find_outputs("*")
        assert any("Endpoint" in name for name in outputs)

    def test_env_passed_through(self, service_config):
        app = cdk.App()
        stack = ServiceStack(
            app, "CdkStack",
            service_config=service_config,
            env=cdk.Environment(account="123456789012", region="eu-west-1"),
        )
        assert stack.account == "123456789012"
        assert stack.region == "eu-west-1"
