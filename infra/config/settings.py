"""Deployment settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from infra.service.models import DeploymentConfig, ServiceConfig

DEFAULT_API_DESCRIPTION = "A GraphQL serverless app made with Rust's async-graphql framework."


class Settings(BaseSettings):
    # Stack placement
    stack_name: str = "CdkStack"
    service_id: str = "Service"
    deploy_account: str = ""  # Empty = cdk context "account", else environment-agnostic
    deploy_region: str = ""

    # Function resource
    function_name: str = ""  # Empty = CloudFormation-generated name
    function_runtime: str = "provided.al2"
    function_handler: str = "unused"  # Custom runtimes ignore the handler
    artifact_path: str = "bootstrap"
    function_timeout_seconds: int | None = Field(default=None, gt=0)  # None = provider default

    # Environment handed to the deployed handler
    database_url: str = ""
    handler_log_level: str = ""  # Exposed as RUST_LOG

    # Storage resource
    storage_enabled: bool = False
    bucket_env_var: str = "BUCKET"

    # API facade
    api_name: str = "GraphQL"
    api_description: str = DEFAULT_API_DESCRIPTION

    # Logging
    log_level: str = "INFO"
    synth_log_file: str = ""  # Empty = stderr only

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "env_ignore_empty": True,  # FOO="" falls back to the default
    }

    def deployment_config(self) -> DeploymentConfig:
        """Assemble the explicit configuration object consumed by synthesis."""
        service = ServiceConfig(
            function_name=self.function_name or None,
            runtime=self.function_runtime,
            handler=self.function_handler,
            artifact_path=self.artifact_path,
            timeout_seconds=self.function_timeout_seconds,
            database_url=self.database_url,
            handler_log_level=self.handler_log_level,
            storage_enabled=self.storage_enabled,
            bucket_env_var=self.bucket_env_var,
            api_name=self.api_name,
            api_description=self.api_description,
        )
        return DeploymentConfig(
            stack_name=self.stack_name,
            service_id=self.service_id,
            account=self.deploy_account or None,
            region=self.deploy_region or None,
            service=service,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
