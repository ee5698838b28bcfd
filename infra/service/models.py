"""Service and deployment configuration models."""

from dataclasses import dataclass, field

import aws_cdk as cdk


@dataclass
class ServiceConfig:
    function_name: str | None = None  # None = generated physical name
    runtime: str = "provided.al2"
    handler: str = "unused"
    artifact_path: str = "bootstrap"
    timeout_seconds: int | None = None  # None = provider default
    database_url: str = ""
    handler_log_level: str = ""
    storage_enabled: bool = False
    bucket_env_var: str = "BUCKET"
    extra_environment: dict[str, str] = field(default_factory=dict)
    api_name: str = "GraphQL"
    api_description: str = ""


@dataclass
class DeploymentConfig:
    stack_name: str = "CdkStack"
    service_id: str = "Service"
    account: str | None = None
    region: str | None = None
    service: ServiceConfig = field(default_factory=ServiceConfig)

    def environment(
        self,
        default_account: str | None = None,
        default_region: str | None = None,
    ) -> cdk.Environment | None:
        """Target environment, or None for an environment-agnostic stack.

        Explicit account/region win over the defaults (cdk context values).
        """
        account = self.account or default_account
        region = self.region or default_region
        if account is None and region is None:
            return None
        return cdk.Environment(account=account, region=region)
