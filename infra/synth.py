"""Synthesis entry point.

The configuration object is passed in explicitly; a fresh `App` is built per
call so nothing is registered globally.
"""

from typing import Any

import aws_cdk as cdk
from aws_cdk import cx_api

from infra.logging.synth import get_synth_logger, synth_run
from infra.service.models import DeploymentConfig
from infra.stacks.service_stack import ServiceStack

# Mirrors the "context" block of cdk.json so direct calls synthesize the
# same plan as the CLI. CLI / cdk.json context takes precedence.
DEFAULT_CONTEXT: dict[str, Any] = {
    "@aws-cdk/aws-apigateway:disableCloudWatchRole": True,
}


def build_app(
    config: DeploymentConfig,
    outdir: str | None = None,
    context: dict[str, Any] | None = None,
) -> tuple[cdk.App, ServiceStack]:
    """Create an App holding the single ServiceStack for this deployment."""
    app = cdk.App(outdir=outdir, context={**DEFAULT_CONTEXT, **(context or {})})
    stack = ServiceStack(
        app,
        config.stack_name,
        service_config=config.service,
        service_id=config.service_id,
        env=config.environment(
            default_account=app.node.try_get_context("account"),
            default_region=app.node.try_get_context("region"),
        ),
    )
    return app, stack


def synthesize(
    config: DeploymentConfig,
    outdir: str | None = None,
    context: dict[str, Any] | None = None,
) -> cx_api.CloudAssembly:
    """Build and synthesize the deployment plan.

    Toolkit errors (missing asset, invalid ids, ...) are logged and re-raised.
    """
    logger = get_synth_logger()
    service = config.service

    with synth_run() as run:
        try:
            app, _ = build_app(config, outdir=outdir, context=context)
            assembly = app.synth()
        except Exception:
            logger.exception(
                "Synthesis failed",
                extra={"synth_data": {
                    "stack": config.stack_name,
                    "artifact_path": service.artifact_path,
                    "latency_ms": run.elapsed_ms,
                }},
            )
            raise

        logger.info(
            "Stack synthesized",
            extra={"synth_data": {
                "stack": config.stack_name,
                "service": config.service_id,
                "runtime": service.runtime,
                "artifact_path": service.artifact_path,
                "timeout_seconds": service.timeout_seconds,
                "storage_enabled": service.storage_enabled,
                "outdir": assembly.directory,
                "latency_ms": run.elapsed_ms,
            }},
        )
        return assembly
