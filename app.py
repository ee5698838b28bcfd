#!/usr/bin/env python3
"""CDK app entry point: `cdk synth` / `cdk deploy` run this file."""

import os

from infra.config.settings import get_settings
from infra.logging.synth import setup_logging
from infra.synth import synthesize

setup_logging()
# CDK_OUTDIR is exported by the CLI
synthesize(get_settings().deployment_config(), outdir=os.environ.get("CDK_OUTDIR"))
