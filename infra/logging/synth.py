"""JSON logging for `cdk synth` / `cdk deploy` runs.

Log lines go to stderr, one JSON object per line, leaving stdout to the
CDK toolkit (`cdk synth > template.yaml`). SYNTH_LOG_FILE adds a file copy.

Every record emitted inside `synth_run()` carries that run's synth id.
"""

import json
import logging
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timezone

from infra.config.settings import get_settings

LOGGER_NAME = "infra.synth"

synth_id_var: ContextVar[str] = ContextVar("synth_id", default="")


class JSONFormatter(logging.Formatter):
    """Single-line JSON; `extra={"synth_data": {...}}` is merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "synth_id": synth_id_var.get(""),
        }
        log_entry.update(getattr(record, "synth_data", {}))
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging() -> None:
    """Route the synthesis logger to stderr (and the optional log file)."""
    settings = get_settings()

    logger = get_synth_logger()
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.synth_log_file:
        handlers.append(logging.FileHandler(settings.synth_log_file))

    formatter = JSONFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_synth_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def generate_synth_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class SynthRun:
    synth_id: str
    started: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.started) * 1000, 2)


@contextmanager
def synth_run() -> Iterator[SynthRun]:
    """Bind a fresh synth id for the duration of one synthesis."""
    run = SynthRun(synth_id=generate_synth_id())
    token = synth_id_var.set(run.synth_id)
    try:
        yield run
    finally:
        synth_id_var.reset(token)
