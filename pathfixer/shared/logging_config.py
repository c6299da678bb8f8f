# pathfixer\shared\logging_config.py
import logging
import sys
import uuid
from typing import Optional

import structlog

from pathfixer.shared.config import LOG_LEVELS, LogFormat, settings


def generate_run_id() -> str:
    """Generates a short, unique run ID for tracking."""
    return str(uuid.uuid4())[:8]


def _stderr_logger(*args) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: Optional[str] = None, log_format: Optional[LogFormat] = None
) -> str:
    """
    Configures structlog to emit structured JSON logs or colored text logs.

    Logs always go to stderr: stdout is reserved for the rewrite report so
    it can be piped or diffed without diagnostic noise.

    Returns:
        str: The run ID bound to every log entry of this process.
    """
    level = (level or settings.LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'")
    log_format = log_format or settings.LOG_FORMAT

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level)
        ),
        logger_factory=_stderr_logger,
        # Rebuilt per call so the sink follows sys.stderr if it is swapped out
        cache_logger_on_first_use=False,
    )

    # 4. Tag every entry of this run
    run_id = generate_run_id()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(run_id=run_id)
    return run_id
