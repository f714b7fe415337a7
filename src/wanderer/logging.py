"""Logging configuration for Wanderer."""

import hashlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from .config import Config

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace client certificate fingerprints with a short hash."""
    fp = event_dict.pop("fingerprint", None)
    if fp is not None:
        if fp and fp != "unknown":
            event_dict["fingerprint_hash"] = hashlib.sha256(fp.encode()).hexdigest()[:12]
        else:
            event_dict["fingerprint"] = fp
    return event_dict


def _level_to_int(level: str) -> int:
    return _LEVELS.get(level.upper(), 20)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
    stream=None,
) -> None:
    """Configure structured logging for the application.

    Console play logs to stderr so game output on stdout stays readable.
    """
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = stream or sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]

    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=output_stream.isatty())
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def configure_from_config(config: "Config", stream=None) -> None:
    """Configure logging from the WANDERER_* settings.

    A configured log file takes precedence over `stream`.
    """
    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
        stream=stream,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
