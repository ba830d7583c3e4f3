"""Structured logging configuration for emby2openlist."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from emby2openlist.config import LoggingConfig


def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _handlers(config: LoggingConfig) -> List[logging.Handler]:
    """Build stdlib handlers: stderr always, a file only when configured."""
    # stdout is reserved for command output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if not config.output:
        return handlers

    log_path = Path(config.output)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    except OSError as e:
        print(f"Warning: Could not create log file {log_path}: {e}", file=sys.stderr)
    return handlers


def setup_logging(config: LoggingConfig) -> None:
    """Route structlog events through stdlib logging.

    Args:
        config: Logging configuration
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(config.format),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=config.level.upper(),
        handlers=_handlers(config),
        force=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, named after the calling module by convention."""
    return structlog.get_logger(name)
