"""
Logging configuration for the Minecraft MCP bridge using structlog

stdout carries the MCP protocol, so every handler configured here writes to
stderr or to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
from structlog.processors import (
    TimeStamper,
    add_log_level,
    dict_tracebacks,
)
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    add_logger_name,
    filter_by_level,
)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    library_log_level: str = "WARNING",
) -> None:
    """
    Configure structlog for diagnostic output on stderr and an optional file

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path. File output is always JSON
        json_format: Whether stderr output is JSON instead of the console renderer
        library_log_level: Logging level for the MCP SDK and JSPyBridge loggers
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    root_logger.addHandler(stderr_handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    shared_processors = [
        add_log_level,
        add_logger_name,
        TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        dict_tracebacks,
    ]

    if json_format:
        stderr_renderer = structlog.processors.JSONRenderer()
    else:
        # No colors: stderr usually ends up in an MCP client's log file
        stderr_renderer = structlog.dev.ConsoleRenderer(colors=False, pad_event=30)

    structlog.configure(
        processors=[
            filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    stderr_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=stderr_renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    if file_handler is not None:
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )

    library_level = getattr(logging, library_log_level.upper())
    logging.getLogger("mcp").setLevel(library_level)
    logging.getLogger("javascript").setLevel(library_level)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger: BoundLogger = structlog.get_logger(__name__)
    logger.debug(
        "Logging initialized",
        log_level=log_level,
        log_file=log_file,
        json_format=json_format,
        library_log_level=logging.getLevelName(library_level),
    )


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured structlog logger

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger
    """
    return structlog.get_logger(name)
