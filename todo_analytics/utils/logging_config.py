"""structlog configuration.

dev format: pretty console output
json format: one JSON object per line
"""

import logging
import os
from typing import Any, Dict, Optional

import structlog


def setup_logging(config: Optional[Dict[str, Any]] = None) -> None:
    """Configure structlog and the stdlib root logger.

    TODO_ANALYTICS_LOG_FORMAT and TODO_ANALYTICS_LOG_LEVEL override the
    `logging` section of the config.
    """
    logging_config = (config or {}).get('logging', {})
    log_format = os.environ.get("TODO_ANALYTICS_LOG_FORMAT", logging_config.get('format', 'dev'))
    log_level = os.environ.get("TODO_ANALYTICS_LOG_LEVEL", logging_config.get('level', 'INFO'))

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))
