"""structlog setup for the CLI and embedding hosts

Every record carries the logger name, level and an ISO timestamp; the
renderer follows CoreConfig.log_format. Generator and transition events
(tasks_generated, task_completed, task_completion_rejected, ...) are
emitted through structlog and rendered by the same handler as stdlib
records.
"""

import logging

import structlog

from .config import CoreConfig


def build_renderer(config: CoreConfig) -> structlog.types.Processor:
    """Final processor for the configured log format"""
    if config.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def setup_logging(config: CoreConfig) -> None:
    """Route structlog through a single stdlib handler on the root logger

    Args:
        config: loaded core configuration (log_format, log_level)
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=build_renderer(config),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level_number)
