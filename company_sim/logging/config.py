"""
Centralized logging configuration for the company simulation.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(log_level)

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_config(logging_config: dict[str, Any], **kwargs: Any) -> None:
    """
    Configure logging from the merged ``logging`` configuration section.

    Args:
        logging_config: Mapping with optional ``level`` and ``format_json`` keys
        **kwargs: Further arguments passed to configure_logging
    """
    configure_logging(
        level=logging_config.get("level", "INFO"),
        format_json=logging_config.get("format_json", False),
        **kwargs
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_plan_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the improvement plan subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for plan execution
    """
    # Lazy proxy, picks up configure_logging() calls made after import
    return structlog.get_logger(name, subsystem="improvement_plan")


def log_strategy_application(
    logger: FilteringBoundLogger,
    strategy: Any,
    index: int,
    before: dict[str, float],
    after: dict[str, float],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one applied strategy with before/after metric snapshots.

    Args:
        logger: Structlog logger instance
        strategy: Strategy variant that was applied
        index: Position of the strategy in the plan
        before: Metrics snapshot taken before application
        after: Metrics snapshot taken after application
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy.description(),
        plan_index=index,
        before=before,
        after=after,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Strategy applied")
