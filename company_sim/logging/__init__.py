"""
Logging configuration and utilities for the company simulation.
"""
from .config import configure_logging, configure_logging_from_config, get_logger, get_plan_logger

__all__ = ["configure_logging", "configure_logging_from_config", "get_logger", "get_plan_logger"]
