"""
Error classification for scenario and plan definitions.

Strategy application is total over real numbers; only the layer that parses
external definitions raises.
"""

from .scenario import (
    ScenarioError,
    MissingFieldError,
    MalformedFieldError,
    UnknownStrategyError,
    ScenarioNotFoundError,
)

__all__ = [
    "ScenarioError",
    "MissingFieldError",
    "MalformedFieldError",
    "UnknownStrategyError",
    "ScenarioNotFoundError",
]
