"""Strategy variants applied by an improvement plan"""

from typing import Union

from .marketing import MarketingCampaign, calculate_revenue_boost
from .training import TrainingProgram, calculate_improvement

# Closed set of strategy variants
Strategy = Union[MarketingCampaign, TrainingProgram]

# Plan entry type tag -> (variant, name of its integer parameter)
STRATEGY_TYPES: dict[str, tuple[type, str]] = {
    "marketing_campaign": (MarketingCampaign, "budget"),
    "training_program": (TrainingProgram, "sessions"),
}

__all__ = [
    "Strategy",
    "STRATEGY_TYPES",
    "MarketingCampaign",
    "TrainingProgram",
    "calculate_revenue_boost",
    "calculate_improvement",
]
