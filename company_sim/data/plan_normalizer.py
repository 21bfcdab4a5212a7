"""
Plan data normalization for converting raw plan data to strategy variants.

This module handles parsing, type coercion and field name standardization of
improvement plan entries and initial company metrics as they arrive from YAML
or JSON scenario definitions.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..config.defaults import MarketingParams, TrainingParams
from ..errors import (
    MalformedFieldError,
    MissingFieldError,
    ScenarioError,
    UnknownStrategyError,
)
from ..strategies import STRATEGY_TYPES, MarketingCampaign, Strategy, TrainingProgram

logger = logging.getLogger(__name__)

METRIC_FIELDS = ('revenue', 'expenses', 'employee_satisfaction', 'product_quality')

# Alternative spellings accepted for metric fields
METRIC_ALIASES = {
    'satisfaction': 'employee_satisfaction',
    'quality': 'product_quality',
}


@dataclass
class PlanNormalizationResult:
    """Result of plan normalization process."""
    # Normalized strategies in application order
    strategies: tuple = field(default_factory=tuple)
    # Processing metadata
    success: bool = True
    error_msg: Optional[str] = None
    error: Optional[ScenarioError] = None

    @classmethod
    def ok(cls, strategies: tuple) -> "PlanNormalizationResult":
        """Create successful result with normalized strategies."""
        return cls(
            strategies=strategies,
            success=True
        )

    @classmethod
    def failed(cls, error: ScenarioError) -> "PlanNormalizationResult":
        """Create error result."""
        return cls(
            success=False,
            error_msg=str(error),
            error=error
        )


def _coerce_int(value: Any, field_name: str) -> int:
    """Coerce a plan parameter to int without range checks."""
    if isinstance(value, bool):
        raise MalformedFieldError(
            f"{field_name} must be an integer, got boolean",
            field_name=field_name, raw_value=value
        )
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise MalformedFieldError(
                f"{field_name} must be a whole number, got {value}",
                field_name=field_name, raw_value=value
            )
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise MalformedFieldError(
                f"Invalid {field_name}: {value!r}",
                field_name=field_name, raw_value=value
            ) from None
    raise MalformedFieldError(
        f"{field_name} must be an integer, got {type(value).__name__}",
        field_name=field_name, raw_value=value
    )


def _coerce_float(value: Any, field_name: str) -> float:
    """Coerce a metric value to float without range checks."""
    if isinstance(value, bool):
        raise MalformedFieldError(
            f"{field_name} must be a number, got boolean",
            field_name=field_name, raw_value=value
        )
    try:
        return float(value)
    except (ValueError, TypeError):
        raise MalformedFieldError(
            f"Invalid {field_name}: {value!r}",
            field_name=field_name, raw_value=value
        ) from None


class PlanNormalizer:
    """
    Plan data normalization pipeline.

    Turns raw plan entries such as ``{"type": "marketing_campaign", "budget": 1000}``
    into strategy variants carrying the configured coefficients.
    """

    def __init__(
        self,
        marketing_params: Optional[MarketingParams] = None,
        training_params: Optional[TrainingParams] = None
    ):
        """
        Initialize plan normalizer with strategy coefficients.

        Args:
            marketing_params: Coefficients for marketing campaigns
            training_params: Coefficients for training programs
        """
        self.marketing_params = marketing_params or MarketingParams()
        self.training_params = training_params or TrainingParams()
        self.logger = logger

    def normalize_plan(self, plan_data: Union[str, list, tuple, None]) -> PlanNormalizationResult:
        """
        Normalize an improvement plan from raw format to strategy variants.

        Args:
            plan_data: List of raw entries or strategy instances, or a JSON
                string encoding such a list. ``None`` means an empty plan.

        Returns:
            PlanNormalizationResult with strategies or error information
        """
        if plan_data is None:
            return PlanNormalizationResult.ok(())

        if isinstance(plan_data, str):
            try:
                plan_data = json.loads(plan_data)
            except (json.JSONDecodeError, TypeError) as e:
                return PlanNormalizationResult.failed(MalformedFieldError(
                    f"Failed to parse plan JSON: {e}",
                    field_name='plan', raw_value=plan_data
                ))

        if not isinstance(plan_data, (list, tuple)):
            return PlanNormalizationResult.failed(MalformedFieldError(
                "plan must be a list",
                field_name='plan', raw_value=plan_data
            ))

        strategies = []
        for index, entry in enumerate(plan_data):
            try:
                strategies.append(self.normalize_entry(entry, index))
            except ScenarioError as e:
                self.logger.debug("Plan entry rejected: index=%d error=%s", index, e)
                return PlanNormalizationResult.failed(e)

        return PlanNormalizationResult.ok(tuple(strategies))

    def normalize_entry(self, entry: Any, index: int = 0) -> Strategy:
        """
        Normalize a single plan entry.

        Raises:
            MalformedFieldError: Entry is not a mapping or a parameter is not an integer
            MissingFieldError: Entry lacks ``type`` or its parameter
            UnknownStrategyError: ``type`` names no known strategy
        """
        if isinstance(entry, (MarketingCampaign, TrainingProgram)):
            return entry

        if not isinstance(entry, dict):
            raise MalformedFieldError(
                f"plan[{index}] must be a dict",
                field_name=f"plan[{index}]", raw_value=entry
            )

        strategy_type = entry.get('type')
        if strategy_type is None:
            raise MissingFieldError(
                f"Missing type for plan[{index}]",
                field_name='type', context={'index': index}
            )

        tag = str(strategy_type).strip().lower()
        if tag not in STRATEGY_TYPES:
            raise UnknownStrategyError(
                f"Unknown strategy type: {strategy_type}",
                strategy_type=str(strategy_type), context={'index': index}
            )

        variant, param_name = STRATEGY_TYPES[tag]
        if entry.get(param_name) is None:
            raise MissingFieldError(
                f"Missing {param_name} for {tag} at plan[{index}]",
                field_name=param_name, context={'index': index}
            )

        value = _coerce_int(entry[param_name], param_name)

        if variant is MarketingCampaign:
            return MarketingCampaign(budget=value, params=self.marketing_params)
        return TrainingProgram(sessions=value, params=self.training_params)

    def normalize_metrics(self, metrics_data: Any) -> dict[str, float]:
        """
        Normalize initial company metrics.

        Accepts ``satisfaction`` and ``quality`` as aliases. Values are
        converted to float; negative values are kept as given.

        Raises:
            MalformedFieldError: Data is not a mapping, a value is not numeric,
                or a field is given under both its name and its alias
            MissingFieldError: One of the four metrics is absent
        """
        if not isinstance(metrics_data, dict):
            raise MalformedFieldError(
                "initial_metrics must be a dict",
                field_name='initial_metrics', raw_value=metrics_data
            )

        standardized = {}
        for key, value in metrics_data.items():
            canonical = METRIC_ALIASES.get(key, key)
            if canonical in standardized:
                raise MalformedFieldError(
                    f"{canonical} given more than once (alias {key!r} conflicts)",
                    field_name=canonical, raw_value=value
                )
            standardized[canonical] = value

        normalized = {}
        for field_name in METRIC_FIELDS:
            if standardized.get(field_name) is None:
                raise MissingFieldError(
                    f"Missing required field: {field_name}",
                    field_name=field_name
                )
            normalized[field_name] = _coerce_float(standardized[field_name], field_name)

        return normalized
