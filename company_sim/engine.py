"""
Improvement plan executor.

Owns a company's metrics record and its ordered improvement plan, and applies
every strategy of the plan in sequence on each execution pass.
"""

from collections.abc import Iterable
from typing import Any, Optional

import structlog

from .config.defaults import MarketingParams, TrainingParams
from .data.plan_normalizer import PlanNormalizer
from .errors import MissingFieldError
from .logging.config import get_plan_logger, log_strategy_application
from .models.metrics import CompanyMetrics
from .strategies import Strategy

logger = structlog.get_logger(__name__)
plan_logger = get_plan_logger(__name__)


class Company:
    """
    A company whose metrics are mutated by an improvement plan.

    The plan is copied into an immutable tuple at construction. Instances are
    not copyable: ``copy.copy`` and ``copy.deepcopy`` raise ``TypeError``.
    """

    def __init__(
        self,
        revenue: float,
        expenses: float,
        employee_satisfaction: float,
        product_quality: float,
        plan: Iterable[Strategy] = ()
    ) -> None:
        """Initialize the company with its starting metrics and plan."""
        self.logger = logger
        self.plan_logger = plan_logger

        self._metrics = CompanyMetrics(
            revenue=revenue,
            expenses=expenses,
            employee_satisfaction=employee_satisfaction,
            product_quality=product_quality,
        )
        self._plan: tuple = tuple(plan)
        self._execution_count = 0

        self.logger.debug(
            "Company initialized",
            plan_size=len(self._plan),
            **self._metrics.snapshot()
        )

    @classmethod
    def from_scenario(
        cls,
        scenario: dict[str, Any],
        marketing_params: Optional[MarketingParams] = None,
        training_params: Optional[TrainingParams] = None
    ) -> "Company":
        """
        Build a company from a raw scenario mapping.

        Args:
            scenario: Mapping with ``initial_metrics`` and an optional ``plan``
            marketing_params: Coefficients for marketing campaigns in the plan
            training_params: Coefficients for training programs in the plan

        Raises:
            ScenarioError: The scenario definition is incomplete or malformed
        """
        normalizer = PlanNormalizer(marketing_params, training_params)

        if 'initial_metrics' not in scenario:
            raise MissingFieldError(
                "Missing required field: initial_metrics",
                field_name='initial_metrics',
                context={'scenario': scenario.get('name')}
            )
        metrics = normalizer.normalize_metrics(scenario['initial_metrics'])

        result = normalizer.normalize_plan(scenario.get('plan'))
        if not result.success:
            raise result.error

        return cls(plan=result.strategies, **metrics)

    # Metrics accessors

    @property
    def revenue(self) -> float:
        return self._metrics.revenue

    @revenue.setter
    def revenue(self, value: float) -> None:
        self._metrics.revenue = value

    @property
    def expenses(self) -> float:
        return self._metrics.expenses

    @expenses.setter
    def expenses(self, value: float) -> None:
        self._metrics.expenses = value

    @property
    def employee_satisfaction(self) -> float:
        return self._metrics.employee_satisfaction

    @employee_satisfaction.setter
    def employee_satisfaction(self, value: float) -> None:
        self._metrics.employee_satisfaction = value

    @property
    def product_quality(self) -> float:
        return self._metrics.product_quality

    @product_quality.setter
    def product_quality(self, value: float) -> None:
        self._metrics.product_quality = value

    @property
    def plan(self) -> tuple:
        """Strategies in application order."""
        return self._plan

    @property
    def execution_count(self) -> int:
        """Number of completed execution passes."""
        return self._execution_count

    def snapshot(self) -> dict[str, float]:
        """Current metrics as a plain dict."""
        return self._metrics.snapshot()

    def execute(self) -> None:
        """
        Apply every strategy of the plan, in order, to the metrics.

        Each call is a full pass; repeated calls compound since caps are
        evaluated per application against current values.
        """
        for index, strategy in enumerate(self._plan):
            before = self._metrics.snapshot()
            strategy.apply(self._metrics)
            log_strategy_application(
                self.plan_logger,
                strategy,
                index,
                before,
                self._metrics.snapshot()
            )

        self._execution_count += 1

        self.logger.info(
            "Improvement plan executed",
            strategies_applied=len(self._plan),
            execution_count=self._execution_count,
            **self._metrics.snapshot()
        )

    def __copy__(self) -> "Company":
        raise TypeError("Company owns its metrics and plan and cannot be copied")

    def __deepcopy__(self, memo: dict) -> "Company":
        raise TypeError("Company owns its metrics and plan and cannot be copied")

    def __repr__(self) -> str:
        return (
            f"Company(revenue={self.revenue!r}, expenses={self.expenses!r}, "
            f"employee_satisfaction={self.employee_satisfaction!r}, "
            f"product_quality={self.product_quality!r}, plan_size={len(self._plan)})"
        )
