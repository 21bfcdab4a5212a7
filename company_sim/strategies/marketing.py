"""Marketing campaign strategy"""

from dataclasses import dataclass, field

from ..config.defaults import MarketingParams
from ..models.metrics import CompanyMetrics


def calculate_revenue_boost(budget: int, params: MarketingParams) -> float:
    """
    Calculate the multiplicative revenue boost for a campaign budget.

    The boost grows linearly with the raw budget and is capped at
    ``params.max_boost``. Zero and negative budgets are not rejected.

    Args:
        budget: Campaign budget
        params: Marketing coefficients

    Returns:
        Boost fraction applied as ``revenue * (1 + boost)``
    """
    return min(budget * params.boost_per_unit, params.max_boost)


@dataclass(frozen=True)
class MarketingCampaign:
    """Boosts revenue by a capped fraction and adds the full budget to expenses."""
    budget: int
    params: MarketingParams = field(default_factory=MarketingParams, repr=False)

    def apply(self, metrics: CompanyMetrics) -> None:
        """Apply the campaign to the metrics in place"""
        boost = calculate_revenue_boost(self.budget, self.params)
        metrics.revenue = metrics.revenue * (1 + boost)
        # Expense is the nominal budget, regardless of the boost cap
        metrics.expenses = metrics.expenses + self.budget

    def description(self) -> str:
        return f"Marketing Campaign with budget {self.budget}"
