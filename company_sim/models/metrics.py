"""Data model for company metrics"""

from dataclasses import dataclass


@dataclass
class CompanyMetrics:
    """Financial and organizational metrics of a single company.

    No range invariant is enforced: any field may be zero or negative.
    """
    revenue: float
    expenses: float
    employee_satisfaction: float
    product_quality: float

    def snapshot(self) -> dict[str, float]:
        """Return a plain dict copy of the current values"""
        return {
            "revenue": self.revenue,
            "expenses": self.expenses,
            "employee_satisfaction": self.employee_satisfaction,
            "product_quality": self.product_quality,
        }
