"""Training program strategy"""

from dataclasses import dataclass, field

from ..config.defaults import TrainingParams
from ..models.metrics import CompanyMetrics


def calculate_improvement(sessions: int, params: TrainingParams) -> float:
    """Capped linear improvement factor for a number of training sessions"""
    return min(sessions * params.improvement_per_session, params.max_improvement)


@dataclass(frozen=True)
class TrainingProgram:
    """Raises employee satisfaction and product quality by the same capped amount."""
    sessions: int
    params: TrainingParams = field(default_factory=TrainingParams, repr=False)

    def apply(self, metrics: CompanyMetrics) -> None:
        """Apply the program to the metrics in place"""
        improvement = calculate_improvement(self.sessions, self.params)
        points = improvement * self.params.points_per_unit
        metrics.employee_satisfaction = metrics.employee_satisfaction + points
        metrics.product_quality = metrics.product_quality + points

    def description(self) -> str:
        return f"Training Program with {self.sessions} sessions"
