"""Default configuration parameters for the improvement plan simulation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarketingParams:
    """Marketing campaign revenue boost parameters."""
    boost_per_unit: float = 0.05                     # Revenue boost per budget unit
    max_boost: float = 1.0                           # Cap on boost per application (+100%)


@dataclass(frozen=True)
class TrainingParams:
    """Training program improvement parameters."""
    improvement_per_session: float = 0.1             # Improvement factor per session
    max_improvement: float = 1.0                     # Cap on improvement per application
    points_per_unit: float = 10.0                    # Satisfaction/quality points per unit


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    marketing: MarketingParams
    training: TrainingParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        marketing=MarketingParams(),
        training=TrainingParams(),
        logging=LoggingParams(),
    )
