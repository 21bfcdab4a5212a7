"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import MarketingParams, TrainingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates strategy coefficient overrides.

    Only types are checked. Coefficients are not range-limited, matching the
    strategies themselves which accept any budget or session count.
    """

    @staticmethod
    def _validate_numeric_section(
        section: str,
        params: Any,
        known_fields: set[str]
    ) -> list[ValidationError]:
        if not isinstance(params, dict):
            return [ValidationError(
                field=section,
                message="Must be a mapping",
                value=params
            )]

        errors = []
        for key, value in params.items():
            if key not in known_fields:
                errors.append(ValidationError(
                    field=f"{section}.{key}",
                    message="Unknown parameter",
                    value=value
                ))
            elif not _is_number(value):
                errors.append(ValidationError(
                    field=f"{section}.{key}",
                    message="Must be a number",
                    value=value
                ))
        return errors

    @staticmethod
    def validate_marketing_params(params: Any) -> list[ValidationError]:
        """Validate marketing campaign parameters."""
        return ConfigValidator._validate_numeric_section(
            "marketing", params, {f.name for f in fields(MarketingParams)}
        )

    @staticmethod
    def validate_training_params(params: Any) -> list[ValidationError]:
        """Validate training program parameters."""
        return ConfigValidator._validate_numeric_section(
            "training", params, {f.name for f in fields(TrainingParams)}
        )

    @staticmethod
    def validate_logging_params(params: Any) -> list[ValidationError]:
        """Validate logging parameters."""
        if not isinstance(params, dict):
            return [ValidationError(field="logging", message="Must be a mapping", value=params)]

        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "marketing" in config:
            errors.extend(ConfigValidator.validate_marketing_params(config["marketing"]))

        if "training" in config:
            errors.extend(ConfigValidator.validate_training_params(config["training"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
