"""Scenario loader with 3-tier strategy parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..engine import Company
from ..errors import MalformedFieldError, ScenarioNotFoundError
from .defaults import DefaultConfig, MarketingParams, TrainingParams, get_default_config
from .validation import ConfigValidator


@dataclass(frozen=True)
class ScenarioLoader:
    """Loads YAML scenarios into companies with 3-tier parameter precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ScenarioLoader":
        """Create a ScenarioLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def scenarios_dir(self) -> Path:
        return self.config_dir / "scenarios"

    def load_strategy_params(self) -> dict[str, Any]:
        """Load global strategy parameter overrides."""
        params_file = self.config_dir / "strategy_params.yaml"

        if not params_file.exists():
            return {}

        with open(params_file) as f:
            params_config = yaml.safe_load(f) or {}

        if not isinstance(params_config, dict):
            raise MalformedFieldError(
                f"Strategy parameter file must contain a mapping: {params_file}",
                field_name="strategy_params", raw_value=params_config
            )

        # An empty strategy_params key means no overrides
        overrides = params_config.get("strategy_params") or {}
        if not isinstance(overrides, dict):
            raise MalformedFieldError(
                f"strategy_params must be a mapping: {params_file}",
                field_name="strategy_params", raw_value=overrides
            )

        return overrides

    def merge_config(self, scenario_overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-scenario overrides (highest priority)
        2. Global strategy_params.yaml overrides
        3. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_strategy_params())

        if scenario_overrides:
            config = self._deep_merge(config, scenario_overrides)

        return config

    def resolve_path(self, scenario: Union[str, Path]) -> Path:
        """Resolve a scenario name or path to an existing YAML file."""
        path = Path(scenario)
        candidates = [path]
        if not path.suffix:
            candidates.append(self.scenarios_dir / f"{path.name}.yaml")

        for candidate in candidates:
            if candidate.is_file():
                return candidate

        raise ScenarioNotFoundError(
            f"Scenario not found: {scenario}",
            path=str(scenario)
        )

    def read_scenario(self, scenario: Union[str, Path]) -> dict[str, Any]:
        """Read the raw scenario mapping from YAML."""
        path = self.resolve_path(scenario)

        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise MalformedFieldError(
                f"Scenario file must contain a mapping: {path}",
                field_name="scenario", raw_value=data
            )

        data.setdefault("name", path.stem)
        return data

    def scenario_config(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Merge and validate the configuration a scenario runs with.

        Raises:
            MalformedFieldError: The scenario overrides are not a mapping or
                the merged configuration fails validation
        """
        overrides = data.get("strategy_params")
        if overrides is not None and not isinstance(overrides, dict):
            raise MalformedFieldError(
                "strategy_params must be a mapping",
                field_name="strategy_params", raw_value=overrides,
                context={"scenario": data.get("name")}
            )
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            first = errors[0]
            raise MalformedFieldError(
                f"Invalid parameter {first.field}: {first.message}",
                field_name=first.field,
                raw_value=first.value,
                context={"scenario": data.get("name"), "errors": errors}
            )

        return config

    def logging_config(self, scenario: Optional[Union[str, Path]] = None) -> dict[str, Any]:
        """
        Merged ``logging`` section, including a scenario's own overrides when given.
        """
        data = self.read_scenario(scenario) if scenario is not None else {}
        return self.scenario_config(data)["logging"]  # type: ignore[no-any-return]

    def load_scenario(self, scenario: Union[str, Path]) -> Company:
        """
        Load a scenario into a ready-to-execute company.

        Args:
            scenario: Scenario name under ``config_dir/scenarios`` or a file path

        Raises:
            ScenarioError: The file is missing, or its definition or
                parameter overrides are malformed
        """
        data = self.read_scenario(scenario)
        config = self.scenario_config(data)

        return Company.from_scenario(
            data,
            marketing_params=self._build_params(MarketingParams, config["marketing"]),
            training_params=self._build_params(TrainingParams, config["training"]),
        )

    def list_scenarios(self) -> list[str]:
        """Names of the scenarios shipped under ``config_dir/scenarios``."""
        if not self.scenarios_dir.is_dir():
            return []
        return sorted(p.stem for p in self.scenarios_dir.glob("*.yaml"))

    def _build_params(self, params_cls: type, values: dict[str, Any]) -> Any:
        """Build a params dataclass from merged values, ignoring unknown keys."""
        known = {f.name for f in fields(params_cls)}
        return params_cls(**{k: v for k, v in values.items() if k in known})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
