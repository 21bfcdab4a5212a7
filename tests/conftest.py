"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Dict, Any

import yaml


@pytest.fixture
def baseline_metrics() -> Dict[str, float]:
    """Starting metrics used by most company scenarios."""
    return {
        "revenue": 50000,
        "expenses": 20000,
        "employee_satisfaction": 70,
        "product_quality": 80,
    }


@pytest.fixture
def sample_scenario(baseline_metrics) -> Dict[str, Any]:
    """Raw scenario mapping as read from YAML."""
    return {
        "name": "sample",
        "initial_metrics": dict(baseline_metrics),
        "plan": [
            {"type": "marketing_campaign", "budget": 100000},
            {"type": "training_program", "sessions": 20},
        ],
    }


@pytest.fixture
def config_dir(tmp_path: Path, sample_scenario) -> Path:
    """Temporary config directory with one scenario and no global overrides."""
    scenarios = tmp_path / "scenarios"
    scenarios.mkdir()
    with open(scenarios / "sample.yaml", "w") as f:
        yaml.safe_dump(sample_scenario, f, sort_keys=False)
    return tmp_path


@pytest.fixture
def write_yaml():
    """Helper writing data to a YAML file and returning its path."""
    def _write(path: Path, data: Any) -> Path:
        with open(path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path
    return _write
