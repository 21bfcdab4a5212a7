#!/usr/bin/env python3
"""Smoke test for company_sim.

Executes known improvement plans, in code and from the shipped scenarios,
and compares the resulting metrics with their documented values. Exits with
status code 0 when every check matches, otherwise prints the mismatches and
exits with 1.

Usage:
    python scripts/smoke_test.py
"""
import math
import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from company_sim.config.loader import ScenarioLoader
from company_sim.engine import Company
from company_sim.errors import ScenarioError
from company_sim.logging.config import configure_logging_from_config
from company_sim.strategies import MarketingCampaign, TrainingProgram

loader = ScenarioLoader.create()

# (label, company factory, execution passes, expected metrics)
CHECKS: List[Tuple[str, Callable[[], Company], int, Dict[str, float]]] = [
    (
        "Capped plan",
        lambda: Company(50000, 20000, 70, 80, [MarketingCampaign(100000), TrainingProgram(20)]),
        1,
        {"revenue": 100000, "expenses": 120000, "employee_satisfaction": 80, "product_quality": 90},
    ),
    (
        "Small budget campaign",
        lambda: Company(50000, 20000, 70, 80, [MarketingCampaign(1), TrainingProgram(5)]),
        1,
        {"revenue": 52500, "expenses": 20001, "employee_satisfaction": 75, "product_quality": 85},
    ),
    (
        "Two passes compound",
        lambda: Company(50000, 20000, 70, 80, [MarketingCampaign(500), TrainingProgram(3)]),
        2,
        {"revenue": 200000, "expenses": 21000, "employee_satisfaction": 76, "product_quality": 86},
    ),
    (
        "Scenario: max_effect_cap",
        lambda: loader.load_scenario("max_effect_cap"),
        1,
        {"revenue": 100000, "expenses": 120000, "employee_satisfaction": 80, "product_quality": 90},
    ),
    (
        "Scenario: strategy_effect",
        lambda: loader.load_scenario("strategy_effect"),
        1,
        {"revenue": 100000, "expenses": 21000, "employee_satisfaction": 75, "product_quality": 85},
    ),
    (
        "Scenario: negative_values",
        lambda: loader.load_scenario("negative_values"),
        1,
        {"revenue": -100000, "expenses": -19900, "employee_satisfaction": -8, "product_quality": -3},
    ),
    (
        "Scenario: no_strategies",
        lambda: loader.load_scenario("no_strategies"),
        3,
        {"revenue": 10000, "expenses": 5000, "employee_satisfaction": 60, "product_quality": 70},
    ),
    (
        "Scenario: half_strength_marketing",
        lambda: loader.load_scenario("half_strength_marketing"),
        1,
        {"revenue": 75000, "expenses": 22000, "employee_satisfaction": 71, "product_quality": 81},
    ),
]


def run_check(label: str, factory: Callable[[], Company], passes: int,
              expected: Dict[str, float]) -> List[str]:
    """Run one plan and return the mismatching metrics, if any."""
    try:
        company = factory()
    except ScenarioError as e:
        return [f"{type(e).__name__}: {e}"]

    for _ in range(passes):
        company.execute()

    actual = company.snapshot()
    return [
        f"{name}: expected {value}, got {actual[name]}"
        for name, value in expected.items()
        if not math.isclose(actual[name], value, rel_tol=1e-9, abs_tol=1e-9)
    ]


def main() -> None:
    configure_logging_from_config(loader.logging_config())

    print("🧪 company_sim smoke-test suite")
    print("=" * 60)

    failures = 0
    for label, factory, passes, expected in CHECKS:
        problems = run_check(label, factory, passes, expected)
        if problems:
            failures += 1
            print(f"❌ {label}")
            for problem in problems:
                print(f"  • {problem}")
        else:
            print(f"✅ {label}")

    print("\n" + "=" * 60)
    print(f"Total checks: {len(CHECKS)}")
    print(f"Failed      : {failures}")

    if failures:
        print("⚠️  Smoke-tests failed.  See output above.")
        sys.exit(1)
    print("🎉 All smoke-tests passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
