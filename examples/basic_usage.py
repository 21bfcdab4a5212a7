#!/usr/bin/env python3
"""
Basic Usage Example - Company Improvement Plan Simulation

This script demonstrates the basic usage of the company simulation. It shows how to:
- Build a company with an improvement plan in code
- Execute the plan and inspect the metrics
- Load the same kind of company from a YAML scenario

Run: python examples/basic_usage.py
"""

from company_sim.config.loader import ScenarioLoader
from company_sim.engine import Company
from company_sim.logging.config import configure_logging_from_config
from company_sim.strategies import MarketingCampaign, TrainingProgram


def print_metrics(label: str, company: Company) -> None:
    """Print the four company metrics on one line."""
    print(
        f"  {label:<8} revenue={company.revenue:>10.2f}  expenses={company.expenses:>10.2f}  "
        f"satisfaction={company.employee_satisfaction:>6.2f}  quality={company.product_quality:>6.2f}"
    )


def run_company(title: str, company: Company, passes: int = 1) -> None:
    """Execute a company's plan and show before/after metrics."""
    print(f"\n📈 {title}")
    for strategy in company.plan:
        print(f"  • {strategy.description()}")

    print_metrics("before", company)
    for _ in range(passes):
        company.execute()
    print_metrics("after", company)


def main() -> None:
    loader = ScenarioLoader.create()
    configure_logging_from_config(loader.logging_config())

    print("🏢 Company improvement plan simulation")
    print("=" * 60)

    run_company(
        "Capped plan",
        Company(50000, 20000, 70, 80, [MarketingCampaign(100000), TrainingProgram(20)])
    )

    run_company(
        "Small budget campaign",
        Company(50000, 20000, 70, 80, [MarketingCampaign(1), TrainingProgram(5)])
    )

    run_company(
        "Two passes compound",
        Company(50000, 20000, 70, 80, [MarketingCampaign(500), TrainingProgram(3)]),
        passes=2
    )

    for name in loader.list_scenarios():
        configure_logging_from_config(loader.logging_config(name))
        run_company(f"Scenario: {name}", loader.load_scenario(name))


if __name__ == "__main__":
    main()
