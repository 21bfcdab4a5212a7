#!/usr/bin/env python3
"""Scenario validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from company_sim.config.loader import ScenarioLoader
from company_sim.config.validation import ConfigValidator
from company_sim.errors import ScenarioError
from company_sim.logging.config import configure_logging_from_config


def main():
    """Main validation function."""
    print("🔍 Validating company_sim scenarios...")

    loader = ScenarioLoader.create()

    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} errors in global strategy parameters:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    configure_logging_from_config(config["logging"])

    scenarios = loader.list_scenarios()
    if not scenarios:
        print(f"⚠️  No scenarios found in {loader.scenarios_dir}")
        sys.exit(1)

    all_valid = True

    for name in scenarios:
        print(f"\n📊 Validating {name}...")

        try:
            company = loader.load_scenario(name)
        except ScenarioError as e:
            print(f"❌ {type(e).__name__}: {e}")
            all_valid = False
            continue

        print(f"✅ {name} is valid ({len(company.plan)} strategies)")
        for strategy in company.plan:
            print(f"  • {strategy.description()}")

    if all_valid:
        print(f"\n🎉 All {len(scenarios)} scenarios are valid!")
        sys.exit(0)
    else:
        print(f"\n❌ Scenario validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
