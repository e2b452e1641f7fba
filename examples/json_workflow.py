#!/usr/bin/env python3
"""Example: Recommend configs for profiles stored in JSON and save the results."""

import json
from pathlib import Path

from cluster_wizard import ClusterRecommender
from cluster_wizard.cli import load_profiles_from_json


def main():
    """Load profiles, recommend a config for each and write them to JSON."""
    examples_dir = Path(__file__).parent
    profiles = load_profiles_from_json(examples_dir / "profiles.json")

    recommender = ClusterRecommender()
    results = [recommender.recommend(profile) for profile in profiles]

    for result in results:
        config = result.config
        source = "preset" if result.preset else "derived"
        print(
            f"{result.profile.type:<12} {result.profile.gpu_type:<9} -> "
            f"{config.machine_type:<15} ({source}) valid={result.validation.is_valid}"
        )

    output_file = Path("cluster_configs.json")
    with open(output_file, "w") as f:
        json.dump({"results": [result.to_dict() for result in results]}, f, indent=2)
    print(f"\nResults written to {output_file}")


if __name__ == "__main__":
    main()
