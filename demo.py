#!/usr/bin/env python3
"""
Demo script walking through the wizard flow without the UI.

Checks prerequisites, then derives and validates configs for a few
representative workloads, including a hand-edited config that breaks
several rules.
"""

import dataclasses

from cluster_wizard import (
    ClusterRecommender,
    PrerequisitesManager,
    WorkloadProfile,
    validate_cluster_config,
)

DEMO_PROFILES = [
    WorkloadProfile("training", "medium", "A100", 2, "balanced"),
    WorkloadProfile("inference", "small", "T4", 1, "cost"),
    WorkloadProfile("fine-tuning", "large", "H100", 16, "performance"),
    WorkloadProfile("inference", "medium", "A3-Ultra", 4, "balanced"),
]


def print_findings(validation):
    print(f"  Valid: {validation.is_valid}")
    for error in validation.errors:
        print(f"    ❌ {error}")
    for warning in validation.warnings:
        print(f"    ⚠️  {warning}")
    for recommendation in validation.recommendations:
        print(f"    💡 {recommendation}")


def main():
    print("=" * 70)
    print("Prerequisites")
    print("=" * 70)
    check = PrerequisitesManager().check_prerequisites()
    for name, value in check.to_dict().items():
        print(f"  {name}: {value}")
    print(f"  Ready: {check.is_ready}")

    recommender = ClusterRecommender()

    for profile in DEMO_PROFILES:
        result = recommender.recommend(profile)
        config = result.config
        print()
        print("=" * 70)
        print(f"{profile.type} / {profile.model_size} / {profile.gpu_type} / "
              f"{profile.node_count} node(s) / {profile.priority}")
        print("=" * 70)
        print(f"  Source:       {'pre-configured' if result.preset else 'derived'}")
        print(f"  Location:     {config.zone}")
        print(f"  Machine type: {config.machine_type}")
        print(f"  GPUs/node:    {config.gpu_count}")
        print(f"  Cost:         ${config.cost_estimate.hourly_cost:.2f}/hr, "
              f"${config.cost_estimate.monthly_cost:,.2f}/month")
        print_findings(result.validation)

    print()
    print("=" * 70)
    print("Hand-edited config")
    print("=" * 70)
    base = recommender.get_optimal_config(DEMO_PROFILES[1])
    edited = dataclasses.replace(
        base,
        zone="us-west1-a",
        gpu_count=10,
        networking=dataclasses.replace(base.networking, enable_rdma=True),
    )
    print_findings(validate_cluster_config(edited))


if __name__ == "__main__":
    main()
