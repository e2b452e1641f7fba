#!/usr/bin/env python3
"""Example: Basic cluster config recommendation using the Python API."""

from cluster_wizard import ClusterRecommender, WorkloadProfile, validate_cluster_config


def main():
    """Run basic cluster recommendation example."""

    # Describe the workload the way the wizard collects it
    profile = WorkloadProfile(
        type="inference",
        model_size="small",
        gpu_type="T4",
        node_count=1,
        priority="cost",
    )

    recommender = ClusterRecommender()
    config = recommender.get_optimal_config(profile)

    print("=" * 60)
    print("Recommended Cluster Config")
    print("=" * 60)
    print(f"Region:        {config.region} ({config.zone})")
    print(f"Machine type:  {config.machine_type}")
    print(f"Nodes:         {config.node_count}")
    print(f"GPUs per node: {config.gpu_count}")
    print(f"RDMA:          {config.networking.enable_rdma}")
    print(f"Filestore:     {config.storage.enable_filestore}")
    print(f"Hourly cost:   ${config.cost_estimate.hourly_cost:.2f}")
    print(f"Monthly cost:  ${config.cost_estimate.monthly_cost:,.2f}")

    result = validate_cluster_config(config)
    print()
    print(f"Valid: {result.is_valid}")
    for error in result.errors:
        print(f"  ERROR: {error}")
    for warning in result.warnings:
        print(f"  WARNING: {warning}")
    for recommendation in result.recommendations:
        print(f"  TIP: {recommendation}")

    print()
    print("Other machine types for this GPU:")
    for machine_type in recommender.get_recommended_machine_types(profile):
        print(f"  - {machine_type}")


if __name__ == "__main__":
    main()
