"""Unit tests for the config validator."""

import dataclasses

import pytest

from cluster_wizard.models import ClusterConfig, CostEstimate, NetworkConfig, StorageConfig
from cluster_wizard.validator import ConfigValidator, validate_cluster_config


def make_config(**overrides):
    """Build a valid baseline config with selected fields replaced."""
    config = ClusterConfig(
        region="us-central1",
        zone="us-central1-a",
        machine_type="n1-standard-4",
        gpu_count=1,
        node_count=1,
        networking=NetworkConfig(
            enable_rdma=False,
            enable_vpc=True,
            enable_private_nodes=False,
            enable_master_auth=True,
        ),
        storage=StorageConfig(
            enable_persistent_disks=True,
            enable_filestore=False,
            enable_cloud_storage=True,
        ),
        cost_estimate=CostEstimate(monthly_cost=388.8, hourly_cost=0.54),
    )
    return dataclasses.replace(config, **overrides)


@pytest.fixture
def validator():
    return ConfigValidator()


def test_baseline_config_is_clean(validator):
    """Test that the baseline config passes with no findings."""
    result = validator.validate_cluster_config(make_config())

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert result.recommendations == []


def test_too_many_gpus(validator):
    """Test the per-node GPU limit."""
    result = validator.validate_cluster_config(make_config(gpu_count=10))

    assert "Maximum 8 GPUs per node supported" in result.errors
    assert result.is_valid is False


def test_eight_gpus_allowed(validator):
    result = validator.validate_cluster_config(make_config(gpu_count=8, node_count=8))

    assert result.is_valid


def test_no_gpus(validator):
    result = validator.validate_cluster_config(make_config(gpu_count=0))

    assert result.errors == ["At least 1 GPU is required for AI workloads"]


def test_no_nodes(validator):
    result = validator.validate_cluster_config(make_config(node_count=0))

    assert result.errors == ["At least 1 node is required"]


def test_large_node_count(validator):
    """Test warnings and recommendations above 100 nodes."""
    result = validator.validate_cluster_config(make_config(node_count=101))

    assert result.is_valid
    assert result.warnings == ["Large node counts may impact cluster management"]
    assert result.recommendations == [
        "Consider using node pools for better resource management",
        "Consider using spot instances for cost optimization",
    ]


def test_spot_instance_recommendation_threshold(validator):
    assert validator.validate_cluster_config(make_config(node_count=10)).recommendations == []
    assert validator.validate_cluster_config(make_config(node_count=11)).recommendations == [
        "Consider using spot instances for cost optimization"
    ]


def test_rdma_on_unsupported_machine_type(validator):
    """Test that RDMA requires an RDMA-capable machine type."""
    networking = dataclasses.replace(make_config().networking, enable_rdma=True)
    result = validator.validate_cluster_config(make_config(networking=networking))

    assert "RDMA not supported on selected machine type" in result.errors
    assert result.is_valid is False
    # The reminder is still given
    assert (
        "RDMA enabled - ensure proper network configuration for optimal performance"
        in result.recommendations
    )


def test_rdma_on_supported_machine_type(validator):
    networking = dataclasses.replace(make_config().networking, enable_rdma=True)
    result = validator.validate_cluster_config(
        make_config(machine_type="h3-highgpu-8g", networking=networking)
    )

    assert result.is_valid
    assert result.recommendations == [
        "RDMA enabled - ensure proper network configuration for optimal performance"
    ]


def test_invalid_region(validator):
    result = validator.validate_cluster_config(make_config(region="mars-west1", zone="mars-west1-a"))

    assert result.errors == ["Invalid region: mars-west1"]


def test_zone_not_in_region(validator):
    """Test a zone whose prefix does not match the region."""
    result = validator.validate_cluster_config(make_config(zone="us-west1-a"))

    assert result.errors == ["Invalid zone: us-west1-a for region: us-central1"]


def test_zone_with_unknown_suffix(validator):
    result = validator.validate_cluster_config(make_config(zone="us-central1-f"))

    assert result.errors == ["Invalid zone: us-central1-f for region: us-central1"]


@pytest.mark.parametrize("zone", ["us-central1-a", "us-central1-b", "us-central1-c"])
def test_valid_zones(validator, zone):
    assert validator.validate_cluster_config(make_config(zone=zone)).is_valid


def test_high_monthly_cost(validator):
    cost = CostEstimate(monthly_cost=5000.01, hourly_cost=6.95)
    result = validator.validate_cluster_config(make_config(cost_estimate=cost))

    assert result.is_valid
    assert result.warnings == ["High monthly cost detected"]
    assert result.recommendations == [
        "Review resource allocation and consider cost optimization strategies"
    ]


def test_cost_at_threshold_is_not_flagged(validator):
    cost = CostEstimate(monthly_cost=5000, hourly_cost=6.94)

    assert validator.validate_cluster_config(make_config(cost_estimate=cost)).warnings == []


def test_filestore_recommendation(validator):
    storage = dataclasses.replace(make_config().storage, enable_filestore=True)
    result = validator.validate_cluster_config(make_config(storage=storage))

    assert result.recommendations == [
        "Filestore enabled - consider performance tier based on workload requirements"
    ]


def test_all_rules_evaluated(validator):
    """Test that every failing rule is reported in a single pass."""
    networking = dataclasses.replace(make_config().networking, enable_rdma=True)
    storage = dataclasses.replace(make_config().storage, enable_filestore=True)
    config = make_config(
        region="nowhere",
        zone="elsewhere-z",
        gpu_count=12,
        node_count=150,
        networking=networking,
        storage=storage,
        cost_estimate=CostEstimate(monthly_cost=90000, hourly_cost=125),
    )
    result = validator.validate_cluster_config(config)

    assert result.errors == [
        "Maximum 8 GPUs per node supported",
        "RDMA not supported on selected machine type",
        "Invalid region: nowhere",
        "Invalid zone: elsewhere-z for region: nowhere",
    ]
    assert result.warnings == [
        "Large node counts may impact cluster management",
        "High monthly cost detected",
    ]
    assert len(result.recommendations) == 5


def test_validation_is_pure(validator):
    """Test that validation does not modify the config and is repeatable."""
    config = make_config(gpu_count=10, zone="us-west1-a")
    snapshot = config.to_dict()

    first = validator.validate_cluster_config(config)
    second = validator.validate_cluster_config(config)

    assert config.to_dict() == snapshot
    assert first == second
    assert first is not second
    assert first.is_valid == (len(first.errors) == 0)


def test_module_level_helper():
    result = validate_cluster_config(make_config(gpu_count=9))

    assert result.errors == ["Maximum 8 GPUs per node supported"]
