"""Validation of cluster configs against static business rules."""

import logging

from .catalog import (
    MAX_GPUS_PER_NODE,
    MAX_NODE_COUNT,
    MIN_NODE_COUNT,
    is_valid_region,
    is_valid_zone,
    supports_rdma,
)
from .models import ClusterConfig, ValidationResult

logger = logging.getLogger(__name__)

# Node count above which spot instances are suggested
SPOT_INSTANCE_NODE_THRESHOLD = 10

# Monthly cost above which a high-cost warning is raised
HIGH_MONTHLY_COST_THRESHOLD = 5000


class ConfigValidator:
    """Checks a ClusterConfig and reports errors, warnings and recommendations.

    Every rule is evaluated on every call; the validator never raises and
    never modifies the config it is given.
    """

    def validate_cluster_config(self, config: ClusterConfig) -> ValidationResult:
        """Validate a cluster config.

        Args:
            config: Cluster config to check

        Returns:
            ValidationResult; ``is_valid`` is true when no errors were found
        """
        result = ValidationResult()

        # GPU configuration
        if config.gpu_count > MAX_GPUS_PER_NODE:
            result.errors.append(f"Maximum {MAX_GPUS_PER_NODE} GPUs per node supported")

        if config.gpu_count < 1:
            result.errors.append("At least 1 GPU is required for AI workloads")

        # Node count
        if config.node_count < MIN_NODE_COUNT:
            result.errors.append("At least 1 node is required")

        if config.node_count > MAX_NODE_COUNT:
            result.warnings.append("Large node counts may impact cluster management")
            result.recommendations.append(
                "Consider using node pools for better resource management"
            )

        # Networking
        if config.networking.enable_rdma and not supports_rdma(config.machine_type):
            result.errors.append("RDMA not supported on selected machine type")

        # Region and zone
        if not is_valid_region(config.region):
            result.errors.append(f"Invalid region: {config.region}")

        if not is_valid_zone(config.zone, config.region):
            result.errors.append(f"Invalid zone: {config.zone} for region: {config.region}")

        # Cost
        if config.node_count > SPOT_INSTANCE_NODE_THRESHOLD:
            result.recommendations.append("Consider using spot instances for cost optimization")

        if config.cost_estimate.monthly_cost > HIGH_MONTHLY_COST_THRESHOLD:
            result.warnings.append("High monthly cost detected")
            result.recommendations.append(
                "Review resource allocation and consider cost optimization strategies"
            )

        # Performance
        if config.networking.enable_rdma:
            result.recommendations.append(
                "RDMA enabled - ensure proper network configuration for optimal performance"
            )

        if config.storage.enable_filestore:
            result.recommendations.append(
                "Filestore enabled - consider performance tier based on workload requirements"
            )

        logger.debug(
            "Validated %s in %s: %d error(s), %d warning(s)",
            config.machine_type,
            config.zone,
            len(result.errors),
            len(result.warnings),
        )
        return result


def validate_cluster_config(config: ClusterConfig) -> ValidationResult:
    """Validate a cluster config with a default ConfigValidator."""
    return ConfigValidator().validate_cluster_config(config)
