"""Cluster Wizard - recommended GPU cluster configs for AI workloads."""

from .catalog import get_machine_types, list_gpu_types
from .models import (
    ClusterConfig,
    CostEstimate,
    NetworkConfig,
    PrerequisitesCheck,
    ProfileKey,
    StorageConfig,
    ValidationResult,
    WorkloadProfile,
)
from .prerequisites import PrerequisitesManager
from .pricing import estimate_cost
from .recommender import ClusterRecommender, WizardResult
from .validator import ConfigValidator, validate_cluster_config

__version__ = "0.1.0"

__all__ = [
    "WorkloadProfile",
    "ProfileKey",
    "ClusterConfig",
    "NetworkConfig",
    "StorageConfig",
    "CostEstimate",
    "ValidationResult",
    "PrerequisitesCheck",
    "ClusterRecommender",
    "WizardResult",
    "ConfigValidator",
    "validate_cluster_config",
    "PrerequisitesManager",
    "estimate_cost",
    "get_machine_types",
    "list_gpu_types",
]
