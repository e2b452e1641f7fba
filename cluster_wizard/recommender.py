"""Cluster configuration recommendation engine."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .catalog import (
    DEFAULT_GPU_COUNT,
    DEFAULT_REGION,
    GPU_CAP_BY_MODEL_SIZE,
    RDMA_GPU_TYPES,
    RECOMMENDED_REGIONS,
    get_machine_types,
)
from .models import (
    ClusterConfig,
    CostEstimate,
    NetworkConfig,
    ProfileKey,
    StorageConfig,
    ValidationResult,
    WorkloadProfile,
)
from .pricing import estimate_cost
from .validator import ConfigValidator

logger = logging.getLogger(__name__)


def _build_default_presets() -> Mapping[ProfileKey, ClusterConfig]:
    """Hand-curated configs for common workloads, stored verbatim."""
    presets = {
        ProfileKey("training", "medium", "A100", 2, "balanced"): ClusterConfig(
            region="us-central1",
            zone="us-central1-a",
            machine_type="a2-highgpu-2g",
            gpu_count=2,
            node_count=2,
            networking=NetworkConfig(
                enable_rdma=True,
                enable_vpc=True,
                enable_private_nodes=False,
                enable_master_auth=True,
            ),
            storage=StorageConfig(
                enable_persistent_disks=True,
                enable_filestore=True,
                enable_cloud_storage=True,
            ),
            cost_estimate=CostEstimate(
                monthly_cost=1800,
                hourly_cost=2.50,
                currency="USD",
                breakdown={"compute": 120, "gpu": 1620, "storage": 50, "networking": 20},
            ),
        ),
    }
    return MappingProxyType(presets)


# Built once at import; never modified afterwards
DEFAULT_PRESETS = _build_default_presets()


@dataclass
class WizardResult:
    """Output of the wizard's review step.

    Attributes:
        profile: Workload profile the config was derived from
        config: Recommended cluster config
        validation: Validation result for the config
        preset: Whether the config came from the pre-registered table
    """

    profile: WorkloadProfile
    config: ClusterConfig
    validation: ValidationResult
    preset: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "profile": self.profile.to_dict(),
            "config": self.config.to_dict(),
            "validation": self.validation.to_dict(),
            "preset": self.preset,
        }


class ClusterRecommender:
    """Derives a cluster config from a workload profile.

    A profile whose five fields exactly match a pre-registered entry gets that
    entry back unchanged. Any other profile gets a config synthesized from
    fixed rules. Unknown field values fall back to defaults instead of
    raising, so every profile yields a config.
    """

    def __init__(
        self,
        presets: Optional[Mapping[ProfileKey, ClusterConfig]] = None,
        validator: Optional[ConfigValidator] = None,
    ):
        """Initialize the recommender.

        Args:
            presets: Pre-registered configs keyed by profile (defaults to
                DEFAULT_PRESETS)
            validator: Validator used by :meth:`recommend` (creates default if None)
        """
        self.presets = DEFAULT_PRESETS if presets is None else MappingProxyType(dict(presets))
        self.validator = validator or ConfigValidator()

    def get_optimal_config(self, profile: WorkloadProfile) -> ClusterConfig:
        """Return the recommended cluster config for a complete profile."""
        preset = self.presets.get(profile.key())
        if preset is not None:
            logger.debug("Using pre-registered config for %s", profile.key())
            return preset
        return self._generate_custom_config(profile)

    def get_recommended_regions(self) -> List[str]:
        return list(RECOMMENDED_REGIONS)

    def get_recommended_machine_types(self, profile: WorkloadProfile) -> List[str]:
        """Ordered machine type candidates for the profile's GPU type."""
        return get_machine_types(profile.gpu_type)

    def recommend(self, profile: WorkloadProfile) -> WizardResult:
        """Derive and validate a config in one step."""
        config = self.get_optimal_config(profile)
        validation = self.validator.validate_cluster_config(config)
        return WizardResult(
            profile=profile,
            config=config,
            validation=validation,
            preset=profile.key() in self.presets,
        )

    def _generate_custom_config(self, profile: WorkloadProfile) -> ClusterConfig:
        region = self._detect_optimal_region()
        machine_type = self._select_machine_type(profile)
        gpu_count = self._calculate_gpu_count(profile)

        logger.debug(
            "Synthesized config for %s: %s with %d GPU(s)", profile.key(), machine_type, gpu_count
        )

        return ClusterConfig(
            region=region,
            zone=f"{region}-a",
            machine_type=machine_type,
            gpu_count=gpu_count,
            node_count=profile.node_count,
            networking=self._networking_for(profile),
            storage=self._storage_for(profile),
            cost_estimate=estimate_cost(profile.gpu_type, machine_type, gpu_count),
        )

    def _detect_optimal_region(self) -> str:
        # No location detection; always the default region
        return DEFAULT_REGION

    def _select_machine_type(self, profile: WorkloadProfile) -> str:
        machine_types = self.get_recommended_machine_types(profile)

        if profile.priority == "performance":
            return machine_types[-1]
        if profile.priority == "balanced":
            return machine_types[len(machine_types) // 2]
        # "cost" and anything unrecognized take the cheapest option
        return machine_types[0]

    def _calculate_gpu_count(self, profile: WorkloadProfile) -> int:
        cap = GPU_CAP_BY_MODEL_SIZE.get(profile.model_size)
        if cap is None:
            return DEFAULT_GPU_COUNT
        return min(profile.node_count, cap)

    def _networking_for(self, profile: WorkloadProfile) -> NetworkConfig:
        return NetworkConfig(
            enable_rdma=profile.gpu_type in RDMA_GPU_TYPES,
            enable_vpc=True,
            enable_private_nodes=profile.priority == "performance",
            enable_master_auth=True,
        )

    def _storage_for(self, profile: WorkloadProfile) -> StorageConfig:
        return StorageConfig(
            enable_persistent_disks=True,
            enable_filestore=profile.type == "training",
            enable_cloud_storage=True,
        )
