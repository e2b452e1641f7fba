"""Data models for workload profiles, cluster configs and validation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple


class ProfileKey(NamedTuple):
    """Exact-match lookup key for pre-registered cluster configs."""

    type: str
    model_size: str
    gpu_type: str
    node_count: int
    priority: str


# Wire names used by the wizard front end, mapped to attribute names
_PROFILE_ALIASES = {
    "type": "type",
    "modelSize": "model_size",
    "model_size": "model_size",
    "gpuType": "gpu_type",
    "gpu_type": "gpu_type",
    "nodeCount": "node_count",
    "node_count": "node_count",
    "priority": "priority",
}


@dataclass(frozen=True)
class WorkloadProfile:
    """User-specified description of an AI compute job.

    Values are kept as plain strings. Unknown values are accepted here and
    resolved by the recommendation engine's fallback rules.

    Attributes:
        type: Workload type (training, inference, fine-tuning)
        model_size: Model size bucket (small, medium, large)
        gpu_type: Requested accelerator (A100, H100, A3-Ultra, T4, V100)
        node_count: Number of nodes, 1-100 in the wizard
        priority: Optimization goal (cost, performance, balanced)
    """

    type: str
    model_size: str
    gpu_type: str
    node_count: int
    priority: str

    def key(self) -> ProfileKey:
        """Return the five-field key used for pre-registered config lookup."""
        return ProfileKey(self.type, self.model_size, self.gpu_type, self.node_count, self.priority)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkloadProfile":
        """Build a profile from a dict using either camelCase or snake_case keys.

        Raises:
            ValueError: If data is not a dict, any of the five fields is missing,
                or the node count is not a whole number.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Workload profile must be a JSON object, got {type(data).__name__}"
            )

        values = {}
        for name, value in data.items():
            attr = _PROFILE_ALIASES.get(name)
            if attr is not None:
                values[attr] = value

        required = ["type", "model_size", "gpu_type", "node_count", "priority"]
        missing = [f for f in required if values.get(f) is None]
        if missing:
            raise ValueError(f"Incomplete workload profile. Missing: {', '.join(missing)}")

        values["node_count"] = _parse_node_count(values["node_count"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "modelSize": self.model_size,
            "gpuType": self.gpu_type,
            "nodeCount": self.node_count,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class NetworkConfig:
    """Networking flags for a cluster."""

    enable_rdma: bool
    enable_vpc: bool
    enable_private_nodes: bool
    enable_master_auth: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "enableRDMA": self.enable_rdma,
            "enableVPC": self.enable_vpc,
            "enablePrivateNodes": self.enable_private_nodes,
            "enableMasterAuth": self.enable_master_auth,
        }


@dataclass(frozen=True)
class StorageConfig:
    """Storage flags for a cluster."""

    enable_persistent_disks: bool
    enable_filestore: bool
    enable_cloud_storage: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "enablePersistentDisks": self.enable_persistent_disks,
            "enableFilestore": self.enable_filestore,
            "enableCloudStorage": self.enable_cloud_storage,
        }


@dataclass(frozen=True)
class CostEstimate:
    """Estimated cost of running a cluster.

    Attributes:
        monthly_cost: Hourly cost times 720 hours
        hourly_cost: Hourly compute plus hourly GPU cost
        currency: ISO currency code
        breakdown: Hourly ``compute`` and ``gpu`` figures plus flat monthly
            ``storage`` and ``networking`` estimates. The flat entries are
            not part of ``hourly_cost`` or ``monthly_cost``.
    """

    monthly_cost: float
    hourly_cost: float
    currency: str = "USD"
    breakdown: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only; preset configs are shared between callers
        object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "monthlyCost": self.monthly_cost,
            "hourlyCost": self.hourly_cost,
            "currency": self.currency,
            "breakdown": dict(self.breakdown),
        }


@dataclass(frozen=True)
class ClusterConfig:
    """Infrastructure description derived from a workload profile.

    Attributes:
        region: Cloud region identifier
        zone: Zone within the region (``<region>-<a|b|c>``)
        machine_type: Node machine type
        gpu_count: GPUs per node
        node_count: Number of nodes, always the profile's node count
        networking: Networking flags
        storage: Storage flags
        cost_estimate: Estimated cost
    """

    region: str
    zone: str
    machine_type: str
    gpu_count: int
    node_count: int
    networking: NetworkConfig
    storage: StorageConfig
    cost_estimate: CostEstimate

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "region": self.region,
            "zone": self.zone,
            "machineType": self.machine_type,
            "gpuCount": self.gpu_count,
            "nodeCount": self.node_count,
            "networking": self.networking.to_dict(),
            "storage": self.storage.to_dict(),
            "costEstimate": self.cost_estimate.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClusterConfig":
        """Rebuild a config from the dictionary produced by :meth:`to_dict`."""
        networking = data["networking"]
        storage = data["storage"]
        cost = data["costEstimate"]
        return cls(
            region=data["region"],
            zone=data["zone"],
            machine_type=data["machineType"],
            gpu_count=int(data["gpuCount"]),
            node_count=int(data["nodeCount"]),
            networking=NetworkConfig(
                enable_rdma=bool(networking["enableRDMA"]),
                enable_vpc=bool(networking["enableVPC"]),
                enable_private_nodes=bool(networking["enablePrivateNodes"]),
                enable_master_auth=bool(networking["enableMasterAuth"]),
            ),
            storage=StorageConfig(
                enable_persistent_disks=bool(storage["enablePersistentDisks"]),
                enable_filestore=bool(storage["enableFilestore"]),
                enable_cloud_storage=bool(storage["enableCloudStorage"]),
            ),
            cost_estimate=CostEstimate(
                monthly_cost=cost["monthlyCost"],
                hourly_cost=cost["hourlyCost"],
                currency=cost.get("currency", "USD"),
                breakdown=dict(cost.get("breakdown", {})),
            ),
        )


@dataclass
class ValidationResult:
    """Outcome of validating a cluster config.

    Only ``errors`` affect validity; warnings and recommendations are advisory.
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "recommendations": list(self.recommendations),
        }


@dataclass
class PrerequisitesCheck:
    """Readiness of the environment for cluster creation.

    Attributes:
        api_enabled: Whether every required API is enabled
        iam_roles: Required IAM roles the user is missing
        gcloud_installed: Whether the gcloud CLI is available
        region_set: Whether a default region is configured
        project_id: Active project identifier
        billing_enabled: Whether billing is enabled on the project
    """

    api_enabled: bool = False
    iam_roles: List[str] = field(default_factory=list)
    gcloud_installed: bool = False
    region_set: bool = False
    project_id: str = ""
    billing_enabled: bool = False

    @property
    def is_ready(self) -> bool:
        return (
            self.api_enabled
            and not self.iam_roles
            and self.gcloud_installed
            and self.region_set
            and bool(self.project_id)
            and self.billing_enabled
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiEnabled": self.api_enabled,
            "iamRoles": list(self.iam_roles),
            "gcloudInstalled": self.gcloud_installed,
            "regionSet": self.region_set,
            "projectId": self.project_id,
            "billingEnabled": self.billing_enabled,
        }


def _parse_node_count(value: Any) -> int:
    """Convert a node count to int, rejecting fractional values."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid node count: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Node count must be a whole number, got {value}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid node count: {value!r}")
