"""Fixed catalog of regions, machine types and wizard options.

All tables in this module are read-only lookups. Lists handed out to callers
are copies so the tables themselves cannot be changed at runtime.
"""

from types import MappingProxyType
from typing import Dict, List, NamedTuple, Tuple

DEFAULT_REGION = "us-central1"

# Regions offered to the user, in display order
RECOMMENDED_REGIONS: Tuple[str, ...] = (
    "us-central1",
    "us-west1",
    "us-east1",
    "europe-west1",
    "asia-southeast1",
)

# Regions accepted by the validator
VALID_REGIONS = frozenset(
    RECOMMENDED_REGIONS + ("us-east4", "europe-west4", "asia-northeast1")
)

VALID_ZONE_SUFFIXES = frozenset({"a", "b", "c"})

# Candidate machine types per GPU type, ascending size
MACHINE_TYPES_BY_GPU = MappingProxyType(
    {
        "A100": ("a2-highgpu-1g", "a2-highgpu-2g", "a2-highgpu-4g", "a2-highgpu-8g"),
        "H100": ("h3-highgpu-1g", "h3-highgpu-2g", "h3-highgpu-4g", "h3-highgpu-8g"),
        "A3-Ultra": ("a3-highgpu-1g", "a3-highgpu-2g", "a3-highgpu-4g", "a3-highgpu-8g"),
    }
)

# Used for every GPU type without a dedicated list (T4 and V100 included)
DEFAULT_MACHINE_TYPES: Tuple[str, ...] = ("n1-standard-4", "n1-standard-8", "n1-standard-16")

RDMA_GPU_TYPES = frozenset({"A100", "H100"})

RDMA_MACHINE_TYPES = frozenset(
    MACHINE_TYPES_BY_GPU["A100"] + MACHINE_TYPES_BY_GPU["H100"]
)

# Per-node GPU cap by model size; unknown sizes get DEFAULT_GPU_COUNT
GPU_CAP_BY_MODEL_SIZE = MappingProxyType({"small": 2, "medium": 4, "large": 8})
DEFAULT_GPU_COUNT = 1

MAX_GPUS_PER_NODE = 8
MIN_NODE_COUNT = 1
MAX_NODE_COUNT = 100


class WizardOption(NamedTuple):
    """A selectable value in one of the wizard steps."""

    value: str
    label: str
    description: str


WORKLOAD_TYPE_OPTIONS: Tuple[WizardOption, ...] = (
    WizardOption("training", "Model Training", "Training large AI models from scratch"),
    WizardOption("inference", "Model Inference", "Running trained models for predictions"),
    WizardOption("fine-tuning", "Fine-tuning", "Adapting pre-trained models to your data"),
)

MODEL_SIZE_OPTIONS: Tuple[WizardOption, ...] = (
    WizardOption("small", "Small (< 1B parameters)", "Fast training, lower resource requirements"),
    WizardOption("medium", "Medium (1B - 10B parameters)", "Balanced performance and resources"),
    WizardOption(
        "large", "Large (> 10B parameters)", "High performance, significant resources needed"
    ),
)

GPU_TYPE_OPTIONS: Tuple[WizardOption, ...] = (
    WizardOption("A100", "NVIDIA A100", "Best for large model training, highest performance"),
    WizardOption("H100", "NVIDIA H100", "Latest generation, maximum performance"),
    WizardOption("A3-Ultra", "Google A3-Ultra", "Google's custom AI accelerator"),
    WizardOption("T4", "NVIDIA T4", "Cost-effective for inference workloads"),
    WizardOption("V100", "NVIDIA V100", "Proven performance, good value"),
)

PRIORITY_OPTIONS: Tuple[WizardOption, ...] = (
    WizardOption("cost", "Cost Optimized", "Minimize costs while meeting requirements"),
    WizardOption("performance", "Performance Optimized", "Maximum performance regardless of cost"),
    WizardOption("balanced", "Balanced", "Good balance of performance and cost"),
)

WIZARD_STEPS: Tuple[Tuple[str, str], ...] = (
    ("Workload Type", "What type of AI workload are you running?"),
    ("Model Size", "How large is your model?"),
    ("GPU Requirements", "Which GPU type do you need?"),
    ("Scale & Priority", "How many nodes and what is your priority?"),
    ("Review & Generate", "Review your configuration"),
)


def option_values(options: Tuple[WizardOption, ...]) -> List[str]:
    """Return the raw values of a wizard option table."""
    return [option.value for option in options]


def option_labels(options: Tuple[WizardOption, ...]) -> Dict[str, str]:
    """Map option values to their display labels."""
    return {option.value: option.label for option in options}


def list_gpu_types() -> List[str]:
    """List the GPU types offered by the wizard."""
    return option_values(GPU_TYPE_OPTIONS)


def get_machine_types(gpu_type: str) -> List[str]:
    """Get the ordered machine type candidates for a GPU type.

    Args:
        gpu_type: GPU type key (e.g., "A100")

    Returns:
        Machine types in ascending size; the generic CPU list for GPU types
        without a dedicated list
    """
    return list(MACHINE_TYPES_BY_GPU.get(gpu_type, DEFAULT_MACHINE_TYPES))


def is_valid_region(region: str) -> bool:
    return region in VALID_REGIONS


def is_valid_zone(zone: str, region: str) -> bool:
    """Check that a zone belongs to a region and has a known suffix."""
    suffix = zone.split("-")[-1]
    return zone.startswith(region) and suffix in VALID_ZONE_SUFFIXES


def supports_rdma(machine_type: str) -> bool:
    return machine_type in RDMA_MACHINE_TYPES
