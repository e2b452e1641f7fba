"""Static price tables and cost estimation.

Prices are simplified hourly USD figures; no pricing API is consulted.
"""

from typing import Dict

from .models import CostEstimate

CURRENCY = "USD"

# Applied to any machine or GPU type missing from the tables below
DEFAULT_HOURLY_PRICE = 1.00

# Monthly cost is derived from a flat 30-day month
HOURS_PER_MONTH = 24 * 30

# Flat monthly estimates reported in the breakdown only
STORAGE_MONTHLY_ESTIMATE = 50
NETWORKING_MONTHLY_ESTIMATE = 20

MACHINE_TYPE_HOURLY_PRICES: Dict[str, float] = {
    "a2-highgpu-1g": 2.50,
    "a2-highgpu-2g": 5.00,
    "a2-highgpu-4g": 10.00,
    "a2-highgpu-8g": 20.00,
    "n1-standard-4": 0.19,
    "n1-standard-8": 0.38,
    "n1-standard-16": 0.76,
}

GPU_HOURLY_PRICES: Dict[str, float] = {
    "A100": 2.25,
    "H100": 3.50,
    "A3-Ultra": 1.75,
    "T4": 0.35,
    "V100": 2.48,
}


def get_machine_type_cost(machine_type: str) -> float:
    """Hourly price of a machine type, or the default price if unlisted."""
    return MACHINE_TYPE_HOURLY_PRICES.get(machine_type, DEFAULT_HOURLY_PRICE)


def get_gpu_type_cost(gpu_type: str) -> float:
    """Hourly price of a single GPU, or the default price if unlisted."""
    return GPU_HOURLY_PRICES.get(gpu_type, DEFAULT_HOURLY_PRICE)


def estimate_cost(gpu_type: str, machine_type: str, gpu_count: int) -> CostEstimate:
    """Estimate the cost of a node configuration.

    The hourly cost is the machine price plus the GPU price times the GPU
    count. Storage and networking appear in the breakdown as flat monthly
    figures and are not added to the hourly or monthly totals.

    Args:
        gpu_type: GPU type key (e.g., "A100")
        machine_type: Machine type (e.g., "a2-highgpu-2g")
        gpu_count: Number of GPUs

    Returns:
        CostEstimate with totals and breakdown
    """
    compute_hourly = get_machine_type_cost(machine_type)
    gpu_hourly = get_gpu_type_cost(gpu_type) * gpu_count
    hourly_cost = compute_hourly + gpu_hourly

    return CostEstimate(
        monthly_cost=hourly_cost * HOURS_PER_MONTH,
        hourly_cost=hourly_cost,
        currency=CURRENCY,
        breakdown={
            "compute": compute_hourly,
            "gpu": gpu_hourly,
            "storage": STORAGE_MONTHLY_ESTIMATE,
            "networking": NETWORKING_MONTHLY_ESTIMATE,
        },
    )
