"""Tabular views of wizard results for display and CSV export."""

import pandas as pd

from .models import ClusterConfig, ValidationResult


def config_summary_frame(config: ClusterConfig) -> pd.DataFrame:
    """One row per config setting, as shown on the review page."""
    rows = [
        {"Setting": "Region", "Value": config.region},
        {"Setting": "Zone", "Value": config.zone},
        {"Setting": "Machine Type", "Value": config.machine_type},
        {"Setting": "GPUs per Node", "Value": str(config.gpu_count)},
        {"Setting": "Nodes", "Value": str(config.node_count)},
        {"Setting": "RDMA", "Value": _on_off(config.networking.enable_rdma)},
        {"Setting": "VPC", "Value": _on_off(config.networking.enable_vpc)},
        {"Setting": "Private Nodes", "Value": _on_off(config.networking.enable_private_nodes)},
        {"Setting": "Master Auth", "Value": _on_off(config.networking.enable_master_auth)},
        {"Setting": "Persistent Disks", "Value": _on_off(config.storage.enable_persistent_disks)},
        {"Setting": "Filestore", "Value": _on_off(config.storage.enable_filestore)},
        {"Setting": "Cloud Storage", "Value": _on_off(config.storage.enable_cloud_storage)},
    ]
    return pd.DataFrame(rows)


def cost_breakdown_frame(config: ClusterConfig) -> pd.DataFrame:
    """Cost breakdown entries with their billing period.

    Compute and GPU entries are hourly; storage and networking are flat
    monthly estimates.
    """
    cost = config.cost_estimate
    rows = []
    for item, amount in cost.breakdown.items():
        period = "hourly" if item in ("compute", "gpu") else "monthly"
        rows.append(
            {
                "Item": item.capitalize(),
                "Amount": float(amount),
                "Period": period,
                "Currency": cost.currency,
            }
        )
    return pd.DataFrame(rows, columns=["Item", "Amount", "Period", "Currency"])


def validation_frame(result: ValidationResult) -> pd.DataFrame:
    """Flatten a validation result into (Severity, Message) rows."""
    rows = (
        [{"Severity": "error", "Message": m} for m in result.errors]
        + [{"Severity": "warning", "Message": m} for m in result.warnings]
        + [{"Severity": "recommendation", "Message": m} for m in result.recommendations]
    )
    return pd.DataFrame(rows, columns=["Severity", "Message"])


def _on_off(flag: bool) -> str:
    return "Enabled" if flag else "Disabled"
