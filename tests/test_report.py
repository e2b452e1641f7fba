"""Tests for the tabular views used by the wizard UI."""

import pandas as pd
import pytest

from cluster_wizard import ClusterRecommender, WorkloadProfile
from cluster_wizard.report import config_summary_frame, cost_breakdown_frame, validation_frame


@pytest.fixture
def result():
    """Wizard result for a large H100 fine-tuning job."""
    profile = WorkloadProfile("fine-tuning", "large", "H100", 16, "performance")
    return ClusterRecommender().recommend(profile)


def test_config_summary_frame(result):
    df = config_summary_frame(result.config)

    assert list(df.columns) == ["Setting", "Value"]
    values = dict(zip(df["Setting"], df["Value"]))
    assert values["Machine Type"] == "h3-highgpu-8g"
    assert values["GPUs per Node"] == "8"
    assert values["Nodes"] == "16"
    assert values["RDMA"] == "Enabled"
    assert values["Private Nodes"] == "Enabled"
    assert values["Filestore"] == "Disabled"


def test_cost_breakdown_frame(result):
    df = cost_breakdown_frame(result.config)

    assert len(df) == 4
    amounts = dict(zip(df["Item"], df["Amount"]))
    assert amounts["Compute"] == pytest.approx(1.00)
    assert amounts["Gpu"] == pytest.approx(28.0)
    assert amounts["Storage"] == 50
    periods = dict(zip(df["Item"], df["Period"]))
    assert periods["Gpu"] == "hourly"
    assert periods["Networking"] == "monthly"
    assert set(df["Currency"]) == {"USD"}


def test_validation_frame(result):
    """Test flattening findings for CSV export."""
    df = validation_frame(result.validation)

    assert result.validation.is_valid
    assert (df["Severity"] == "error").sum() == 0
    assert list(df[df["Severity"] == "warning"]["Message"]) == ["High monthly cost detected"]
    assert (df["Severity"] == "recommendation").sum() == len(result.validation.recommendations)

    csv = df.to_csv(index=False)
    assert csv.startswith("Severity,Message")


def test_validation_frame_empty():
    from cluster_wizard.models import ValidationResult

    df = validation_frame(ValidationResult())

    assert isinstance(df, pd.DataFrame)
    assert df.empty
    assert list(df.columns) == ["Severity", "Message"]
