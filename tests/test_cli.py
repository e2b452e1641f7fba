"""Unit tests for CLI module."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from cluster_wizard import cli
from cluster_wizard.cli import load_profiles_from_json

REPO_ROOT = Path(__file__).parent.parent


def run_cli(*args):
    """Run the CLI module in a subprocess from the repository root."""
    return subprocess.run(
        [sys.executable, "-m", "cluster_wizard.cli", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )


def test_load_profiles_from_json_list(tmp_path):
    """Test loading a list of profiles."""
    profiles_data = [
        {"type": "training", "modelSize": "medium", "gpuType": "A100", "nodeCount": 2, "priority": "balanced"},
        {"type": "inference", "model_size": "small", "gpu_type": "T4", "node_count": 1, "priority": "cost"},
    ]
    profiles_file = tmp_path / "profiles.json"
    with open(profiles_file, "w") as f:
        json.dump(profiles_data, f)

    profiles = load_profiles_from_json(profiles_file)

    assert len(profiles) == 2
    assert profiles[0].gpu_type == "A100"
    assert profiles[1].node_count == 1


def test_load_profiles_from_json_single_object(tmp_path):
    """Test loading a file holding a single profile object."""
    profiles_file = tmp_path / "profile.json"
    with open(profiles_file, "w") as f:
        json.dump(
            {"type": "inference", "modelSize": "large", "gpuType": "H100", "nodeCount": 4, "priority": "cost"},
            f,
        )

    profiles = load_profiles_from_json(profiles_file)

    assert len(profiles) == 1
    assert profiles[0].model_size == "large"


def test_example_profiles_file():
    """Test that the bundled example profiles load."""
    profiles = load_profiles_from_json(REPO_ROOT / "examples" / "profiles.json")

    assert len(profiles) > 0


def test_cli_list_regions():
    result = run_cli("--list-regions")

    assert result.returncode == 0
    assert "Recommended regions:" in result.stdout
    assert "asia-southeast1" in result.stdout


def test_cli_list_machine_types():
    result = run_cli("--list-machine-types", "A100")

    assert result.returncode == 0
    assert "a2-highgpu-8g" in result.stdout


def test_cli_profile_fields(monkeypatch, capsys):
    """Test a recommendation built from command-line fields."""
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "cluster-wizard",
            "--type", "training",
            "--model-size", "medium",
            "--gpu-type", "A100",
            "--node-count", "2",
            "--priority", "balanced",
        ],
    )

    cli.main()

    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert len(output["results"]) == 1
    result = output["results"][0]
    assert result["preset"] is True
    assert result["config"]["machineType"] == "a2-highgpu-2g"
    assert result["config"]["costEstimate"]["monthlyCost"] == 1800
    assert result["validation"]["isValid"] is True
    assert "=== Summary ===" in captured.err
    assert "VALID" in captured.err


def test_cli_profile_file_with_output(tmp_path):
    """Test recommending configs for a profile file written to an output file."""
    output_file = tmp_path / "configs.json"

    result = run_cli("--profile", "examples/profiles.json", "--output", str(output_file))

    assert result.returncode == 0
    assert output_file.exists()
    with open(output_file) as f:
        output_data = json.load(f)
    assert len(output_data["results"]) == 3
    assert output_data["results"][1]["config"]["machineType"] == "n1-standard-4"


def test_cli_incomplete_profile_fields(monkeypatch, capsys):
    """Test that missing profile fields are reported."""
    monkeypatch.setattr(sys, "argv", ["cluster-wizard", "--type", "training"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1
    assert "Missing: model_size, gpu_type, node_count, priority" in capsys.readouterr().err


def test_cli_no_arguments(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["cluster-wizard"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1
    assert "Either --profile or the profile fields must be specified" in capsys.readouterr().err


def test_cli_node_count_out_of_range():
    result = run_cli(
        "--type", "training",
        "--model-size", "small",
        "--gpu-type", "T4",
        "--node-count", "101",
        "--priority", "cost",
    )

    assert result.returncode == 2
    assert "node count must be between 1 and 100" in result.stderr


def test_cli_missing_file():
    result = run_cli("--profile", "does-not-exist.json")

    assert result.returncode == 1
    assert "File not found" in result.stderr


def test_cli_invalid_json(tmp_path):
    bad_file = tmp_path / "bad.json"
    bad_file.write_text("{not json")

    result = run_cli("--profile", str(bad_file))

    assert result.returncode == 1
    assert "Invalid JSON" in result.stderr


def test_cli_non_object_profile(tmp_path):
    """Test that a profile list holding non-objects is reported, not a traceback."""
    bad_file = tmp_path / "profiles.json"
    bad_file.write_text("[1]")

    result = run_cli("--profile", str(bad_file))

    assert result.returncode == 1
    assert "Error: Workload profile must be a JSON object, got int" in result.stderr
    assert "Traceback" not in result.stderr


def test_load_profiles_from_json_scalar(tmp_path):
    profiles_file = tmp_path / "profiles.json"
    profiles_file.write_text("5")

    with pytest.raises(ValueError, match="JSON object or a list of objects"):
        load_profiles_from_json(profiles_file)


def test_cli_fractional_node_count_in_file(tmp_path):
    profiles_file = tmp_path / "profiles.json"
    with open(profiles_file, "w") as f:
        json.dump(
            {"type": "training", "modelSize": "medium", "gpuType": "A100", "nodeCount": 2.7, "priority": "balanced"},
            f,
        )

    result = run_cli("--profile", str(profiles_file))

    assert result.returncode == 1
    assert "Node count must be a whole number, got 2.7" in result.stderr


def test_cli_profile_with_field_flags():
    """Test that a profile file and field options are mutually exclusive."""
    result = run_cli("--profile", "examples/profiles.json", "--type", "training")

    assert result.returncode == 2
    assert "--profile cannot be combined with the profile field options" in result.stderr


def test_cli_strict_mode(tmp_path):
    """Test that --strict fails when a config does not validate."""
    profiles_file = tmp_path / "profiles.json"
    with open(profiles_file, "w") as f:
        json.dump(
            [{"type": "inference", "modelSize": "small", "gpuType": "T4", "nodeCount": 0, "priority": "cost"}],
            f,
        )

    result = run_cli("--profile", str(profiles_file), "--strict")

    assert result.returncode == 2
    assert "INVALID (2 error(s))" in result.stderr


def test_cli_check_prerequisites():
    """Test the prerequisites report; the canned environment is not ready."""
    result = run_cli("--check-prerequisites")

    assert result.returncode == 1
    report = json.loads(result.stdout)
    assert report["apiEnabled"] is False
    assert report["gcloudInstalled"] is True
