"""Command-line interface for cluster config recommendation."""

import argparse
import json
import logging
import sys
from typing import List

from .catalog import (
    GPU_TYPE_OPTIONS,
    MAX_NODE_COUNT,
    MIN_NODE_COUNT,
    MODEL_SIZE_OPTIONS,
    PRIORITY_OPTIONS,
    WORKLOAD_TYPE_OPTIONS,
    get_machine_types,
    option_values,
)
from .models import WorkloadProfile
from .prerequisites import PrerequisitesManager
from .recommender import ClusterRecommender


def load_profiles_from_json(filepath: str) -> List[WorkloadProfile]:
    """Load workload profiles from a JSON file (one object or a list)."""
    with open(filepath, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    elif not isinstance(data, list):
        raise ValueError("Profile file must hold a JSON object or a list of objects")

    return [WorkloadProfile.from_dict(profile_data) for profile_data in data]


def _node_count(value: str) -> int:
    count = int(value)
    if not MIN_NODE_COUNT <= count <= MAX_NODE_COUNT:
        raise argparse.ArgumentTypeError(
            f"node count must be between {MIN_NODE_COUNT} and {MAX_NODE_COUNT}"
        )
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend and validate GPU cluster configs for AI workloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recommend a config from command-line fields
  cluster-wizard --type training --model-size medium --gpu-type A100 \\
      --node-count 2 --priority balanced

  # Recommend configs for every profile in a file
  cluster-wizard --profile examples/profiles.json --output configs.json

  # List machine types for a GPU type
  cluster-wizard --list-machine-types H100

  # Fail with exit code 2 if any config is invalid
  cluster-wizard --profile examples/profiles.json --strict
        """,
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--profile",
        help="Path to JSON file containing a workload profile or a list of profiles",
    )
    source_group.add_argument(
        "--list-regions",
        action="store_true",
        help="List recommended regions and exit",
    )
    source_group.add_argument(
        "--list-machine-types",
        metavar="GPU",
        help="List candidate machine types for a GPU type and exit",
    )
    source_group.add_argument(
        "--check-prerequisites",
        action="store_true",
        help="Run the environment prerequisite checks and exit",
    )

    parser.add_argument("--type", choices=option_values(WORKLOAD_TYPE_OPTIONS))
    parser.add_argument("--model-size", choices=option_values(MODEL_SIZE_OPTIONS))
    parser.add_argument("--gpu-type", choices=option_values(GPU_TYPE_OPTIONS))
    parser.add_argument(
        "--node-count",
        type=_node_count,
        help=f"Number of nodes ({MIN_NODE_COUNT}-{MAX_NODE_COUNT})",
    )
    parser.add_argument("--priority", choices=option_values(PRIORITY_OPTIONS))

    parser.add_argument("--output", help="Path to output JSON file (default: stdout)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with code 2 if any recommended config fails validation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    field_flags = [args.type, args.model_size, args.gpu_type, args.node_count, args.priority]
    if args.profile and any(value is not None for value in field_flags):
        parser.error("--profile cannot be combined with the profile field options")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    recommender = ClusterRecommender()

    try:
        if args.list_regions:
            print("Recommended regions:")
            for region in recommender.get_recommended_regions():
                print(f"  {region}")
            sys.exit(0)

        if args.list_machine_types:
            print(f"Machine types for {args.list_machine_types}:")
            for machine_type in get_machine_types(args.list_machine_types):
                print(f"  {machine_type}")
            sys.exit(0)

        if args.check_prerequisites:
            check = PrerequisitesManager().check_prerequisites()
            print(json.dumps(check.to_dict(), indent=2))
            sys.exit(0 if check.is_ready else 1)

        if args.profile:
            profiles = load_profiles_from_json(args.profile)
            if not profiles:
                print("Error: No profiles found in input file", file=sys.stderr)
                sys.exit(1)
        else:
            fields = {
                "type": args.type,
                "model_size": args.model_size,
                "gpu_type": args.gpu_type,
                "node_count": args.node_count,
                "priority": args.priority,
            }
            if all(value is None for value in fields.values()):
                print(
                    "Error: Either --profile or the profile fields must be specified",
                    file=sys.stderr,
                )
                parser.print_help()
                sys.exit(1)
            profiles = [WorkloadProfile.from_dict(fields)]

        results = [recommender.recommend(profile) for profile in profiles]

        output_data = {"results": [result.to_dict() for result in results]}
        json_output = json.dumps(output_data, indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(json_output)
            print(f"Configs written to {args.output}")
        else:
            print(json_output)

        # Print summary to stderr
        print("\n=== Summary ===", file=sys.stderr)
        for result in results:
            config = result.config
            status = "VALID" if result.validation.is_valid else (
                f"INVALID ({len(result.validation.errors)} error(s))"
            )
            print(
                f"  {'-'.join(str(v) for v in result.profile.key())}: "
                f"{config.node_count}x {config.machine_type} with {config.gpu_count} GPU(s), "
                f"${config.cost_estimate.monthly_cost:,.2f}/month - {status}",
                file=sys.stderr,
            )

        if args.strict and not all(result.validation.is_valid for result in results):
            sys.exit(2)

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON - {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
