"""Command-line interface for tensorperf."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from tensorperf.configs import load_run_groups, save_json_file, save_yaml_file
from tensorperf.errors import ConfigError
from tensorperf.run_groups import run_groups_to_dicts, sweep_sizes

try:
    TENSORPERF_CLI_VERSION = package_version("tensorperf")
except PackageNotFoundError:
    TENSORPERF_CLI_VERSION = "0.1.0"


def run_list(args: argparse.Namespace) -> int:
    """Execute `tensorperf list`."""
    groups = load_run_groups(args.config)
    print("Benchmark run groups:")
    print("=" * 72)
    for group in groups:
        sizes = sweep_sizes(group)
        print(group.name)
        print(
            f"  steps {group.min}..{group.max} by {group.step_size} "
            f"({len(sizes)} sizes, first={sizes[0]}, last={sizes[-1]})"
        )
        if group.options:
            print(f"  options: {', '.join(group.options)} (selected: {group.selected_option})")
        print(f"  runs: {', '.join(run.name for run in group.runs)}")
    print("=" * 72)
    print(f"Total: {len(groups)} group(s)")
    return 0


def run_export(args: argparse.Namespace) -> int:
    """Execute `tensorperf export`."""
    groups = load_run_groups(args.config)
    data = {"run_groups": run_groups_to_dicts(groups)}
    fmt = args.format
    if fmt is None:
        fmt = "yaml" if args.output.endswith((".yaml", ".yml")) else "json"
    if fmt == "yaml":
        save_yaml_file(args.output, data)
    else:
        save_json_file(args.output, data)
    print(f"[OK] Exported {len(groups)} run group(s) to: {args.output}")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Execute `tensorperf validate`."""
    groups = load_run_groups(args.config)
    print(f"[OK] {len(groups)} run group(s) are valid")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="tensorperf",
        description="Inspect and export the tensor-op benchmark run groups.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tensorperf {TENSORPERF_CLI_VERSION}",
        help="Show CLI version and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    config_help = "Optional YAML/JSON file with run_groups overrides"

    list_cmd = sub.add_parser("list", help="List run groups and their sweeps")
    list_cmd.add_argument("--config", help=config_help)
    list_cmd.set_defaults(func=run_list)

    export = sub.add_parser("export", help="Write run groups to a JSON or YAML file")
    export.add_argument("output", help="Output file path")
    export.add_argument("--config", help=config_help)
    export.add_argument(
        "--format",
        choices=["json", "yaml"],
        help="Output format (default: from the output file extension)",
    )
    export.set_defaults(func=run_export)

    validate = sub.add_parser("validate", help="Check run groups (and overrides) for defects")
    validate.add_argument("--config", help=config_help)
    validate.set_defaults(func=run_validate)

    return parser


def main(argv=None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not getattr(args, "command", None):
        parser.print_help()
        return 0
    try:
        return int(args.func(args))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
