#!/usr/bin/env python3
"""
Pattern Catalog CLI.

Runs design pattern demonstrations by name and prints their effects, one
per line, on stdout. Logs go to stderr.

Usage:
    python main.py list
    python main.py run adapter
    python main.py run state --input events='[start, finish, pause]'
    python main.py run-all
    python main.py --config config/catalog.yaml --log-level INFO run proxy

Exit Codes:
    0 - Success
    1 - Unknown pattern or a demonstration failure
    2 - CLI usage error
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from catalog import CatalogConfig, DemoRunner, configure_logging


def parse_inputs(pairs: List[str]) -> Dict[str, Any]:
    """Parse ``key=value`` pairs; values are read as YAML scalars or lists.

    Raises:
        ValueError: If a pair has no '=' or its value is not valid YAML
    """
    inputs: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected key=value, got {pair!r}")
        try:
            inputs[key] = yaml.safe_load(raw) if raw else ""
        except yaml.YAMLError as exc:
            raise ValueError(f"cannot parse value for {key!r}: {exc}") from exc
    return inputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Run design pattern demonstrations and print their effects.",
    )
    parser.add_argument("--config", help="YAML config file (default: $CATALOG_CONFIG)")
    parser.add_argument("--log-level", help="Log level override (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List registered patterns")

    run_parser = subparsers.add_parser("run", help="Run one pattern demonstration")
    run_parser.add_argument("pattern", help="Pattern name, e.g. adapter")
    run_parser.add_argument(
        "--input",
        "-i",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a demo input (repeatable)",
    )
    run_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    subparsers.add_parser("run-all", help="Run every registered demonstration")
    return parser


def load_config(args: argparse.Namespace) -> CatalogConfig:
    config = CatalogConfig.from_yaml(args.config) if args.config else CatalogConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.json_logs:
        config.json_logs = True
    config.validate()
    return config


def cmd_list(runner: DemoRunner) -> int:
    for name, summary in runner.registry.describe().items():
        print(f"{name:18} {summary}")
    return 0


def cmd_run(runner: DemoRunner, config: CatalogConfig, args: argparse.Namespace) -> int:
    try:
        overrides = parse_inputs(args.input)
    except ValueError as e:
        print(f"InvalidInput: {e}", file=sys.stderr)
        return 1

    inputs = config.inputs_for(args.pattern)
    inputs.update(overrides)
    result = runner.run(args.pattern, inputs)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for effect in result.effects:
            print(effect)

    if result.error is not None:
        print(result.error.describe(), file=sys.stderr)
        return 1
    return 0


def cmd_run_all(runner: DemoRunner, config: CatalogConfig) -> int:
    results = runner.run_all(config.inputs)
    failures = 0
    for name, result in results.items():
        print(f"== {name}")
        for effect in result.effects:
            print(effect)
        if result.error is not None:
            failures += 1
            print(result.error.describe(), file=sys.stderr)
    print(f"{len(results) - failures}/{len(results)} demonstrations succeeded")
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"ConfigError: {e}", file=sys.stderr)
        return 1

    configure_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.json_logs,
        use_colors=config.use_colors,
    )
    runner = DemoRunner()

    if args.command == "list":
        return cmd_list(runner)
    if args.command == "run":
        return cmd_run(runner, config, args)
    return cmd_run_all(runner, config)


if __name__ == "__main__":
    sys.exit(main())
