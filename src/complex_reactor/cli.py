"""Command-line interface for ComplexReactor.

Provides commands for running a single reaction and inspecting a config file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import yaml

from complex_reactor import __version__
from complex_reactor.exceptions import ComplexReactorError
from complex_reactor.reactor import ComplexReactor
from complex_reactor.utils.config import AppConfig, load_config, merge_configs
from complex_reactor.utils.logging import setup_logging

logger = logging.getLogger(__name__)

PRODUCT_LABELS = ("R", "S")


def _load_app_config(path: str | None) -> AppConfig:
    if path is None:
        return AppConfig()
    return load_config(path)


def _configure_logging(args: argparse.Namespace, config: AppConfig) -> None:
    setup_logging(
        level=args.log_level or config.logging.level,
        log_format=args.log_format or config.logging.format,
        log_file=config.logging.log_file,
        module_levels=config.logging.module_levels,
    )


def cmd_run(args: argparse.Namespace) -> None:
    """Run one reaction and print the products."""
    config = _load_app_config(args.config)
    _configure_logging(args, config)

    overrides: dict[str, Any] = {}
    for key, value in (
        ("input_a", args.a),
        ("input_b", args.b),
        ("conversion", args.conversion),
        ("two_outputs", args.two_outputs),
        ("split_ratio", args.split_ratio),
    ):
        if value is not None:
            overrides[key] = value

    params = merge_configs(config.reactor.model_dump(), overrides)
    reactor = ComplexReactor.from_dict(params)
    outputs = reactor.run_reaction()
    logger.info(f"Ran {reactor!r} with A={reactor.input_a}, B={reactor.input_b}")

    if args.json:
        print(json.dumps({"reactor": reactor.to_dict(), "outputs": outputs}))
    else:
        for label, value in zip(PRODUCT_LABELS, outputs):
            print(f"{label} = {value}")


def cmd_show_config(args: argparse.Namespace) -> None:
    """Print a validated config file as YAML."""
    config = load_config(args.config)
    _configure_logging(args, config)
    print(yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False), end="")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the complex-reactor CLI."""
    parser = argparse.ArgumentParser(
        prog="complex-reactor",
        description="ComplexReactor: limiting-reagent reactor with one or two products",
    )
    parser.add_argument(
        "--version", action="version", version=f"complex-reactor {__version__}"
    )
    parser.add_argument("--log-level", default=None, help="Log level (default from config)")
    parser.add_argument(
        "--log-format", choices=["text", "json"], default=None, help="Log output format"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run
    run_parser = subparsers.add_parser("run", help="Run a single reaction")
    run_parser.add_argument("--a", type=float, default=None, help="Quantity of reagent A")
    run_parser.add_argument("--b", type=float, default=None, help="Quantity of reagent B")
    run_parser.add_argument("--conversion", type=float, default=None, help="Conversion (0..1)")
    run_parser.add_argument(
        "--two-outputs",
        dest="two_outputs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Produce R and S (--no-two-outputs forces R only)",
    )
    run_parser.add_argument(
        "--split-ratio", type=float, default=None, help="Fraction of reacted mass going to R"
    )
    run_parser.add_argument("--config", default=None, help="Path to YAML config file")
    run_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    run_parser.set_defaults(func=cmd_run)

    # show-config
    show_parser = subparsers.add_parser("show-config", help="Validate and print a config file")
    show_parser.add_argument("--config", required=True, help="Path to YAML config file")
    show_parser.set_defaults(func=cmd_show_config)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        args.func(args)
    except ComplexReactorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


__all__ = ["main"]
