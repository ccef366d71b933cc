"""Command line interface for arucas-docs."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Callable

from arucas_docs.codegen_markdown import (
    collect_coverage,
    generate_docs,
    render_classes,
    render_extensions,
)
from arucas_docs.config import DocsConfig, load_config
from arucas_docs.schema import load_document

Handler = Callable[[DocsConfig], int]

logger = logging.getLogger(__name__)


def _handle_gen_docs(config: DocsConfig) -> int:
    """Render both references and write them to disk."""
    document = load_document(config.input_path, sort_entries=config.render.sort_entries)
    generate_docs(document, config.classes_output, config.extensions_output, config.render)
    return 0


def _handle_check(config: DocsConfig) -> int:
    """Render both references in memory and report coverage."""
    document = load_document(config.input_path, sort_entries=config.render.sort_entries)
    render_classes(document, config.render)
    render_extensions(document, config.render)
    coverage = collect_coverage(document)
    print(
        f"Functions: {coverage.documented_functions}/{coverage.functions} documented, "
        f"members: {coverage.documented_members}/{coverage.members} documented"
    )
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser, *, suppress: bool) -> None:
    """Add the path and verbosity options to *parser*.

    Subcommand copies use ``SUPPRESS`` defaults so they never overwrite
    values given before the subcommand.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--config", type=Path, default=default(None), help="TOML configuration file"
    )
    parser.add_argument(
        "--input", type=Path, default=default(None), help="documentation JSON file"
    )
    parser.add_argument(
        "--classes-output", type=Path, default=default(None), help="class reference output"
    )
    parser.add_argument(
        "--extensions-output", type=Path, default=default(None), help="extension reference output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=default(0),
        help="log progress (-vv also lists skipped undocumented entries)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="arucas-docs",
        description="Generate Markdown references from an API documentation file.",
    )
    _add_common_arguments(parser, suppress=False)
    parser.set_defaults(func=_handle_gen_docs)

    subparsers = parser.add_subparsers(dest="command")
    gen_docs = subparsers.add_parser("gen-docs", help="write the Markdown references (default)")
    _add_common_arguments(gen_docs, suppress=True)
    gen_docs.set_defaults(func=_handle_gen_docs)
    check = subparsers.add_parser("check", help="render without writing and report coverage")
    _add_common_arguments(check, suppress=True)
    check.set_defaults(func=_handle_check)

    return parser


def log_level(verbosity: int) -> int:
    """Map the ``-v`` count to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def resolve_config(args: argparse.Namespace) -> DocsConfig:
    """Merge the optional config file with command line overrides."""
    config = load_config(args.config) if args.config else DocsConfig()
    overrides = {
        "input_path": args.input,
        "classes_output": args.classes_output,
        "extensions_output": args.extensions_output,
    }
    return dataclasses.replace(
        config, **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(message)s",
    )
    handler: Handler = args.func
    try:
        return handler(resolve_config(args))
    except (OSError, ValueError) as err:
        logger.error("arucas-docs: %s", err)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
