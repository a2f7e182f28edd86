"""Command-line interface for clipgraph.

Reads animation clip names from a folder, infers the sequencing graph and
prints it as JSON (or writes it to a file).
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from clipgraph.core.animation import fetch_animations
from clipgraph.core.config import AppConfig, apply_logging_config, load_app_config
from clipgraph.core.io import dump_animations, read_from_folder, write_animations

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    """Load app config and apply command-line overrides."""
    config = load_app_config(args.config)

    data = config.model_dump()
    if args.folder is not None:
        data["animations_dir"] = args.folder
    if args.out is not None:
        data["output_path"] = args.out
    if args.indent is not None:
        data["json_indent"] = args.indent
    if args.log_level is not None:
        data["logging"]["level"] = args.log_level

    return AppConfig.model_validate(data)


def run_build(args: argparse.Namespace) -> int:
    """Build the sequencing graph for a folder of animations.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    apply_logging_config(config)
    logger.debug(f"Resolved config: {config.model_dump()}")

    try:
        animations = read_from_folder(config.animations_dir)
    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    fetch_animations(animations)

    if config.output_path is None:
        print(dump_animations(animations, indent=config.json_indent))
        return 0

    try:
        write_animations(config.output_path, animations, indent=config.json_indent)
    except OSError as e:
        console.print(f"[red]ERROR: Could not write {config.output_path}: {e}[/red]")
        return 1

    console.print(
        f"[green]Wrote {len(animations)} clip(s) to[/green] {config.output_path}"
    )
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="clipgraph",
        description="clipgraph - infer animation clip sequences from file names",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    build = sub.add_parser("build", help="Infer the sequencing graph for a folder")
    build.add_argument(
        "--folder", help="Folder of animation files (default: config or 'animations')"
    )
    build.add_argument("--out", help="Write JSON to this file instead of stdout")
    build.add_argument(
        "--config",
        help="Path to config file (.json/.yaml; default: clipgraph.yaml if present)",
    )
    build.add_argument("--indent", type=int, help="Indent JSON output")
    build.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level",
    )

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "build":
        sys.exit(run_build(args))


if __name__ == "__main__":
    main()
