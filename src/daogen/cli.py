"""
Command line entry point.

Usage:
    # Use ./config.properties when present, otherwise defaults
    daogen

    # Explicit configuration file and output directory
    daogen shop.properties --output-dir build/generated

    # Print the generated files instead of writing them
    daogen --url sqlite:///shop.db --dry-run
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from daogen import __version__
from daogen.config import load_config
from daogen.core.errors import DaoGenError
from daogen.logging import LogFormat, LogLevel, configure_logging, get_logger
from daogen.pipeline import create_family, load_schema, render, run

logger = get_logger("daogen.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daogen",
        description="Generate model, DAO and controller sources from a database schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Properties file (default: ./config.properties when present)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory the package tree is written under (generator.outputdir)",
    )
    parser.add_argument(
        "--url",
        help="SQLAlchemy database URL, overriding the database.* settings",
    )
    parser.add_argument(
        "--template",
        help="Template family to generate (generator.template)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated files to stdout instead of writing them",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.INFO.value,
    )
    parser.add_argument(
        "--log-format",
        choices=[fmt.value for fmt in LogFormat],
        default=LogFormat.TEXT.value,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def cmd_generate(args: argparse.Namespace) -> None:
    """Generate and write every artifact."""
    config = load_config(args.config).with_overrides(
        generator_output_dir=args.output_dir,
        generator_template=args.template,
        database_url_override=args.url,
    )

    if args.dry_run:
        family = create_family(config)
        schema = load_schema(config)
        for path, text in render(schema, family, config.generator.spacing).items():
            sys.stdout.write(f"// ==> {path}\n{text}\n")
        return

    result = run(config)
    logger.info("Generation finished", files=len(result.files), warnings=len(result.warnings))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=args.log_level,
        format=args.log_format,
        use_colors=sys.stderr.isatty(),
    )

    try:
        cmd_generate(args)
    except DaoGenError as e:
        logger.error(e.message, code=e.code, details=e.details)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
