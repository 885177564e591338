"""Documentation generator for orchestrator actions.

Usage:
    orchdocs <source_directory> <docs_output_directory>

Generates:
    <docs>/<path>/<Class>.md      - Class-based action reference
    <docs>/<dir>/<dir>.md         - Merged reference for a folder of actions
    <docs>/README.md              - Table of contents
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import Config
from .exceptions import OrchdocsError
from .validators import compute_coverage, validate_docs
from .walker import generate_docs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orchdocs",
        description="Generate Markdown documentation from JSDoc-style comments.",
        epilog="Example: orchdocs ./src/main/resources ./docs",
    )
    parser.add_argument("source_directory", help="Root of the source tree")
    parser.add_argument("docs_output_directory", help="Where Markdown is written")
    parser.add_argument(
        "--extension",
        default=Config.EXTENSION,
        help=f"Source file extension (default: {Config.EXTENSION})",
    )
    parser.add_argument(
        "--source-root",
        default=Config.SOURCE_ROOT,
        help=f"Path fragment module names start after (default: {Config.SOURCE_ROOT})",
    )
    parser.add_argument(
        "--language",
        default=Config.CODE_LANGUAGE,
        help=f"Code fence language for examples (default: {Config.CODE_LANGUAGE})",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory before generating",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat undocumented declarations as errors",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate all documentation."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Extracting docs...")

    try:
        result = generate_docs(
            args.source_directory,
            args.docs_output_directory,
            extension=args.extension,
            source_root=args.source_root,
            language=args.language,
            clean=args.clean,
        )
    except OrchdocsError as e:
        print(f"  ✗ {e}", file=sys.stderr)
        return 1

    print(
        f"  ✓ {len(result.class_docs)} class-based files, "
        f"{len(result.module_docs)} action files"
    )

    validation = validate_docs(result.class_docs, result.module_docs, strict=args.strict)
    for warning in validation.warnings:
        print(f"  ⚠ {warning}", file=sys.stderr)

    coverage = compute_coverage(result.class_docs, result.module_docs)
    print(f"\nCoverage: classes {coverage['class']:.0%}, actions {coverage['action']:.0%}")

    print("\nGenerated:")
    for path in result.written:
        print(f"  {path}")
    if result.toc is not None:
        print(f"  {result.toc}")

    if validation.errors:
        print("\nValidation errors:")
        for err in validation.errors:
            print(f"  ✗ {err}")
        return 1

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
