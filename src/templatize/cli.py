"""Command line interface for templatize."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ConverterConfig
from .converter import TemplateConverter
from .errors import TemplatizeError
from .naming import normalize_component_name
from .placeholders import DEFAULT_TEMPLATE_SUFFIX, PlaceholderScheme
from .starter import DEFAULT_STARTER, StarterScaffolder, available_starters
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

USAGE = (
    "Usage: templatize <source-directory> <output-directory>\n"
    "       templatize --starter[-<template>] <output-directory>"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatize",
        description="Convert a component directory into a reusable scaffolding template",
    )
    parser.add_argument("paths", nargs="*", type=Path, help="Source and output directories")
    parser.add_argument(
        "--starter",
        dest="starter",
        action="store_const",
        const=DEFAULT_STARTER,
        help=f"Write the default starter template ({DEFAULT_STARTER}) to the output directory",
    )
    for key in available_starters():
        parser.add_argument(
            f"--starter-{key}",
            dest="starter",
            action="store_const",
            const=key,
            help=f"Write the '{key}' starter template to the output directory",
        )
    parser.add_argument(
        "--expand",
        metavar="NAME",
        help="Treat the source as a template tree and expand it for component NAME",
    )
    parser.add_argument("--name", help="Use this component name instead of searching for one")
    parser.add_argument(
        "--suffix",
        default=DEFAULT_TEMPLATE_SUFFIX,
        help="Marker appended to generated template file names",
    )
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in PlaceholderScheme],
        default=PlaceholderScheme.HANDLEBARS.value,
        help="Placeholder spelling written into the templates",
    )
    parser.add_argument(
        "--extension",
        dest="extensions",
        metavar="EXT",
        action="append",
        help="Source extension recognised for the component file (repeatable)",
    )
    parser.add_argument(
        "--missing",
        choices=["keep", "empty", "error"],
        default="keep",
        help="Behaviour when a placeholder cannot be resolved while expanding",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing starter files instead of failing",
    )
    parser.add_argument("--report", action="store_true", help="Print a JSON report of the conversion")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _handle_starter(args: argparse.Namespace) -> int:
    (output,) = args.paths
    project_path = StarterScaffolder(args.starter).create(output, force=args.force)
    print(f"Starter template '{args.starter}' created at {project_path}")
    return 0


def _handle_expand(args: argparse.Namespace) -> int:
    source, output = args.paths
    name = normalize_component_name(args.expand)
    renderer = TemplateRenderer()
    written = renderer.render_directory(
        source,
        output,
        {"name": name},
        suffix=args.suffix,
        missing=args.missing,
    )
    print(f"Expanded {len(written)} files for {name} into {output}")
    return 0


def _handle_convert(args: argparse.Namespace) -> int:
    source, output = args.paths
    config = ConverterConfig.from_options(
        suffix=args.suffix,
        extensions=args.extensions,
        scheme=args.scheme,
        name=args.name,
    )
    report = TemplateConverter(config).convert(source, output)
    if args.report:
        sys.stdout.write(report.model_dump_json(indent=2))
        sys.stdout.write("\n")
    else:
        print(f"Template for {report.component_name} created at {report.output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits 2 on bad options and 0 after --help
        return 0 if exc.code in (0, None) else 1
    _configure_logging(args.verbose)

    expected = 1 if args.starter else 2
    if len(args.paths) != expected:
        print(USAGE)
        return 1

    try:
        if args.starter:
            return _handle_starter(args)
        if args.expand:
            return _handle_expand(args)
        return _handle_convert(args)
    except (TemplatizeError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception:
        LOGGER.debug("unexpected failure", exc_info=True)
        print("An unknown error occurred", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
