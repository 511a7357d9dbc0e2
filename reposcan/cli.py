"""Command-line entry point: scan directories for Git repositories and report status."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from . import logger, stdout
from .config import (
    Config,
    OutputFormat,
    create_only_filter,
    create_or_read_configs,
    create_output_format,
    default_paths,
)
from .generator import generate_scan_report
from .reportfile import write_scan_report
from .validation import validate

VERSION = "v1.3.7"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def build_parser(configs: Config) -> argparse.ArgumentParser:
    """Argument parser whose defaults come from the loaded configuration."""
    parser = argparse.ArgumentParser(
        prog="reposcan",
        description=(
            "RepoScan scans one or more root directories for Git repositories "
            "and reports uncommitted, ahead/behind status."
        ),
        epilog="Commands:\n  version    Print the version number of reposcan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--root",
        action="append",
        default=None,
        help="Root directory to scan (repeatable). Defaults to $HOME if unset in config.",
    )
    parser.add_argument(
        "-d",
        "--dirIgnore",
        dest="dir_ignore",
        action="append",
        default=None,
        help="Glob patterns to ignore during scan (repeatable)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=str(configs.output.type),
        help="Output format: json|interactive|none",
    )
    parser.add_argument(
        "-f",
        "--filter",
        default=str(configs.only),
        help="Repository filter: all|dirty|uncommitted|unpushed|unpulled",
    )
    parser.add_argument(
        "--json-output-path",
        dest="json_output_path",
        default=configs.output.json_path,
        help="Write scan report JSON files to this directory (optional)",
    )
    parser.add_argument(
        "-w",
        "--max-workers",
        dest="max_workers",
        type=int,
        default=configs.max_workers,
        help="Number of concurrent git checks",
    )
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        type=_parse_bool,
        default=configs.debug,
        help="Enable/Disable debug mode",
    )
    parser.add_argument("command", nargs="*", help=argparse.SUPPRESS)
    parser.set_defaults(_config_roots=list(configs.roots))
    return parser


def read_flags(args: argparse.Namespace, configs: Config) -> Config:
    """Return configs with values from the parsed flags applied.

    Raises ValueError for an invalid output format or filter.
    """
    if args.root is not None:
        roots = list(args.root)
    else:
        roots = list(getattr(args, "_config_roots", configs.roots))

    dir_ignore = list(args.dir_ignore) if args.dir_ignore else list(configs.dir_ignore)
    output_format = create_output_format(args.output)
    only = create_only_filter(args.filter)

    output = replace(configs.output, type=output_format, json_path=args.json_output_path)
    return replace(
        configs,
        roots=roots,
        dir_ignore=dir_ignore,
        only=only,
        output=output,
        max_workers=args.max_workers,
        debug=bool(args.debug),
    )


def run(configs: Config) -> int:
    """Scan, render, optionally save the report; return 1 if any repo has uncommitted files."""
    report = generate_scan_report(configs)

    if configs.output.type == OutputFormat.JSON:
        stdout.render_scan_report_as_json(report)
    elif configs.output.type == OutputFormat.INTERACTIVE:
        stdout.render_scan_report_as_table(report)

    json_path = configs.output.json_path.strip()
    if json_path:
        write_scan_report(report, json_path)

    if any(rs.uncommitted_files for rs in report.repo_states):
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the reposcan command and return its exit status."""
    paths = default_paths()
    try:
        configs = create_or_read_configs(paths.config_file_path)
    except OSError as exc:
        print(exc)
        return 1

    result = validate(configs)
    if result.has_errors():
        result.print_issues()
        return 1

    parser = build_parser(configs)
    args = parser.parse_args(argv)

    if args.command:
        if args.command[0] == "version":
            print(f"reposcan {VERSION}")
            return 0
        parser.error(f'unknown command "{args.command[0]}" for "reposcan"')

    try:
        configs = read_flags(args, configs)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = validate(configs)
    if result.has_errors():
        result.print_issues()
        print("Error: invalid configuration after flags", file=sys.stderr)
        return 1

    logger.init_logger(configs.debug, paths.log_file_dir)
    result.log()

    try:
        return run(configs)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())