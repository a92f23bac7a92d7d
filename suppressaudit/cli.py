"""
Command-line interface for the suppression audit.

Scans a directory for ESLint suppression directives and writes the
rule count and file detail CSV reports.
"""

import argparse
import sys
import os
from typing import Any, Dict, Optional, List

from suppressaudit import __version__
from suppressaudit.config import (
    AuditConfig, load_config, find_config, create_default_config, CONFIG_FILE_NAMES
)
from suppressaudit.core.engine import AuditEngine, ON_ERROR_CHOICES
from suppressaudit.formatters import get_formatter, write_reports
from suppressaudit.utils import configure_logging, log_level


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="suppressaudit",
        description="Report which ESLint rules are suppressed in a source tree, and where.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  suppressaudit scan ./src                       # Reports in the current directory
  suppressaudit scan --dir ./src -o reports      # Reports in ./reports
  suppressaudit scan . --ext .tsx --ext .ts      # Only TypeScript sources
  suppressaudit scan . --on-error skip           # Skip unreadable files
  suppressaudit scan . --format json             # JSON summary on stdout
  suppressaudit init                             # Create config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Scan command
    scan_parser = subparsers.add_parser("scan", help="Scan a directory for suppressed rules")
    scan_parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to analyze (default: current directory)",
    )
    scan_parser.add_argument(
        "-d", "--dir",
        dest="dir",
        help="Directory to analyze (overrides the positional argument)",
    )
    scan_parser.add_argument(
        "-o", "--output-dir",
        help="Directory where the CSV reports are saved (default: current directory)",
    )
    scan_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    scan_parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        help="File extension to scan, e.g. .ts (can be specified multiple times)",
    )
    scan_parser.add_argument(
        "--exclude-dir",
        action="append",
        dest="exclude_dirs",
        help="Directory name to skip (can be specified multiple times)",
    )
    scan_parser.add_argument(
        "--on-error",
        choices=list(ON_ERROR_CHOICES),
        help="What to do with unreadable files: abort the run or skip them (default: abort)",
    )
    scan_parser.add_argument(
        "--encoding",
        help="Text encoding of the source files (default: utf-8)",
    )
    scan_parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Visit directory entries in filesystem order instead of by name",
    )
    scan_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Summary format (default: text)",
    )
    scan_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    scan_parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )
    scan_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def build_config(args: argparse.Namespace, target: str) -> AuditConfig:
    """Load the configuration file and apply command-line overrides."""
    data: Dict[str, Any] = {}

    config_path = args.config or find_config(target)
    if config_path:
        data = load_config(config_path)

    config = AuditConfig.from_dict(data)

    # Apply command-line overrides
    overrides: Dict[str, Any] = {}
    if args.extensions:
        overrides["extensions"] = args.extensions
    if args.exclude_dirs:
        overrides["exclude_dirs"] = args.exclude_dirs
    if args.on_error:
        overrides["on_error"] = args.on_error
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.no_sort:
        overrides["sort_entries"] = False
    if args.output_dir:
        overrides["output_dir"] = args.output_dir

    output = config.to_dict()["output"]
    if args.format:
        output["format"] = args.format
    if args.verbose:
        output["verbose"] = True
    if args.no_color:
        output["color"] = False

    merged = config.to_dict()
    merged.update(overrides)
    merged["output"] = output
    return AuditConfig.from_dict(merged)


def cmd_scan(args: argparse.Namespace) -> int:
    """Execute the scan command."""
    target = args.dir or args.directory or "."

    configure_logging(log_level(args.verbose, args.quiet))

    config = build_config(args, target)
    engine = AuditEngine(config.to_engine_config())

    if args.verbose and config.output.format == "text":
        print(f"Scanning {os.path.abspath(target)}...")

    result = engine.run(target)
    paths = write_reports(result, config.output_dir)

    formatter = get_formatter(config.output.format)

    if hasattr(formatter, 'verbose'):
        formatter.verbose = config.output.verbose
    if hasattr(formatter, 'use_color'):
        formatter.use_color = formatter.use_color and config.output.color

    print(formatter.format_result(result, paths), end="" if config.output.format == "text" else "\n")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = CONFIG_FILE_NAMES[0]

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    content = create_default_config()

    with open(config_file, 'w', encoding="utf-8") as f:
        f.write(content)

    print(f"Created configuration file: {config_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "scan":
            return cmd_scan(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nScan interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
