"""
Entry point for sshc.

Usage:
    python -m sshc ~/.ssh/config
    python -m sshc --check /etc/ssh/ssh_config
    python -m sshc --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.loader import ConfigLoader, read_text
from .config.parser import parse_ssh_config, serialize_ssh_config
from .config.schema import ConfigurationOptions, File
from .const import APP_NAME, DEFAULT_CONFIG_PATH
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def validate_config(loader: ConfigLoader, file: File, strict: bool = False) -> int:
    """Print malformed-line warnings and a summary."""
    warnings = loader.validate(file)

    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    counts = file.count_kinds()
    print(f"\nConfiguration summary for {file.path}:")
    print(f"  Lines: {len(file)}")
    print(f"  Entries: {counts['entry']}")
    print(f"  Comments: {counts['comment']}")
    print(f"  Empty lines: {counts['empty']}")
    print(f"  Malformed lines: {counts['malformed']}")

    if warnings and strict:
        return 1
    return 0


def check_round_trip(path: Path) -> int:
    """Check that the file prints back byte for byte."""
    text = read_text(path)
    output = serialize_ssh_config(parse_ssh_config(text, path))

    if output != text:
        print(f"Round trip mismatch: {path}", file=sys.stderr)
        return 1

    print(f"Round trip OK: {path}")
    return 0


def dump_config(file: File) -> int:
    """Print one line per parsed line with its classification."""
    for number, line in enumerate(file, start=1):
        expression = line.expression
        if isinstance(expression, ConfigurationOptions):
            details = f"{expression.keyword} {expression.separator!r} {expression.values!r}"
        else:
            details = repr(str(expression))
        print(f"{number:5}  {line.kind:9}  {details}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Lossless ssh_config(5) reader and writer",
    )

    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to ssh_config file (default: {DEFAULT_CONFIG_PATH})",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--validate",
        action="store_true",
        help="Report malformed lines and a summary (default)",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Verify that the file prints back unchanged",
    )
    mode.add_argument(
        "--dump",
        action="store_true",
        help="Print the parsed structure line by line",
    )
    mode.add_argument(
        "--print",
        action="store_true",
        dest="print_",
        help="Print the re-serialized file to stdout",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="With --validate, exit with status 1 if any line is malformed",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    config_path = Path(args.config).expanduser()
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}", file=sys.stderr)
        return 1

    loader = ConfigLoader()

    try:
        if args.check:
            return check_round_trip(config_path)

        file = loader.load_file(config_path)
        logger.info(f"Loaded {config_path} ({len(file)} lines)")

        if args.dump:
            return dump_config(file)
        if args.print_:
            sys.stdout.write(serialize_ssh_config(file))
            return 0
        return validate_config(loader, file, strict=args.strict)

    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {config_path}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
