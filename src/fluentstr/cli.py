"""
fluentstr Command-Line Interface.

Applies StringWrapper operations to text from the command line.

Usage:
    fluentstr transform "  Hello, World! " trim slugify
    echo "foo_bar" | fluentstr transform - camelize
    fluentstr similarity World Word
    fluentstr explode "a,b,c" , --limit 2
    fluentstr between "text[inner]more" "[" "]"
    fluentstr info
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from fluentstr import __version__
from fluentstr.utils.errors import FluentStrError, UnknownOperationError
from fluentstr.wrapper import StringWrapper

logger = logging.getLogger("fluentstr")

# Zero-argument operations accepted by ``transform``
TRANSFORMS = (
    "trim",
    "left_trim",
    "right_trim",
    "slugify",
    "camelize",
    "underscored",
    "dasherize",
    "to_upper_case",
    "to_lower_case",
    "upper_case_first",
    "lower_case_first",
    "reverse",
    "to_ascii",
    "encode",
)


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RED = "\033[91m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.CYAN = ""
        cls.BOLD = ""
        cls.RED = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="fluentstr",
        description="fluentstr - Fluent string operations from the command line",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Transform command
    transform_parser = subparsers.add_parser(
        "transform",
        aliases=["t"],
        help="Apply operations to text in order",
    )
    transform_parser.add_argument(
        "text",
        help="Input text, or - to read standard input",
    )
    transform_parser.add_argument(
        "operations",
        nargs="+",
        metavar="OP",
        help="Operation names, e.g. trim slugify",
    )

    # Similarity command
    similarity_parser = subparsers.add_parser(
        "similarity",
        aliases=["sim"],
        help="Compare two strings",
    )
    similarity_parser.add_argument("first", help="First string")
    similarity_parser.add_argument("second", help="Second string")
    similarity_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # Explode command
    explode_parser = subparsers.add_parser(
        "explode",
        help="Split text on a literal delimiter",
    )
    explode_parser.add_argument("text", help="Input text, or - to read standard input")
    explode_parser.add_argument("delimiter", help="Delimiter to split on")
    explode_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of fragments (negative drops from the end)",
    )
    explode_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as a JSON array",
    )

    # Between command
    between_parser = subparsers.add_parser(
        "between",
        help="Extract the text between two markers",
    )
    between_parser.add_argument("text", help="Input text, or - to read standard input")
    between_parser.add_argument("left", help="Left marker")
    between_parser.add_argument("right", help="Right marker")

    # Info command
    subparsers.add_parser(
        "info",
        help="Show version and available operations",
    )

    return parser


def _read_text(value: str) -> str:
    """Return value, or standard input without its trailing newline for '-'."""
    if value == "-":
        return sys.stdin.read().rstrip("\n")
    return value


def apply_operations(value: str, operations: list[str]) -> StringWrapper:
    """
    Run zero-argument operations on value, in order.

    Raises:
        UnknownOperationError: If an operation is not in TRANSFORMS
    """
    wrapper = StringWrapper(value)
    for name in operations:
        if name not in TRANSFORMS:
            raise UnknownOperationError(
                f"unknown operation '{name}'", name, available=list(TRANSFORMS)
            )
        logger.debug("Applying %s", name)
        getattr(wrapper.inplace, name)()
    return wrapper


def cmd_transform(args: argparse.Namespace) -> int:
    """Handle the transform command."""
    result = apply_operations(_read_text(args.text), args.operations)
    print(result.get())
    return 0


def cmd_similarity(args: argparse.Namespace) -> int:
    """Handle the similarity command."""
    common, percent = StringWrapper(args.first).similarity(args.second)
    if args.json:
        print(json.dumps({"common": common, "percent": percent}))
    else:
        print(f"{common} {percent:.2f}")
    return 0


def cmd_explode(args: argparse.Namespace) -> int:
    """Handle the explode command."""
    parts = StringWrapper(_read_text(args.text)).explode(args.delimiter, args.limit)
    if args.json:
        print(json.dumps(parts.get()))
    else:
        for part in parts:
            print(part)
    return 0


def cmd_between(args: argparse.Namespace) -> int:
    """Handle the between command."""
    print(StringWrapper(_read_text(args.text)).between(args.left, args.right).get())
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - show version and operations."""
    operations = "\n".join(f"  {name}" for name in TRANSFORMS)
    print(f"""{Colors.BOLD}fluentstr{Colors.RESET} {__version__}

{Colors.CYAN}Transform operations:{Colors.RESET}
{operations}

{Colors.CYAN}Commands:{Colors.RESET}
  fluentstr transform <text> <op>...     Apply operations in order
  fluentstr similarity <a> <b>           Common characters and percent
  fluentstr explode <text> <delimiter>   Split on a delimiter
  fluentstr between <text> <left> <right>
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "transform": cmd_transform,
        "t": cmd_transform,
        "similarity": cmd_similarity,
        "sim": cmd_similarity,
        "explode": cmd_explode,
        "between": cmd_between,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except FluentStrError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"{Colors.RED}error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
