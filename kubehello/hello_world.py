"""The hello-world command."""

import argparse
import sys
from typing import IO


def add_hello_world_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the hello-world subcommand."""
    parser = subparsers.add_parser(
        "hello-world",
        help="Print hello world",
        description="Print hello world.",
        epilog="Example:\n  # Print Hello World\n  kubectl-hello hello-world",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.set_defaults(func=run_hello_world)


def run_hello_world(args: argparse.Namespace, out: IO[str] | None = None) -> int:
    """Print the greeting."""
    print("Hello World", file=out or sys.stdout)
    return 0
