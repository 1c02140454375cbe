"""Command line entry point."""

import argparse
import logging
import sys

from kubehello.errors import HelloError
from kubehello.hello_kubernetes import add_hello_kubernetes_parser
from kubehello.hello_world import add_hello_world_parser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="kubectl-hello",
        description="Greet resources resolved from manifests or a cluster.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_hello_world_parser(subparsers)
    add_hello_kubernetes_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the selected command and map errors to exit codes."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return args.func(args)
    except HelloError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
