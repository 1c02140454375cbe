"""The hello-kubernetes command: greet and print resources.

Resources are named either by manifest files (``-f``/``-k``) or by positional
``TYPE/NAME`` arguments; the two forms are mutually exclusive. Every resolved
object is printed under a ``Hello <kind> <name>`` message, and the first
per-object failure becomes the command's error once all objects are visited.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, TYPE_CHECKING, Any

from kubehello.filename_options import FilenameOptions
from kubehello.input_mode import classify_input
from kubehello.kubeconfig import kubeconfig_path, load_kubeconfig
from kubehello.kubectl_store import KubectlObjectStore
from kubehello.load_config import load_config
from kubehello.namespace_scope import resolve_namespace_scope
from kubehello.object_store import SnapshotObjectStore
from kubehello.printers import make_printer_factory
from kubehello.reporter import Reporter
from kubehello.resolution_request import build_request
from kubehello.resolver import Resolver

if TYPE_CHECKING:
    from kubehello.object_store import ObjectStore

logger = logging.getLogger(__name__)

HELLO_KUBERNETES_LONG = """\
Print resource information.

This utility demonstrates how to build custom commands while keeping kubectl
conventions: working with resources, handling input and output streams, and
following the kubectl subcommand structure."""

HELLO_KUBERNETES_EXAMPLE = """\
Examples:
  # Print "Hello <kind of resource> <name of resource>"
  kubectl-hello hello-kubernetes -f file

  # Print "Hello <kind of resource> <name of resource> <creation time>"
  kubectl-hello hello-kubernetes type/name"""


def add_hello_kubernetes_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the hello-kubernetes subcommand and its flags."""
    parser = subparsers.add_parser(
        "hello-kubernetes",
        usage="%(prog)s (-f FILENAME | TYPE NAME)",
        help="Print resource information",
        description=HELLO_KUBERNETES_LONG,
        epilog=HELLO_KUBERNETES_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="TYPE[/NAME]",
        help="Resources to resolve: type/name, a bare type, or TYPE NAME...",
    )
    usage = "identifying the resource to retrieve and print its information"
    parser.add_argument(
        "-f",
        "--filename",
        action="append",
        default=[],
        help=f"Filename, directory, or URL to files {usage}",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="Process the directory used in -f, --filename recursively",
    )
    parser.add_argument(
        "-k",
        "--kustomize",
        default="",
        help=f"Process the kustomization directory {usage}",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        default=None,
        help="If present, the namespace scope for this request",
    )
    parser.add_argument(
        "-A",
        "--all-namespaces",
        action="store_true",
        help="List the requested objects across all namespaces",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output format: yaml, json or name (default from config: yaml)",
    )
    parser.add_argument(
        "--kubeconfig",
        default=None,
        help="Path to the kubeconfig file to use",
    )
    parser.add_argument(
        "--snapshot",
        action="append",
        default=[],
        help="Resolve TYPE/NAME arguments against manifest files instead of kubectl",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to configuration file",
    )
    parser.set_defaults(func=run_hello_kubernetes)


def _make_store(args: argparse.Namespace, config: dict[str, Any]) -> ObjectStore:
    if args.snapshot:
        return SnapshotObjectStore.from_files(args.snapshot)
    return KubectlObjectStore(
        binary=config["kubectl"]["binary"], kubeconfig=args.kubeconfig
    )


def run_hello_kubernetes(
    args: argparse.Namespace,
    out: IO[str] | None = None,
    store: ObjectStore | None = None,
) -> int:
    """Resolve the named resources and print each one."""
    config = load_config(args.config)
    options = FilenameOptions(
        filenames=tuple(args.filename),
        recursive=args.recursive,
        kustomize=args.kustomize,
    )
    input_mode = classify_input(options, list(args.args))

    kubeconfig: dict[str, Any] = {}
    if not args.namespace:
        kubeconfig = load_kubeconfig(kubeconfig_path(args.kubeconfig))
    scope = resolve_namespace_scope(
        args.namespace,
        all_namespaces=args.all_namespaces,
        kubeconfig=kubeconfig,
        fallback=config["default_namespace"],
    )
    request = build_request(input_mode, scope)
    logger.debug("Resolving %s", request)

    printer_factory = make_printer_factory(args.output or config["output"])
    reporter = Reporter(printer_factory, out or sys.stdout, config["image_paths"])
    resolver = Resolver(
        store or _make_store(args, config),
        kustomize_binary=config["kustomize"]["binary"],
    )

    summary = resolver.visit(request, reporter.report)
    logger.debug(
        "Visited %d items, reported %d, %d errors",
        summary.visited,
        reporter.reported,
        len(summary.errors),
    )
    summary.raise_for_error()
    return 0
