"""CLI subcommand registration for the path pass."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``path`` subcommand and its sub-actions."""
    pth = subparsers.add_parser("path", help="Dependency path operations")
    pth_sub = pth.add_subparsers(dest="action")

    # --- path why ---
    why = pth_sub.add_parser(
        "why", help="Show the dependency chains that keep an identity"
    )
    why.add_argument("identity", help="Qualified name, e.g. ns::Foo")
    why.add_argument("batch", help="Path to the API batch JSON file")
    why.add_argument(
        "--allowlist",
        required=True,
        help="Path to the allowlist (.json object or .txt name list)",
    )
    why.add_argument(
        "--max-depth",
        type=int,
        default=10,
        help="Maximum chain length (default: 10)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate path action."""
    from apiprune.allowlist import load_allowlist
    from apiprune.batch import load_apis
    from apiprune.passes.path import explain

    if args.action == "why":
        return explain(
            load_apis(args.batch),
            load_allowlist(args.allowlist),
            args.identity,
            max_depth=args.max_depth,
        )

    return {"error": f"Unknown path action: {args.action}"}
