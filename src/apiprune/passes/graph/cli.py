"""CLI subcommand registration for the graph pass."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``graph`` subcommand and its sub-actions."""
    grp = subparsers.add_parser("graph", help="Dependency graph operations")
    grp_sub = grp.add_subparsers(dest="action")

    # --- graph show ---
    shw = grp_sub.add_parser("show", help="Dump the full identity graph")
    shw.add_argument("batch", help="Path to the API batch JSON file")

    # --- graph deps ---
    dp = grp_sub.add_parser("deps", help="List direct dependencies of an identity")
    dp.add_argument("identity", help="Qualified name, e.g. ns::Foo")
    dp.add_argument("batch", help="Path to the API batch JSON file")

    # --- graph dependents ---
    dt = grp_sub.add_parser(
        "dependents", help="List identities that depend on an identity"
    )
    dt.add_argument("identity", help="Qualified name, e.g. ns::Foo")
    dt.add_argument("batch", help="Path to the API batch JSON file")


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate graph action."""
    from apiprune.batch import load_apis
    from apiprune.passes.graph import show, deps, dependents

    apis = load_apis(args.batch)

    if args.action == "show":
        return show(apis)

    if args.action == "deps":
        return deps(apis, args.identity)

    if args.action == "dependents":
        return dependents(apis, args.identity)

    return {"error": f"Unknown graph action: {args.action}"}
