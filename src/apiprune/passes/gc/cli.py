"""CLI subcommand registration for the gc pass."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``gc`` subcommand and its sub-actions."""
    gc = subparsers.add_parser("gc", help="Reachability pruning")
    gc_sub = gc.add_subparsers(dest="action")

    # --- gc filter ---
    flt = gc_sub.add_parser(
        "filter", help="Keep only APIs reachable from the allowlist"
    )
    flt.add_argument("batch", help="Path to the API batch JSON file")
    flt.add_argument(
        "--allowlist",
        required=True,
        help="Path to the allowlist (.json object or .txt name list)",
    )
    flt.add_argument(
        "--output",
        default=None,
        help="Write the surviving APIs to this batch JSON file",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate gc action."""
    from apiprune.allowlist import load_allowlist
    from apiprune.batch import dump_apis, load_apis
    from apiprune.passes.gc import prune

    if args.action == "filter":
        apis = load_apis(args.batch)
        allowlist = load_allowlist(args.allowlist)
        result = prune(apis, allowlist)
        out = result.to_dict()
        if args.output:
            Path(args.output).write_text(
                json.dumps(dump_apis(result.kept), indent=2) + "\n"
            )
            out["output"] = str(Path(args.output).resolve())
        return out

    return {"error": f"Unknown gc action: {args.action}"}
