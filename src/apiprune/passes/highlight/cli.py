"""CLI subcommand registration for the highlight pass."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from pygments.styles import get_all_styles


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``highlight`` subcommand and its sub-actions."""
    hl = subparsers.add_parser(
        "highlight", help="Syntax-highlighted report of kept and dropped APIs"
    )
    hl_sub = hl.add_subparsers(dest="action")

    # --- highlight report ---
    rp = hl_sub.add_parser("report", help="Render an HTML pruning report")
    rp.add_argument("batch", help="Path to the API batch JSON file")
    rp.add_argument(
        "--allowlist",
        required=True,
        help="Path to the allowlist (.json object or .txt name list)",
    )
    rp.add_argument(
        "--style",
        default="monokai",
        choices=sorted(get_all_styles()),
        metavar="STYLE",
        help="Pygments style name (default: monokai)",
    )
    rp.add_argument(
        "--output",
        default=None,
        help="Write the HTML page here instead of embedding it in the JSON",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate highlight action."""
    from apiprune.allowlist import load_allowlist
    from apiprune.batch import load_apis
    from apiprune.passes.gc import prune
    from apiprune.passes.highlight import render_report

    if args.action == "report":
        result = prune(load_apis(args.batch), load_allowlist(args.allowlist))
        report = render_report(result, style=args.style)
        if args.output:
            out = Path(args.output)
            out.write_text(report.pop("html"))
            report["output"] = str(out.resolve())
        return report

    return {"error": f"Unknown highlight action: {args.action}"}
