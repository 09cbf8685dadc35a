"""CLI entry point for apiprune passes."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys

from apiprune.errors import ApiPruneError

PASS_DISPATCH = {
    "gc": "apiprune.passes.gc.cli",
    "graph": "apiprune.passes.graph.cli",
    "path": "apiprune.passes.path.cli",
    "highlight": "apiprune.passes.highlight.cli",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="apiprune",
        description="Reachability pruning for discovered binding APIs",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register pass subcommands ---
    for module_name in PASS_DISPATCH.values():
        importlib.import_module(module_name).register(sub)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    # Check if action was provided
    if not getattr(args, "action", None):
        # Re-parse to show pass-specific help
        parser.parse_args([args.command, "--help"])
        return 1

    cli_mod = importlib.import_module(PASS_DISPATCH[args.command])
    try:
        result = cli_mod.run(args)
    except ApiPruneError as exc:
        json.dump({"error": str(exc)}, sys.stdout, indent=2)
        print()
        return 2

    json.dump(result, sys.stdout, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
