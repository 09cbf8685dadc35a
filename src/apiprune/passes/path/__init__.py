"""Dependency path pass – explain why an identity survived pruning.

Public API
----------
- explain(apis, allowlist, target, *, max_depth=10) -> dict
"""

from __future__ import annotations

from typing import Any

from apiprune.allowlist import AllowlistOracle
from apiprune.model import Api, QualifiedName
from apiprune.passes.gc import allowlist_roots, collect_from_roots
from apiprune.passes.graph import build_graph
from apiprune.passes.path.pathfinder import find_all_paths

__all__ = ["explain", "find_all_paths"]


def explain(
    apis: list[Api[Any]],
    allowlist: AllowlistOracle,
    target: str,
    *,
    max_depth: int = 10,
) -> dict[str, Any]:
    """Find the chains of dependency edges that pull ``target`` in.

    ``apis`` is left intact. Returns dict with keys: target, kept, roots,
    paths, path_count.
    """
    target = QualifiedName.parse(target).to_cpp_name()
    seeds = allowlist_roots(apis, allowlist)
    roots = list(dict.fromkeys(r.to_cpp_name() for r in seeds))

    kept = collect_from_roots(list(apis), seeds)
    is_kept = any(api.typename().to_cpp_name() == target for api in kept)

    paths: list[list[str]] = []
    if is_kept:
        graph = build_graph(apis)
        for root in roots:
            paths.extend(find_all_paths(graph, root, target, max_depth))

    return {
        "target": target,
        "kept": is_kept,
        "roots": roots,
        "paths": paths,
        "path_count": len(paths),
    }
