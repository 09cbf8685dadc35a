"""Dependency graph pass – inspect the identity graph of an API batch.

Public API
----------
- show(apis) -> dict
- deps(apis, identity) -> dict
- dependents(apis, identity) -> dict
"""

from __future__ import annotations

from typing import Any

from apiprune.model import Api, QualifiedName
from apiprune.passes.graph.depgraph import build_graph, count_edges

__all__ = ["build_graph", "show", "deps", "dependents"]


def _normalize(identity: str) -> str:
    return QualifiedName.parse(identity).to_cpp_name()


def show(apis: list[Api[Any]]) -> dict[str, Any]:
    """Return the full dependency graph.

    Returns dict with keys: graph, node_count, edge_count.
    """
    graph = build_graph(apis)
    return {
        "graph": graph,
        "node_count": len(graph),
        "edge_count": count_edges(graph),
    }


def deps(apis: list[Api[Any]], identity: str) -> dict[str, Any]:
    """List direct dependencies of an identity.

    Returns dict with keys: identity, deps, count.
    """
    identity = _normalize(identity)
    dep_list = build_graph(apis).get(identity, [])
    return {
        "identity": identity,
        "deps": dep_list,
        "count": len(dep_list),
    }


def dependents(apis: list[Api[Any]], identity: str) -> dict[str, Any]:
    """List identities that depend directly on ``identity`` (reverse lookup).

    Returns dict with keys: identity, dependents, count.
    """
    identity = _normalize(identity)
    graph = build_graph(apis)
    dependent_list = sorted(
        source for source, targets in graph.items() if identity in targets
    )
    return {
        "identity": identity,
        "dependents": dependent_list,
        "count": len(dependent_list),
    }
