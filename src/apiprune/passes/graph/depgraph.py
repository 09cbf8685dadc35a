"""Identity-level dependency graph of an API batch."""

from __future__ import annotations

from typing import Any

from apiprune.model import Api


def build_graph(apis: list[Api[Any]]) -> dict[str, list[str]]:
    """Map each identity to the identities it depends on.

    Edges of all nodes sharing an identity are merged.  Identities that
    have no node of their own (intrinsics) appear only as targets.
    """
    graph: dict[str, set[str]] = {}
    for api in apis:
        targets = graph.setdefault(api.typename().to_cpp_name(), set())
        targets.update(dep.to_cpp_name() for dep in api.deps)
    return {name: sorted(targets) for name, targets in graph.items()}


def count_edges(graph: dict[str, list[str]]) -> int:
    return sum(len(v) for v in graph.values())
