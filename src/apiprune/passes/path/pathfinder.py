"""Dependency chains through the identity graph.

The graph maps each identity (cpp name) to the identities its nodes
depend on, as built by :func:`apiprune.passes.graph.build_graph`.
Intrinsics have no entry of their own, so a chain can end at one but
never pass through it.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator


def find_all_paths(
    graph: dict[str, list[str]],
    source: str,
    target: str,
    max_depth: int = 10,
) -> list[list[str]]:
    """All simple dependency chains from ``source`` to ``target``.

    Chains are found breadth-first, so shorter ones come first.  A chain
    never revisits an identity, which keeps self-referential and mutually
    recursive types from looping.  ``max_depth`` bounds the number of
    identities in a chain, both ends included.
    """
    if source == target:
        return [[source]]

    chains: list[list[str]] = []
    pending: deque[tuple[str, ...]] = deque([(source,)])

    while pending:
        for chain in _extend(pending.popleft(), graph, max_depth):
            if chain[-1] == target:
                chains.append(list(chain))
            else:
                pending.append(chain)

    return chains


def _extend(
    chain: tuple[str, ...],
    graph: dict[str, list[str]],
    max_depth: int,
) -> Iterator[tuple[str, ...]]:
    """One-edge extensions of ``chain`` that stay simple and within depth."""
    if len(chain) >= max_depth:
        return
    for dep in graph.get(chain[-1], []):
        if dep not in chain:
            yield chain + (dep,)
