"""Reachability pruning pass – keep only APIs reachable from the allowlist.

Public API
----------
- filter_apis_by_following_edges_from_allowlist(apis, allowlist) -> list[Api]
- prune(apis, allowlist) -> PruneResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from apiprune.allowlist import AllowlistOracle
from apiprune.model import Api, QualifiedName
from apiprune.passes.gc.collector import (
    allowlist_roots,
    collect_from_roots,
    filter_apis_by_following_edges_from_allowlist,
)

__all__ = [
    "PruneResult",
    "allowlist_roots",
    "collect_from_roots",
    "filter_apis_by_following_edges_from_allowlist",
    "prune",
]


@dataclass
class PruneResult:
    """Outcome of one pruning run."""

    kept: list[Api[Any]] = field(default_factory=list)
    dropped: list[QualifiedName] = field(default_factory=list)
    roots: list[QualifiedName] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        kept_names = _unique(api.typename() for api in self.kept)
        return {
            "roots": [r.to_cpp_name() for r in self.roots],
            "kept": [
                {
                    "kind": api.kind.value,
                    "name": api.name.to_cpp_name(),
                    "identity": api.typename().to_cpp_name(),
                }
                for api in self.kept
            ],
            "dropped": [d.to_cpp_name() for d in self.dropped],
            "kept_count": len(self.kept),
            "kept_identity_count": len(kept_names),
            "dropped_count": len(self.dropped),
        }


def prune(apis: list[Api[Any]], allowlist: AllowlistOracle) -> PruneResult:
    """Run the filter and record which roots seeded it and what was dropped.

    Like the filter, this drains ``apis``.
    """
    seen = _unique(api.typename() for api in apis)
    seeds = allowlist_roots(apis, allowlist)

    kept = collect_from_roots(apis, seeds)
    roots = _unique(seeds)

    kept_names = {api.typename() for api in kept}
    dropped = [name for name in seen if name not in kept_names]
    return PruneResult(kept=kept, dropped=dropped, roots=roots)


def _unique(names) -> list[QualifiedName]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(names))
