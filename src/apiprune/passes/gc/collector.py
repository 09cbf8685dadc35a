"""Mark-and-sweep collection of discovered APIs.

Discovery hands us every declaration it could see.  Two kinds of
earlier decision mean some of them should not reach code generation:

1. A struct may have been downgraded to opaque (non-POD).  Its fields are
   then dropped from its dependency edges, and the field types, often
   ones we cannot convert, should go with them.
2. Some APIs are blocked outright.  Removing a method removes the edges
   to its parameter types, which may leave those types orphaned.

Only the edges encode these decisions.  Walking them from the allowlist
and keeping whatever we reach makes the output dependency-closed.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TypeVar

from apiprune.allowlist import AllowlistOracle
from apiprune.model import Api, QualifiedName

logger = logging.getLogger(__name__)

T = TypeVar("T")


def allowlist_roots(
    apis: list[Api[T]],
    allowlist: AllowlistOracle,
) -> list[QualifiedName]:
    """Identities of every node whose allowlist name is on the allowlist.

    One entry per matching node, so an identity can appear more than once.
    """
    return [
        api.typename()
        for api in apis
        if allowlist.is_on_allowlist(api.typename_for_allowlist().to_cpp_name())
    ]


def filter_apis_by_following_edges_from_allowlist(
    apis: list[Api[T]],
    allowlist: AllowlistOracle,
) -> list[Api[T]]:
    """Keep only the APIs reachable from the allowlist.

    See :func:`collect_from_roots`; the allowlist is asked about each
    node exactly once.
    """
    return collect_from_roots(apis, allowlist_roots(apis, allowlist))


def collect_from_roots(
    apis: list[Api[T]],
    roots: list[QualifiedName],
) -> list[Api[T]]:
    """Keep only the APIs reachable from ``roots``.

    ``apis`` is drained: on return the caller's list is empty and the
    surviving nodes (the same objects, unmodified) are in the result.
    Groups of nodes sharing an identity are kept or dropped together, in
    their original order.  Edges to identities with no node (intrinsics
    such as ``uint32_t``) are ignored.
    """
    todos: deque[QualifiedName] = deque(roots)
    seed_count = len(todos)

    by_typename: dict[QualifiedName, list[Api[T]]] = {}
    for api in apis:
        by_typename.setdefault(api.typename(), []).append(api)
    total = len(apis)
    apis.clear()

    done: set[QualifiedName] = set()
    output: list[Api[T]] = []
    while todos:
        todo = todos.popleft()
        if todo in done:
            continue
        these_apis = by_typename.pop(todo, None)
        if these_apis is not None:
            for api in these_apis:
                todos.extend(api.deps)
            output.extend(these_apis)
        # otherwise, probably an intrinsic
        done.add(todo)

    logger.debug(
        "gc: %d seeds, kept %d of %d apis (%d identities unreached)",
        seed_count,
        len(output),
        total,
        len(by_typename),
    )
    return output
