"""Allowlist oracle: which foreign-qualified names are roots of interest.

The reachability filter only needs ``is_on_allowlist``; any object with
that method can be passed in.  :class:`Allowlist` is the implementation
used by the CLI, loaded from a JSON or plain-text file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from apiprune.errors import AllowlistFormatError, AllowlistNotFoundError
from apiprune.model import CPP_SEPARATOR, QualifiedName

logger = logging.getLogger(__name__)

_LIST_KEYS = {
    "generate": "items",
    "generate_pod": "pod_items",
    "generate_ns": "namespaces",
}


class AllowlistOracle(Protocol):
    def is_on_allowlist(self, cpp_name: str) -> bool:
        ...


@dataclass(frozen=True)
class Allowlist:
    """Immutable set of allowlisted names.

    ``namespaces`` entries match every name nested inside them; ``allow_all``
    matches everything.  An empty ``Allowlist()`` matches nothing.
    """

    items: frozenset[str] = frozenset()
    pod_items: frozenset[str] = frozenset()
    namespaces: frozenset[str] = frozenset()
    allow_all: bool = False

    @classmethod
    def of(cls, *names: str) -> Allowlist:
        return cls(items=frozenset(_normalize(n) for n in names))

    def is_on_allowlist(self, cpp_name: str) -> bool:
        if self.allow_all:
            return True
        if cpp_name in self.items or cpp_name in self.pod_items:
            return True
        return any(
            cpp_name.startswith(ns + CPP_SEPARATOR) for ns in self.namespaces
        )

    def __len__(self) -> int:
        return len(self.items) + len(self.pod_items) + len(self.namespaces)


def load_allowlist(path: str) -> Allowlist:
    """Load an allowlist from a ``.json`` object or a ``.txt`` name list."""
    p = Path(path)
    if not p.exists():
        raise AllowlistNotFoundError(path)

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AllowlistFormatError(f"{path}: cannot read allowlist: {exc}") from exc

    if p.suffix == ".txt":
        names = _parse_text(text)
        logger.debug("loaded %d allowlist names from %s", len(names), p)
        return Allowlist(items=frozenset(names))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AllowlistFormatError(f"{path}: invalid JSON: {exc}") from exc

    allowlist = allowlist_from_dict(data, source=path)
    logger.debug("loaded allowlist with %d entries from %s", len(allowlist), p)
    return allowlist


def allowlist_from_dict(data: Any, source: str = "<allowlist>") -> Allowlist:
    """Build an :class:`Allowlist` from its JSON object form."""
    if not isinstance(data, dict):
        raise AllowlistFormatError(f"{source}: expected a JSON object")

    unknown = sorted(set(data) - set(_LIST_KEYS) - {"generate_all"})
    if unknown:
        raise AllowlistFormatError(
            f"{source}: unknown allowlist keys: {', '.join(unknown)}"
        )

    kwargs: dict[str, Any] = {}
    for key, attr in _LIST_KEYS.items():
        values = data.get(key, [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise AllowlistFormatError(f"{source}: '{key}' must be a list of strings")
        kwargs[attr] = frozenset(_normalize(v) for v in values)

    allow_all = data.get("generate_all", False)
    if not isinstance(allow_all, bool):
        raise AllowlistFormatError(f"{source}: 'generate_all' must be true or false")

    return Allowlist(allow_all=allow_all, **kwargs)


def _parse_text(text: str) -> list[str]:
    names = []
    for line in text.splitlines():
        stripped = line.split("#", 1)[0].strip()
        if stripped:
            names.append(_normalize(stripped))
    return names


def _normalize(name: str) -> str:
    """Spell an entry the way lookups are spelled (no leading ``::``)."""
    return QualifiedName.parse(name).to_cpp_name()
