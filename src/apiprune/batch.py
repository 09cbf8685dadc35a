"""Reading and writing API batches as JSON.

A batch file holds ``{"apis": [...]}`` (or a bare list) where each entry
looks like::

    {"kind": "method", "name": "ns::A::get", "self_ty": "ns::A",
     "deps": ["ns::B"], "decl": "B get() const;", "analysis": {...}}

Only ``name`` is required.  ``analysis`` is carried through untouched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from apiprune.errors import BatchFormatError, BatchNotFoundError
from apiprune.model import Api, ApiKind, QualifiedName

logger = logging.getLogger(__name__)


def load_apis(path: str) -> list[Api[Any]]:
    """Load a batch file into a list of :class:`Api` nodes."""
    p = Path(path)
    if not p.exists():
        raise BatchNotFoundError(path)

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BatchFormatError(f"{path}: cannot read batch file: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BatchFormatError(f"{path}: invalid JSON: {exc}") from exc

    apis = apis_from_data(data, source=path)
    logger.debug("loaded %d apis from %s", len(apis), p)
    return apis


def apis_from_data(data: Any, source: str = "<batch>") -> list[Api[Any]]:
    if isinstance(data, dict):
        data = data.get("apis")
    if not isinstance(data, list):
        raise BatchFormatError(f"{source}: expected a list of apis or {{\"apis\": [...]}}")
    return [_api_from_entry(entry, i, source) for i, entry in enumerate(data)]


def _api_from_entry(entry: Any, index: int, source: str) -> Api[Any]:
    where = f"{source}: apis[{index}]"
    if not isinstance(entry, dict):
        raise BatchFormatError(f"{where}: expected an object")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise BatchFormatError(f"{where}: missing 'name'")

    try:
        kind = ApiKind(entry.get("kind", "type"))
    except ValueError:
        raise BatchFormatError(f"{where}: unknown kind {entry.get('kind')!r}") from None

    deps = entry.get("deps", [])
    if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
        raise BatchFormatError(f"{where}: 'deps' must be a list of strings")

    self_ty = entry.get("self_ty")
    if self_ty is not None and not isinstance(self_ty, str):
        raise BatchFormatError(f"{where}: 'self_ty' must be a string")

    decl = entry.get("decl")
    if decl is not None and not isinstance(decl, str):
        raise BatchFormatError(f"{where}: 'decl' must be a string")

    return Api(
        kind=kind,
        name=QualifiedName.parse(name),
        deps=[QualifiedName.parse(d) for d in deps],
        self_ty=QualifiedName.parse(self_ty) if self_ty else None,
        analysis=entry.get("analysis"),
        decl=decl,
    )


def dump_apis(apis: list[Api[Any]]) -> dict[str, Any]:
    """Render nodes in the batch file form."""
    out = []
    for api in apis:
        entry: dict[str, Any] = {
            "kind": api.kind.value,
            "name": api.name.to_cpp_name(),
            "deps": [d.to_cpp_name() for d in api.deps],
        }
        if api.self_ty is not None:
            entry["self_ty"] = api.self_ty.to_cpp_name()
        if api.decl is not None:
            entry["decl"] = api.decl
        if api.analysis is not None:
            entry["analysis"] = api.analysis
        out.append(entry)
    return {"apis": out}
