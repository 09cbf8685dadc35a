"""Discovered API declarations and the names they are keyed by.

An :class:`Api` is one candidate declaration produced by the discovery
stage.  It carries two independent name projections:

- ``typename()`` is the identity used to group nodes and resolve
  dependency edges.  Several nodes may share one identity (a struct and
  its fields, or a type and a free function of the same name).
- ``typename_for_allowlist()`` is the name checked against the
  allowlist, which is written in foreign-qualified terms.  A method is
  allowlisted through the class that owns it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

CPP_SEPARATOR = "::"


@dataclass(frozen=True, order=True)
class QualifiedName:
    """A namespaced declaration name, e.g. ``std::chrono::duration``."""

    namespace: tuple[str, ...]
    name: str

    @classmethod
    def parse(cls, text: str) -> QualifiedName:
        """Split a ``::``-separated name. A leading ``::`` is ignored."""
        segments = text.strip().lstrip(":").split(CPP_SEPARATOR)
        return cls(namespace=tuple(segments[:-1]), name=segments[-1])

    def to_cpp_name(self) -> str:
        return CPP_SEPARATOR.join((*self.namespace, self.name))

    def __str__(self) -> str:
        return self.to_cpp_name()


class ApiKind(str, enum.Enum):
    """Variant of a discovered declaration."""

    TYPE = "type"
    STRUCT = "struct"
    ENUM = "enum"
    TYPEDEF = "typedef"
    FUNCTION = "function"
    METHOD = "method"
    FIELD = "field"
    CONST = "const"
    SUBCLASS = "subclass"


# Members are allowlisted through the type that owns them.
MEMBER_KINDS = frozenset({ApiKind.METHOD, ApiKind.FIELD})


@dataclass(eq=False)
class Api(Generic[T]):
    """One discovered declaration.

    ``deps`` is authoritative: upstream analysis has already removed
    edges it decided not to follow.  ``analysis`` is an opaque payload
    that later passes may attach; nothing in this package reads it.
    """

    kind: ApiKind
    name: QualifiedName
    deps: list[QualifiedName] = field(default_factory=list)
    self_ty: QualifiedName | None = None
    analysis: T | None = None
    decl: str | None = None

    def typename(self) -> QualifiedName:
        """Identity used for grouping and edge resolution."""
        if self.kind is ApiKind.FIELD and self.self_ty is not None:
            return self.self_ty
        return self.name

    def typename_for_allowlist(self) -> QualifiedName:
        """Name looked up in the allowlist."""
        if self.kind in MEMBER_KINDS and self.self_ty is not None:
            return self.self_ty
        return self.name
