"""Highlight pass – syntax-highlighted report of a pruning run.

Public API
----------
- render_report(result, *, style="monokai") -> dict
- highlight_decl(source, style="monokai") -> str
"""

from apiprune.passes.highlight.renderer import (  # noqa: F401
    render_report,
    highlight_decl,
)
