"""Pygments-based HTML report of a pruning run."""

from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Any

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import CppLexer
from pygments.util import ClassNotFound

from apiprune.model import Api
from apiprune.passes.gc import PruneResult

REPORT_FORMAT_VERSION = "0.1.0"

# Section accent per declaration kind
KIND_COLORS = {
    "type": "#45B7D1",
    "struct": "#4ECDC4",
    "enum": "#96CEB4",
    "typedef": "#98D8C8",
    "function": "#FF6B6B",
    "method": "#DDA0DD",
    "field": "#FFEAA7",
    "const": "#F7DC6F",
    "subclass": "#BB8FCE",
}


def _formatter(style: str, **options: Any) -> HtmlFormatter:
    try:
        return HtmlFormatter(style=style, **options)
    except ClassNotFound as exc:
        raise ValueError(f"Unknown Pygments style '{style}': {exc}") from exc


def highlight_decl(source: str, style: str = "monokai") -> str:
    """Highlight a C++ declaration as an HTML fragment (no wrapping <div>)."""
    formatter = _formatter(style, nowrap=True)
    return _pygments_highlight(source, CppLexer(), formatter)


def render_report(result: PruneResult, *, style: str = "monokai") -> dict[str, Any]:
    """Render kept and dropped declarations as a standalone HTML page.

    Returns dict with keys: html, kept_count, dropped_count, style, generated_at.
    """
    css = _formatter(style).get_style_defs(".highlight")
    generated_at = (
        datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    )

    sections = [_render_api(api, style) for api in result.kept]
    dropped_items = "\n".join(
        f"    <li><code>{html.escape(name.to_cpp_name())}</code></li>"
        for name in result.dropped
    )
    roots = ", ".join(html.escape(r.to_cpp_name()) for r in result.roots) or "none"

    page = "\n".join([
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        "  <title>apiprune report</title>",
        f"  <style>\n{css}\n  </style>",
        "</head>",
        "<body>",
        f"  <p>Generated {generated_at} (format {REPORT_FORMAT_VERSION})</p>",
        f"  <p>Roots: {roots}</p>",
        f"  <h1>Kept ({len(result.kept)})</h1>",
        *sections,
        f"  <h1>Dropped ({len(result.dropped)})</h1>",
        "  <ul>",
        dropped_items,
        "  </ul>",
        "</body>",
        "</html>",
    ])

    return {
        "html": page,
        "kept_count": len(result.kept),
        "dropped_count": len(result.dropped),
        "style": style,
        "generated_at": generated_at,
    }


def _render_api(api: Api[Any], style: str) -> str:
    kind = api.kind.value
    color = KIND_COLORS.get(kind, "#85C1E9")
    title = html.escape(api.name.to_cpp_name())
    parts = [
        f'  <section style="border-left: 4px solid {color}; padding-left: 8px">',
        f"    <h2>{kind} <code>{title}</code></h2>",
    ]
    if api.decl:
        parts.append(
            f'    <pre class="highlight">{highlight_decl(api.decl, style)}</pre>'
        )
    parts.append("  </section>")
    return "\n".join(parts)
