"""Shared test fixtures for apiprune tests."""

import json

import pytest

from apiprune.model import Api, ApiKind, QualifiedName


def qn(text):
    return QualifiedName.parse(text)


@pytest.fixture
def make_api():
    """Factory for Api nodes from plain strings.

    Usage:
        make_api("ns::A", deps=["ns::B"], kind=ApiKind.STRUCT)
    """
    def factory(name, deps=(), kind=ApiKind.TYPE, self_ty=None, decl=None, analysis=None):
        return Api(
            kind=kind,
            name=qn(name),
            deps=[qn(d) for d in deps],
            self_ty=qn(self_ty) if self_ty else None,
            decl=decl,
            analysis=analysis,
        )

    return factory


@pytest.fixture
def widget_batch(tmp_path):
    """A small batch file: Widget is allowlisted, Gadget is orphaned.

    ui::Widget (struct) -> ui::Size
    ui::Widget::resize (method) -> ui::Size, ui::Event
    ui::Widget.size (field of Widget) -> ui::Size
    ui::Gadget -> ui::Widget
    """
    data = {
        "apis": [
            {"kind": "struct", "name": "ui::Widget", "deps": ["ui::Size"],
             "decl": "struct Widget { Size size; };"},
            {"kind": "method", "name": "ui::Widget::resize", "self_ty": "ui::Widget",
             "deps": ["ui::Size", "ui::Event", "uint32_t"],
             "decl": "void resize(Size s, uint32_t flags);"},
            {"kind": "field", "name": "ui::Widget::size", "self_ty": "ui::Widget",
             "deps": ["ui::Size"]},
            {"kind": "struct", "name": "ui::Size", "deps": [],
             "analysis": {"pod": True}},
            {"kind": "struct", "name": "ui::Event", "deps": []},
            {"kind": "struct", "name": "ui::Gadget", "deps": ["ui::Widget"]},
        ]
    }
    path = tmp_path / "apis.json"
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def widget_allowlist(tmp_path):
    path = tmp_path / "allowlist.json"
    path.write_text(json.dumps({"generate": ["ui::Widget"]}))
    return path
