from __future__ import annotations
import pytest
from tableui.column import Column
from tableui.errors import InvalidRenderer, TableError

def test_set_renderer_rejects_non_callable():
    col = Column("name")
    with pytest.raises(InvalidRenderer) as ei:
        col.set_renderer("<b>name</b>")
    assert str(ei.value) == "callable_not_provided"
    assert isinstance(ei.value, TableError)
    assert not col.has_renderer()

def test_set_renderer_with_function():
    col = Column("name")
    col.set_renderer(lambda row: f"<em>{row['name']}</em>")
    assert col.has_renderer()
    assert col.render({"name": "Terraria"}) == "<em>Terraria</em>"

def test_render_without_renderer_gives_nothing():
    assert Column("name").render({"name": "x"}) is None

def test_renderer_result_is_stringified():
    col = Column("n", renderer=lambda row: row["n"] * 2)
    assert col.render({"n": 21}) == "42"
    col.set_renderer(lambda row: None)
    assert col.render({"n": 1}) == ""
