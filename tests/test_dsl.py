from __future__ import annotations
import pytest
from tableui.dsl import validate_payload, table_from_payload
from tableui.errors import TableValidationError
from tableserver.context import RequestContext

PAYLOAD = {
    "title": "Scores",
    "columns": [{"field": "player"}, {"field": "score", "label": "Points"}],
    "rows": [{"player": "ann", "score": 3}, {"player": "bob", "score": 5}],
    "sortable": ["score"],
    "default_sort": "score",
}

def test_table_from_payload():
    table = table_from_payload(PAYLOAD)
    cols = table.get_columns()
    assert [c.label for c in cols] == ["Player", "Points"]
    assert [c.sortable for c in cols] == [False, True]
    html = table.render(RequestContext(path="/t", query={"direction": "desc"}))
    assert html.index("bob") < html.index("ann")

def test_payload_without_columns_uses_sortable_fields():
    table = table_from_payload({"rows": PAYLOAD["rows"], "sortable": ["player", "score"]})
    assert [c.field for c in table.get_columns()] == ["player", "score"]

@pytest.mark.parametrize("bad", [
    [],
    {"columns": [{"label": "no field"}]},
    {"columns": [{"field": "a"}, {"field": "a"}]},
    {"sortable": ["a"], "default_sort": "b"},
    {"columns": [{"field": "a", "direction": "up"}]},
    {"colour": "red"},
])
def test_invalid_payloads(bad):
    with pytest.raises(TableValidationError):
        validate_payload(bad)
