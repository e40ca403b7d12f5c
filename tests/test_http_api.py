# tests/test_http_api.py
from fastapi.testclient import TestClient
from tableserver.http_api import APP
client = TestClient(APP)

def test_healthz():
    r = client.get("/healthz")
    assert r.status_code == 200 and r.json() == {"ok": True}

def test_games_default_sort():
    r = client.get("/games")
    assert r.status_code == 200
    html = r.text
    assert html.startswith("<!DOCTYPE html>")
    assert "<strong>Terraria</strong>" in html
    assert 'href="http://testserver/games?sort=id&amp;direction=desc"' in html
    assert html.index("Terraria") < html.index("Factorio")

def test_games_sorted_by_name_keeps_params():
    r = client.get("/games", params={"sort": "name", "direction": "desc", "page": "3"})
    assert r.status_code == 200
    html = r.text
    names = ["Terraria", "Stardew Valley", "Factorio", "Baba Is You"]
    positions = [html.index(n) for n in names]
    assert positions == sorted(positions)
    assert 'href="http://testserver/games?sort=name&amp;direction=asc&amp;page=3"' in html
    assert 'href="http://testserver/games?sort=released&amp;direction=desc&amp;page=3"' in html

def test_render_posted_table():
    payload = {
        "title": "Scores",
        "columns": [{"field": "player"}, {"field": "score", "label": "Points"}],
        "rows": [{"player": "ann", "score": 3}, {"player": "bob", "score": 5}],
        "sortable": ["score"],
        "default_sort": "score",
    }
    r = client.post("/tables/render?direction=desc", json=payload)
    assert r.status_code == 200
    assert "<title>Scores</title>" in r.text and "Points" in r.text
    assert r.text.index("bob") < r.text.index("ann")

def test_render_rejects_bad_payload():
    r = client.post("/tables/render", json={"columns": [{"label": "x"}]})
    assert r.status_code == 422
    assert r.json()["ok"] is False

def test_render_rejects_non_json():
    r = client.post("/tables/render", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 422

def test_games_links_keep_repeated_params():
    r = client.get("/games?tag=a&tag=b")
    assert r.status_code == 200
    assert 'href="http://testserver/games?tag=a&amp;tag=b&amp;sort=id&amp;direction=desc"' in r.text

def test_render_mixed_value_types():
    payload = {
        "columns": [{"field": "score"}],
        "rows": [{"score": 1}, {"score": "x"}, {"score": 0.5}],
        "sortable": ["score"],
    }
    r = client.post("/tables/render?sort=score&direction=desc", json=payload)
    assert r.status_code == 200
    assert r.text.index("<td>x</td>") < r.text.index("<td>1</td>") < r.text.index("<td>0.5</td>")
