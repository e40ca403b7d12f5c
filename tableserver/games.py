# tableserver/games.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from tableui.render import esc, render_page
from tableui.sorting import SortableModel
from tableui.table import Table
from tableserver.context import RequestContext

router = APIRouter(tags=["games"])

@dataclass
class Game(SortableModel):
    sortable = ("id", "name", "released")
    default_sort = "id"

    id: int
    name: str
    released: int

GAMES: List[Game] = [
    Game(1, "Terraria", 2011),
    Game(2, "Factorio", 2020),
    Game(3, "Stardew Valley", 2016),
    Game(4, "Baba Is You", 2019),
]

def games_table(rows: List[Game]) -> Table:
    table = Table.create(rows, False)
    table.add_column("id", "#")
    table.add_column("name", "Name", lambda g: f"<strong>{esc(g.name)}</strong>")
    table.add_column("released", {"direction": "desc"})
    return table

@router.get("/games", response_class=HTMLResponse)
def list_games(request: Request):
    ctx = RequestContext.from_request(request)
    return HTMLResponse(render_page("Games", games_table(GAMES).render(ctx)))
