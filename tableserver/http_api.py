# tableserver/http_api.py
from __future__ import annotations
import os, logging
from typing import Any, Dict
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from tableui.dsl import table_from_payload
from tableui.errors import TableValidationError
from tableui.render import render_page
from tableserver.context import RequestContext
from tableserver.games import router as games_router

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
log = logging.getLogger(__name__)

APP = FastAPI(title="Sortable Tables")
APP.include_router(games_router)

@APP.exception_handler(TableValidationError)
async def _table_validation(request: Request, exc: TableValidationError):
    return JSONResponse(status_code=422, content={"ok": False, "error": exc.reason, "detail": exc.errors})

@APP.get("/healthz")
def healthz():
    return {"ok": True}

@APP.post("/tables/render", response_class=HTMLResponse)
async def render_table(request: Request):
    try:
        body: Dict[str, Any] = await request.json()
    except ValueError:
        raise TableValidationError("body must be json")
    table = table_from_payload(body)
    ctx = RequestContext.from_request(request)
    log.info("rendering posted table: %d rows, %d columns", len(table), len(table.get_columns()))
    return HTMLResponse(render_page(body.get("title") or "Table", table.render(ctx)))
