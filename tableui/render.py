# tableui/render.py
from __future__ import annotations
import html
from typing import List

CSP = "default-src 'self'; img-src 'self' data:; style-src 'self' 'unsafe-inline'; script-src 'none'; base-uri 'none'; form-action 'self'; frame-ancestors 'none'"

def esc(s: object) -> str:
    return html.escape("" if s is None else str(s), quote=True)

def _base_css() -> str:
    return """
.tbl-root{max-width:960px;margin:0 auto;padding:16px;font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial,'Noto Sans',sans-serif;color:#222;background:#fff}
.table{border-collapse:collapse;width:100%;margin:8px 0}
.table th,.table td{border:1px solid #ddd;padding:6px 8px;text-align:left}
.table th a{color:inherit;text-decoration:none}
.table th.sorted.asc a::after{content:" \\25B2"}
.table th.sorted.desc a::after{content:" \\25BC"}
.table td.empty{color:#888;text-align:center}
"""

def render_page(title: str, body_html: str) -> str:
    """Wraps an already-rendered fragment in a standalone document."""
    head: List[str] = [
        '<!DOCTYPE html>','<html lang="en">','<head>',
        '  <meta charset="utf-8" />',
        f'  <meta http-equiv="Content-Security-Policy" content="{esc(CSP)}" />',
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />',
        f'  <title>{esc(title)}</title>',
        f'  <style>{_base_css()}</style>',
        '</head>','<body>','<main class="tbl-root">',
        f'<h1>{esc(title)}</h1>',
    ]
    tail = ['</main>','</body>','</html>']
    return "\n".join(head + [body_html] + tail)
