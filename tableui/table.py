# tableui/table.py
from __future__ import annotations
import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
from tableui.column import Column, SPEC_TYPES
from tableui.config import TableSettings, get_settings
from tableui.errors import ColumnConfigError
from tableui.render import esc
from tableui.sorting import SortableModel, row_fields, row_value, sort_rows

log = logging.getLogger(__name__)

EMPTY_TEXT = "There are no rows to display."

class Table:
    """
    A row collection plus the columns used to display it.

    columns=True derives columns from the model's sortable fields (or from
    the first row when there is no sortable model), columns=False starts
    empty, a sequence registers each item through add_column.
    """

    def __init__(self, rows: Iterable[Any], columns: Union[bool, Sequence[Any]] = True, *,
                 model: Optional[SortableModel] = None,
                 settings: Optional[TableSettings] = None,
                 css_class: str = "table"):
        self._rows: List[Any] = list(rows)
        self._columns: List[Column] = []
        self._settings = settings
        self.css_class = css_class
        if model is None and self._rows and isinstance(self._rows[0], SortableModel):
            model = self._rows[0]
        self._model = model

        if columns is True:
            self.add_default_columns()
        elif columns is False or columns is None:
            pass
        else:
            for item in columns:
                if isinstance(item, tuple):
                    self.add_column(*item)
                else:
                    self.add_column(item)

    @classmethod
    def create(cls, rows: Iterable[Any], columns: Union[bool, Sequence[Any]] = True, **kw) -> "Table":
        return cls(rows, columns, **kw)

    @property
    def settings(self) -> TableSettings:
        return self._settings or get_settings()

    @property
    def model(self) -> Optional[SortableModel]:
        return self._model

    def get_rows(self) -> List[Any]:
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    # ---------- columns ----------
    def add_column(self, *args: Any) -> Column:
        if len(args) == 1 and isinstance(args[0], Column):
            col = args[0]
        elif len(args) == 1 and isinstance(args[0], SPEC_TYPES):
            col = Column.create(args[0], settings=self._settings)
        else:
            col = Column.from_args(*args, settings=self._settings)
        col.set_options_from_model(self._model)
        self._columns.append(col)
        log.debug("column added: %r", col)
        return col

    def add_default_columns(self) -> None:
        if self._model is not None and self._model.is_sortable:
            fields = self._model.get_sortable()
        elif self._rows:
            fields = row_fields(self._rows[0])
        else:
            fields = []
        for f in fields:
            self.add_column(f)

    def get_columns(self) -> List[Column]:
        return list(self._columns)

    def get_column(self, field: str) -> Column:
        for c in self._columns:
            if c.field == field:
                return c
        raise ColumnConfigError("unknown_column", {"field": field})

    # ---------- rows ----------
    def sorted_rows(self, ctx) -> List[Any]:
        allowed = [c.field for c in self._columns if c.sortable]
        return sort_rows(self._rows, ctx, self._model, self.settings, allowed)

    # ---------- html ----------
    def _header_cell(self, col: Column, ctx) -> str:
        label = esc(col.label)
        if ctx is None or not col.sortable:
            return f'<th data-field="{esc(col.field)}">{label}</th>'
        classes = ["sortable"]
        if col.is_sorted(ctx):
            classes += ["sorted", col.get_direction(ctx)]
        href = esc(col.get_sort_url(ctx))
        return f'<th data-field="{esc(col.field)}" class="{" ".join(classes)}"><a href="{href}">{label}</a></th>'

    def _body_cell(self, col: Column, row: Any) -> str:
        if col.has_renderer():
            return f'<td>{col.render(row)}</td>'
        value = row_value(row, col.field)
        return f'<td>{esc(value)}</td>'

    def render(self, ctx=None, *, sort: bool = True) -> str:
        rows = self.sorted_rows(ctx) if (sort and ctx is not None) else self._rows
        out: List[str] = [f'<table class="{esc(self.css_class)}">', '<thead><tr>']
        for col in self._columns:
            out.append(self._header_cell(col, ctx))
        out.append('</tr></thead><tbody>')
        if not rows:
            span = max(len(self._columns), 1)
            out.append(f'<tr><td class="empty" colspan="{span}">{esc(EMPTY_TEXT)}</td></tr>')
        for row in rows:
            out.append('<tr>')
            for col in self._columns:
                out.append(self._body_cell(col, row))
            out.append('</tr>')
        out.append('</tbody></table>')
        return "".join(out)

    def __str__(self) -> str:
        return self.render()
