# tableui/sorting.py
from __future__ import annotations
import logging
from typing import Any, ClassVar, Iterable, List, Mapping, Optional, Sequence, Tuple
from tableui.config import Direction, TableSettings, get_settings, normalize_direction

log = logging.getLogger(__name__)

def row_value(row: Any, field: str) -> Any:
    """Mapping rows are read by key, anything else by attribute."""
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)

def row_fields(row: Any) -> List[str]:
    if isinstance(row, Mapping):
        return [str(k) for k in row.keys()]
    if hasattr(row, "__dict__"):
        return [k for k in vars(row) if not k.startswith("_")]
    return []

class SortableModel:
    """
    Row-side sort declaration. Subclasses list the fields a user may sort by
    and optionally the default one:

        class Game(SortableModel):
            sortable = ("id", "name")
            default_sort = "name"
    """
    sortable: ClassVar[Sequence[str]] = ()
    default_sort: ClassVar[Optional[str]] = None

    @property
    def is_sortable(self) -> bool:
        return bool(self.sortable)

    def get_sortable(self) -> List[str]:
        return list(self.sortable)

    def get_sorting_field(self) -> Optional[str]:
        if self.default_sort:
            return self.default_sort
        return self.sortable[0] if self.sortable else None

def effective_sort_field(ctx, model: Optional[SortableModel], settings: Optional[TableSettings] = None,
                         allowed: Optional[Sequence[str]] = None) -> Optional[str]:
    """
    The field this request sorts by. The requested field must be allowed by
    the model (or by `allowed` when there is none), otherwise the model's
    default field is used. Headers and rows both go through here.
    """
    settings = settings or get_settings()
    field = ctx.get(settings.key_field) if ctx is not None else None
    if model is not None:
        allowed = model.get_sortable()
    if field and allowed is not None and field not in allowed:
        log.debug("sort field %r not allowed, using default", field)
        field = None
    if not field and model is not None:
        field = model.get_sorting_field()
    return field or None

def requested_sort(ctx, model: Optional[SortableModel], settings: Optional[TableSettings] = None,
                   allowed: Optional[Sequence[str]] = None) -> Optional[Tuple[str, Direction]]:
    """The (field, direction) pair to sort by for this request."""
    settings = settings or get_settings()
    field = effective_sort_field(ctx, model, settings, allowed)
    if not field:
        return None
    direction = normalize_direction(ctx.get(settings.key_direction)) if ctx is not None else None
    return field, direction or settings.default_direction

def sort_key(value: Any) -> Tuple[int, Any]:
    # numbers, then strings, then anything else by its text
    if isinstance(value, (int, float)) and value == value:
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, str(value))

def sort_rows(rows: Iterable[Any], ctx, model: Optional[SortableModel], settings: Optional[TableSettings] = None,
              allowed: Optional[Sequence[str]] = None) -> List[Any]:
    rows = list(rows)
    req = requested_sort(ctx, model, settings, allowed)
    if req is None:
        return rows
    field, direction = req
    requested = ctx.get((settings or get_settings()).key_field) if ctx is not None else None
    if requested and requested != field:
        log.warning("sort field %r not allowed, sorting by %r", requested, field)
    log.debug("sorting %d rows by %s %s", len(rows), field, direction)
    present = [r for r in rows if row_value(r, field) is not None]
    missing = [r for r in rows if row_value(r, field) is None]
    present.sort(key=lambda r: sort_key(row_value(r, field)), reverse=(direction == "desc"))
    return present + missing
