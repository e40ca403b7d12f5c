# tableui/dsl.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from tableui.config import Direction, TableSettings
from tableui.errors import TableValidationError
from tableui.sorting import SortableModel
from tableui.table import Table

class ColumnPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    field: str = Field(..., min_length=1)
    label: Optional[str] = None
    sortable: Optional[bool] = None
    direction: Optional[Direction] = None

class TablePayload(BaseModel):
    """JSON declaration of a table; renderers cannot travel over the wire."""
    model_config = ConfigDict(extra="forbid")

    title: str = "Table"
    columns: List[ColumnPayload] = Field(default_factory=list)
    rows: List[Dict[str, Any]] = Field(default_factory=list)
    sortable: List[str] = Field(default_factory=list)
    default_sort: Optional[str] = None

    @model_validator(mode="after")
    def _check_fields(self):
        names = [c.field for c in self.columns]
        if len(set(names)) != len(names):
            raise ValueError("duplicate column field")
        if self.default_sort is not None and self.default_sort not in self.sortable:
            raise ValueError(f"default_sort '{self.default_sort}' not in sortable")
        return self

class PayloadModel(SortableModel):
    """SortableModel whose declarations come from a payload instead of a class body."""
    def __init__(self, sortable: List[str], default_sort: Optional[str]):
        self.sortable = tuple(sortable)
        self.default_sort = default_sort

def validate_payload(data: Any) -> TablePayload:
    if isinstance(data, TablePayload):
        return data
    if not isinstance(data, dict):
        raise TableValidationError("payload must be an object")
    try:
        return TablePayload.model_validate(data)
    except ValidationError as e:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in e.errors()]
        raise TableValidationError("invalid payload", errors) from e

def table_from_payload(data: Any, *, settings: Optional[TableSettings] = None) -> Table:
    p = validate_payload(data)
    model = PayloadModel(p.sortable, p.default_sort) if p.sortable else None
    columns: Any = [c.model_dump(exclude_none=True) for c in p.columns] if p.columns else True
    return Table(p.rows, columns, model=model, settings=settings)
