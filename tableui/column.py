# tableui/column.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field as dc_field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, ValidationError
from tableui.config import Direction, TableSettings, get_settings, normalize_direction, flip
from tableui.errors import ColumnConfigError, InvalidRenderer
from tableui.sorting import SortableModel, effective_sort_field

log = logging.getLogger(__name__)

Renderer = Callable[[Any], Any]

def default_label(field: str) -> str:
    # "created_at" -> "Created At"
    return " ".join(w[:1].upper() + w[1:] for w in field.replace("_", " ").split(" "))

# ---------- tagged column specs ----------
@dataclass(frozen=True)
class ByField:
    field: str

@dataclass(frozen=True)
class ByOptions:
    options: Mapping[str, Any]

@dataclass(frozen=True)
class ByFieldLabel:
    field: str
    label: str

@dataclass(frozen=True)
class ByFieldOptions:
    field: str
    options: Mapping[str, Any] = dc_field(default_factory=dict)

@dataclass(frozen=True)
class ByFieldLabelRenderer:
    field: str
    label: str
    renderer: Renderer

ColumnSpec = Union[ByField, ByOptions, ByFieldLabel, ByFieldOptions, ByFieldLabelRenderer]
SPEC_TYPES = (ByField, ByOptions, ByFieldLabel, ByFieldOptions, ByFieldLabelRenderer)

class ColumnOptions(BaseModel):
    """Quick-parameter mapping accepted by add_column; renderer is checked separately."""
    model_config = ConfigDict(extra="forbid")

    field: Optional[str] = None
    label: Optional[str] = None
    sortable: Optional[bool] = None
    direction: Optional[Direction] = None

def _parse_options(options: Mapping[str, Any]) -> Tuple[ColumnOptions, Any]:
    if not isinstance(options, Mapping):
        raise ColumnConfigError("options_not_mapping", {"got": type(options).__name__})
    opts = dict(options)
    renderer = opts.pop("renderer", None)
    try:
        parsed = ColumnOptions(**opts)
    except ValidationError as e:
        raise ColumnConfigError("invalid_options", {"errors": e.errors(include_url=False)}) from e
    return parsed, renderer


class Column:
    """
    One table column: the row field it reads, the header label, whether the
    user may sort by it, the direction it sorts in by default, and an optional
    renderer producing the cell markup for a row.
    """

    def __init__(self, field: str, label: Optional[str] = None, *,
                 sortable: bool = False,
                 direction: Optional[Direction] = None,
                 renderer: Optional[Renderer] = None,
                 settings: Optional[TableSettings] = None):
        if not isinstance(field, str) or not field.strip():
            raise ColumnConfigError("field_required", {"field": field})
        self._field = field
        self._label = label if label is not None else default_label(field)
        self._sortable = bool(sortable)
        self._direction: Optional[Direction] = None
        self._renderer: Optional[Renderer] = None
        self._model: Optional[SortableModel] = None
        self._settings = settings
        self._resolved: Optional[Tuple[Any, Direction]] = None
        if direction is not None:
            self.direction = direction
        if renderer is not None:
            self.set_renderer(renderer)

    # ---------- construction ----------
    @classmethod
    def create(cls, spec: ColumnSpec, *, settings: Optional[TableSettings] = None) -> "Column":
        if isinstance(spec, ByField):
            return cls(spec.field, settings=settings)
        if isinstance(spec, ByFieldLabel):
            return cls(spec.field, spec.label, settings=settings)
        if isinstance(spec, ByFieldLabelRenderer):
            return cls(spec.field, spec.label, renderer=spec.renderer, settings=settings)
        if isinstance(spec, ByFieldOptions):
            col = cls(spec.field, settings=settings)
            col.set_parameters(spec.options)
            return col
        if isinstance(spec, ByOptions):
            opts, _ = _parse_options(spec.options)
            if not opts.field:
                raise ColumnConfigError("field_required", {"options": sorted(spec.options)})
            col = cls(opts.field, settings=settings)
            col.set_parameters(spec.options)
            return col
        raise ColumnConfigError("unknown_spec", {"got": type(spec).__name__})

    @staticmethod
    def spec_from_args(*args: Any) -> ColumnSpec:
        """Maps the positional add_column shapes onto a tagged spec."""
        n = len(args)
        if n == 1:
            a = args[0]
            if isinstance(a, SPEC_TYPES):
                return a
            if isinstance(a, str):
                return ByField(a)
            if isinstance(a, Mapping):
                return ByOptions(a)
        elif n == 2:
            a, b = args
            if isinstance(a, str) and isinstance(b, str):
                return ByFieldLabel(a, b)
            if isinstance(a, str) and isinstance(b, Mapping):
                return ByFieldOptions(a, b)
        elif n == 3:
            a, b, c = args
            if isinstance(a, str) and isinstance(b, str):
                if not callable(c):
                    raise InvalidRenderer(c)
                return ByFieldLabelRenderer(a, b, c)
        raise ColumnConfigError("unrecognized_arguments", {"types": [type(a).__name__ for a in args]})

    @classmethod
    def from_args(cls, *args: Any, settings: Optional[TableSettings] = None) -> "Column":
        return cls.create(cls.spec_from_args(*args), settings=settings)

    def set_parameters(self, options: Mapping[str, Any]) -> None:
        opts, renderer = _parse_options(options)
        if opts.field is not None and opts.field != self._field:
            raise ColumnConfigError("field_conflict", {"field": self._field, "option": opts.field})
        if opts.label is not None:
            self._label = opts.label
        if opts.sortable is not None:
            self._sortable = opts.sortable
        if opts.direction is not None:
            self.direction = opts.direction
        if "renderer" in options:
            self.set_renderer(renderer)

    def set_options_from_model(self, model: Optional[SortableModel]) -> None:
        if model is not None and model.is_sortable and self._field in model.get_sortable():
            self._sortable = True
        self._model = model

    # ---------- properties ----------
    @property
    def field(self) -> str:
        return self._field

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._label = str(value)

    @property
    def sortable(self) -> bool:
        return self._sortable

    @sortable.setter
    def sortable(self, value: bool) -> None:
        self._sortable = bool(value)

    @property
    def direction(self) -> Optional[Direction]:
        return self._direction

    @direction.setter
    def direction(self, value: Optional[str]) -> None:
        if value is None:
            self._direction = None
        else:
            d = normalize_direction(value)
            if d is None:
                raise ColumnConfigError("invalid_direction", {"direction": value})
            self._direction = d
        self._resolved = None

    @property
    def model(self) -> Optional[SortableModel]:
        return self._model

    @property
    def settings(self) -> TableSettings:
        return self._settings or get_settings()

    # ---------- sorting ----------
    def is_sorted(self, ctx) -> bool:
        # a field the model does not allow counts as no request at all
        return effective_sort_field(ctx, self._model, self.settings) == self._field

    def get_direction(self, ctx) -> Direction:
        if self._resolved is not None and self._resolved[0] is ctx:
            return self._resolved[1]
        direction: Optional[Direction] = None
        if self.is_sorted(ctx):
            direction = normalize_direction(ctx.get(self.settings.key_direction))
        direction = direction or self._direction or self.settings.default_direction
        self._resolved = (ctx, direction)
        return direction

    def get_sort_url(self, ctx, direction: Optional[str] = None) -> str:
        if direction is None:
            resolved = self.get_direction(ctx)
            if self.is_sorted(ctx):
                resolved = flip(resolved)
        else:
            resolved = normalize_direction(direction)
            if resolved is None:
                raise ColumnConfigError("invalid_direction", {"direction": direction})
        s = self.settings
        return ctx.url_with({s.key_field: self._field, s.key_direction: resolved})

    # ---------- rendering ----------
    def has_renderer(self) -> bool:
        return self._renderer is not None

    def set_renderer(self, function: Any) -> None:
        if not callable(function):
            raise InvalidRenderer(function)
        self._renderer = function

    def render(self, row: Any) -> Optional[str]:
        if self._renderer is None:
            return None
        out = self._renderer(row)
        return "" if out is None else str(out)

    def __repr__(self) -> str:
        return f"Column(field={self._field!r}, label={self._label!r}, sortable={self._sortable})"
