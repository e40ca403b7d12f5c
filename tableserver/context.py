# tableserver/context.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union, TYPE_CHECKING
from urllib.parse import urlencode, urlsplit, parse_qsl

if TYPE_CHECKING:
    from starlette.requests import Request

Pairs = Tuple[Tuple[str, str], ...]

def _pairs(query: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> Pairs:
    items = query.items() if isinstance(query, Mapping) else query
    return tuple((str(k), str(v)) for k, v in items)

@dataclass(frozen=True)
class RequestContext:
    """
    Read-only view of the current request: route path, root URL and query.
    Columns never look at globals, they are handed one of these.

    `query` accepts a mapping or a sequence of (key, value) pairs; repeated
    keys are kept in `pairs`, `query` exposes the last value per key.
    """
    path: str = "/"
    query: Any = field(default_factory=dict)
    root: str = ""
    pairs: Pairs = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        pairs = _pairs(self.query)
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "query", MappingProxyType(dict(pairs)))

    def __eq__(self, other):
        if not isinstance(other, RequestContext):
            return NotImplemented
        return (self.path, self.pairs, self.root) == (other.path, other.pairs, other.root)

    def __hash__(self):
        return hash((self.path, self.pairs, self.root))

    @classmethod
    def from_request(cls, request: "Request") -> "RequestContext":
        return cls(
            path=request.url.path,
            query=request.query_params.multi_items(),
            root=str(request.base_url).rstrip("/"),
        )

    @classmethod
    def from_url(cls, url: str) -> "RequestContext":
        parts = urlsplit(url)
        root = f"{parts.scheme}://{parts.netloc}" if parts.scheme and parts.netloc else ""
        return cls(
            path=parts.path or "/",
            query=parse_qsl(parts.query, keep_blank_values=True),
            root=root,
        )

    def get(self, key: str) -> Optional[str]:
        v = self.query.get(key)
        return v if v else None

    def get_all(self, key: str) -> List[str]:
        return [v for k, v in self.pairs if k == key]

    def url_with(self, params: Mapping[str, Any]) -> str:
        """
        Current query with `params` replacing their keys. A replaced key keeps
        the position of its first occurrence; empty values leave the current
        value untouched.
        """
        repl = {k: str(v) for k, v in params.items() if v is not None and v != ""}
        out: List[Tuple[str, str]] = []
        done = set()
        for k, v in self.pairs:
            if k in repl:
                if k not in done:
                    out.append((k, repl[k]))
                    done.add(k)
                continue
            out.append((k, v))
        out.extend((k, v) for k, v in repl.items() if k not in done)
        base = f"{self.root}{self.path}"
        if not out:
            return base
        return f"{base}?{urlencode(out)}"
