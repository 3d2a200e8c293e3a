"""
canonical.py

Deterministic serialization of the two things the API signs over:

- path + query:  "/v2/transactions?from_timestamp=...&transaction_status=Pending"
- JSON body:     '{"a":1,"b":{"c":2}}' (keys sorted at every level, no whitespace)

Both are SHA-256 hashed and sent as X-Params-Hash / X-Body-Hash. The server
recomputes them from what it receives, so the query string and body bytes that
go on the wire must be produced by the same functions.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote_plus, urlencode

from .errors import ValidationError

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]
QueryValue = Union[None, bool, int, float, str]
QueryParams = Mapping[str, QueryValue]


def recursive_sort_keys(value: Any) -> Any:
    """Return a copy of ``value`` with every mapping's keys in ascending order."""
    if isinstance(value, Mapping):
        return {k: recursive_sort_keys(value[k]) for k in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [recursive_sort_keys(v) for v in value]
    return value


def normalize_path(path: str) -> str:
    # "/foo/", "foo", "//foo" -> "/foo"
    path = (path or "").rstrip("/")
    return "/" + path.lstrip("/")


def _js_number(value: Any) -> Any:
    # Integral floats below 1e21 print without ".0" in JS (1.0 -> 1)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _js_numbers(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _js_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_js_numbers(v) for v in value]
    return _js_number(value)


def format_query_value(value: QueryValue) -> str:
    # Match how the API's reference client stringifies values (true/false, 1 not 1.0)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(_js_number(value))


def _form_quote(string: str, safe: str = "", encoding: Optional[str] = None, errors: Optional[str] = None) -> str:
    # application/x-www-form-urlencoded as browsers emit it: "*" stays, "~" is escaped
    return quote_plus(string, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def query_items(params: Optional[QueryParams]) -> List[Tuple[str, str]]:
    """Stringified (key, value) pairs in caller order. None values are dropped."""
    if not params:
        return []
    return [(str(k), format_query_value(v)) for k, v in params.items() if v is not None]


def encode_query(items: Union[QueryParams, Iterable[Tuple[str, str]], None]) -> str:
    if items is None:
        return ""
    if isinstance(items, Mapping):
        items = query_items(items)
    return urlencode(list(items), quote_via=_form_quote)


def canonical_query(params: Optional[QueryParams]) -> str:
    return encode_query(recursive_sort_keys(dict(query_items(params))))


def compute_params_hash(path: str, query_params: Optional[QueryParams] = None) -> str:
    params_string = normalize_path(path)
    query = canonical_query(query_params)
    if query:
        params_string += f"?{query}"
    return hashlib.sha256(params_string.encode("utf-8")).hexdigest()


def canonical_json(body: Any) -> str:
    if body is None:
        body = {}
    try:
        return json.dumps(
            _js_numbers(recursive_sort_keys(body)),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Request body is not JSON-serializable: {e}") from e


def compute_body_hash(body: Any) -> str:
    return hashlib.sha256(canonical_json(body).encode("utf-8")).hexdigest()
