from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

from .canonical import QueryValue

TRANSACTIONS_ENDPOINT = "v2/transactions"


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


# These never carry a body on the wire, even if the caller supplies one.
BODYLESS_METHODS = frozenset({RequestMethod.GET, RequestMethod.HEAD, RequestMethod.DELETE, RequestMethod.OPTIONS})


class TransactionStatus(str, Enum):
    Pending = "Pending"
    Completed = "Completed"


def format_timestamp(value: Union[str, datetime]) -> str:
    """
    datetime -> "2024-07-22T00:00:00.000Z" (UTC, millisecond precision).
    Strings are passed through as-is.
    """
    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


@dataclass
class TransactionsQuery:
    transaction_status: Optional[TransactionStatus] = None
    from_timestamp: Optional[Union[str, datetime]] = None
    until_timestamp: Optional[Union[str, datetime]] = None
    transaction_hash: Optional[str] = None

    def to_params(self) -> Dict[str, QueryValue]:
        params: Dict[str, QueryValue] = {}
        if self.transaction_status is not None:
            params["transaction_status"] = TransactionStatus(self.transaction_status).value
        if self.from_timestamp is not None:
            params["from_timestamp"] = format_timestamp(self.from_timestamp)
        if self.until_timestamp is not None:
            params["until_timestamp"] = format_timestamp(self.until_timestamp)
        if self.transaction_hash is not None:
            params["transaction_hash"] = self.transaction_hash
        return params


@dataclass
class SignedRequest:
    endpoint: str
    method: Union[RequestMethod, str] = RequestMethod.GET
    query_params: Dict[str, QueryValue] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
    base_url: Optional[str] = None
