"""
signing.py

Superstate API key authentication (per request):

    message = api_key + nonce + timestamp + params_hash + body_hash
    X-Hmac  = base64(HMAC_SHA256(key=api_secret, msg=message))

nonce is a fresh UUID4 and timestamp is epoch milliseconds, so two calls with
identical inputs never carry the same signature.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from typing import Any, Dict, Optional

from .canonical import QueryParams, compute_body_hash, compute_params_hash
from .errors import ConfigError

SIGNATURE_HEADER_NAMES = (
    "Authorization",
    "X-Nonce",
    "X-Timestamp",
    "X-Params-Hash",
    "X-Body-Hash",
    "X-Hmac",
)


def new_nonce() -> str:
    return str(uuid.uuid4())


def now_millis() -> str:
    return str(time.time_ns() // 1_000_000)


def build_message(api_key: str, nonce: str, timestamp: str, params_hash: str, body_hash: str) -> str:
    return f"{api_key}{nonce}{timestamp}{params_hash}{body_hash}"


def compute_hmac(api_secret: str, message: str) -> str:
    digest = hmac.new(api_secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(
    api_key: str,
    api_secret: str,
    endpoint: str,
    query_params: Optional[QueryParams] = None,
    body: Any = None,
    *,
    nonce: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build the signature headers for one request.

    ``nonce`` and ``timestamp`` are generated when not given; pass them only to
    reproduce a known signature.
    """
    if not api_key:
        raise ConfigError("Missing api_key")
    if not api_secret:
        raise ConfigError("Missing api_secret")

    nonce = nonce or new_nonce()
    timestamp = timestamp or now_millis()
    params_hash = compute_params_hash(endpoint, query_params)
    body_hash = compute_body_hash(body)
    message = build_message(api_key, nonce, timestamp, params_hash, body_hash)

    return {
        "Authorization": f"Bearer {api_key}",
        "X-Nonce": nonce,
        "X-Timestamp": timestamp,
        "X-Params-Hash": params_hash,
        "X-Body-Hash": body_hash,
        "X-Hmac": compute_hmac(api_secret, message),
        "Content-Type": "application/json",
    }
