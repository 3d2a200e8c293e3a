"""
client.py

SuperstateClient supporting:
- SuperstateClient()                                   (credentials from env)
- SuperstateClient(config=SuperstateConfig(...))
- SuperstateClient(api_key=..., api_secret=..., base_url=..., timeout_seconds=...)

Authentication (every method):
- Authorization: Bearer {api_key}
- X-Nonce / X-Timestamp: fresh per request
- X-Params-Hash: sha256(normalized path + sorted query)
- X-Body-Hash:   sha256(sorted, compact JSON body)
- X-Hmac:        base64(HMAC_SHA256(api_secret, api_key + nonce + timestamp + params_hash + body_hash))

Non-2xx responses raise RequestError. Network errors from requests propagate as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from . import config as settings
from .canonical import QueryParams, canonical_json, encode_query, query_items
from .errors import ConfigError, RequestError, ValidationError
from .models import (
    BODYLESS_METHODS,
    TRANSACTIONS_ENDPOINT,
    RequestMethod,
    SignedRequest,
    TransactionsQuery,
)
from .signing import sign

logger = logging.getLogger("superstate.client")


def _mask(s: str, keep: int = 4) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return s[:keep] + "*" * (len(s) - keep)


def _clean_base_url(url: str) -> str:
    return url.strip().rstrip("/")


@dataclass(frozen=True)
class SuperstateConfig:
    api_key: str
    api_secret: str
    base_url: str = settings.DEFAULT_BASE_URL
    timeout_seconds: Optional[int] = None

    @staticmethod
    def from_env() -> "SuperstateConfig":
        return SuperstateConfig.from_values()

    @staticmethod
    def from_values(
        *,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ) -> "SuperstateConfig":
        k = (api_key or settings.env(settings.API_KEY_VAR)).strip()
        s = (api_secret or settings.env(settings.API_SECRET_VAR)).strip()
        b = _clean_base_url(base_url or settings.env(settings.BASE_URL_VAR) or settings.DEFAULT_BASE_URL)
        t = timeout_seconds if timeout_seconds is not None else settings.env_int(settings.TIMEOUT_VAR, None)

        if not k:
            raise ConfigError(f"Missing api_key / {settings.API_KEY_VAR}")
        if not s:
            raise ConfigError(f"Missing api_secret / {settings.API_SECRET_VAR}")

        return SuperstateConfig(api_key=k, api_secret=s, base_url=b, timeout_seconds=t)


def _resolve_method(method: Union[RequestMethod, str]) -> RequestMethod:
    if isinstance(method, RequestMethod):
        return method
    try:
        return RequestMethod((method or "").upper())
    except ValueError:
        raise ValidationError(f"Unsupported HTTP method: {method}") from None


class SuperstateClient:
    def __init__(
        self,
        config: Optional[SuperstateConfig] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        if config is None:
            config = SuperstateConfig.from_values(
                api_key=api_key,
                api_secret=api_secret,
                base_url=base_url,
                timeout_seconds=timeout_seconds,
            )

        self.config = config
        self.session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f"SuperstateClient(base_url={self.config.base_url!r}, api_key={_mask(self.config.api_key)!r})"

    def dispatch(self, req: SignedRequest) -> Any:
        endpoint = (req.endpoint or "").strip().lstrip("/")
        if not endpoint.strip("/"):
            raise ValidationError("endpoint is required")
        method = _resolve_method(req.method)
        base_url = _clean_base_url(req.base_url) if req.base_url else self.config.base_url

        query_params = req.query_params or {}
        body = req.body if req.body is not None else {}

        headers = sign(self.config.api_key, self.config.api_secret, endpoint, query_params, body)

        url = f"{base_url}/{endpoint}"
        query = encode_query(query_items(query_params))
        if query:
            url = f"{url}?{query}"

        data = None
        if method not in BODYLESS_METHODS:
            data = canonical_json(body).encode("utf-8")

        logger.debug("%s %s (api_key=%s)", method.value, url, _mask(self.config.api_key))

        prepared = self.session.prepare_request(
            requests.Request(method=method.value, url=url, headers=headers, data=data)
        )
        # requests re-quotes the URL while preparing ("%7E" -> "~"); send the bytes that were hashed
        prepared.url = url
        send_kwargs = self.session.merge_environment_settings(url, {}, None, None, None)

        try:
            resp = self.session.send(prepared, timeout=self.config.timeout_seconds, **send_kwargs)
        except requests.RequestException as e:
            logger.warning("Network error calling Superstate: %s %s: %s", method.value, url, e)
            raise

        body_text = resp.text
        logger.debug("[%s] %s", resp.status_code, body_text[:800])

        if not 200 <= resp.status_code < 300:
            logger.warning("Superstate http error (%s) for %s %s", resp.status_code, method.value, url)
            raise RequestError(resp.status_code, body_text, method=method.value, url=url)

        content_type = (resp.headers.get("content-type") or "").lower()
        if "application/json" in content_type and body_text:
            try:
                return resp.json()
            except ValueError:
                return body_text
        return body_text

    # Convenience helpers
    def request(
        self,
        method: Union[RequestMethod, str],
        endpoint: str,
        *,
        params: Optional[QueryParams] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.dispatch(
            SignedRequest(endpoint=endpoint, method=method, query_params=dict(params or {}), body=dict(body or {}))
        )

    def get(self, endpoint: str, *, params: Optional[QueryParams] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, *, params: Optional[QueryParams] = None, body: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", endpoint, params=params, body=body)

    def transactions(self, query: Optional[TransactionsQuery] = None) -> Any:
        params = query.to_params() if query is not None else {}
        return self.get(TRANSACTIONS_ENDPOINT, params=params)


def superstate_request(
    *,
    api_key: str,
    api_secret: str,
    endpoint: str,
    method: Union[RequestMethod, str] = "GET",
    query_params: Optional[QueryParams] = None,
    body: Optional[Dict[str, Any]] = None,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    """One signed call with explicit credentials. Nothing is read from env."""
    if not api_key:
        raise ConfigError("Missing api_key")
    if not api_secret:
        raise ConfigError("Missing api_secret")
    cfg = SuperstateConfig(
        api_key=api_key,
        api_secret=api_secret,
        base_url=_clean_base_url(base_url or settings.DEFAULT_BASE_URL),
    )
    req = SignedRequest(
        endpoint=endpoint,
        method=method,
        query_params=dict(query_params or {}),
        body=dict(body or {}),
    )
    if session is not None:
        return SuperstateClient(cfg, session=session).dispatch(req)
    with requests.Session() as own_session:
        return SuperstateClient(cfg, session=own_session).dispatch(req)
