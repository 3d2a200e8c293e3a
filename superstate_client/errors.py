from __future__ import annotations

from typing import Optional


class SuperstateError(Exception):
    pass


class ConfigError(SuperstateError):
    pass


class ValidationError(SuperstateError):
    pass


class RequestError(SuperstateError):
    """Non-2xx response from the API. Keeps the raw body for the caller."""

    def __init__(self, status_code: int, text: str, method: Optional[str] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.text = text
        self.method = method
        self.url = url
        where = f" for {method} {url}" if method and url else ""
        super().__init__(f"Request failed with status {status_code}{where}: {text[:800]}")
