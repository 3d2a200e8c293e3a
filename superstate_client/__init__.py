from .canonical import compute_body_hash, compute_params_hash, recursive_sort_keys
from .client import SuperstateClient, SuperstateConfig, superstate_request
from .errors import ConfigError, RequestError, SuperstateError, ValidationError
from .models import (
    TRANSACTIONS_ENDPOINT,
    RequestMethod,
    SignedRequest,
    TransactionsQuery,
    TransactionStatus,
)
from .signing import sign

__all__ = [
    "SuperstateClient",
    "SuperstateConfig",
    "superstate_request",
    "sign",
    "recursive_sort_keys",
    "compute_params_hash",
    "compute_body_hash",
    "SignedRequest",
    "RequestMethod",
    "TransactionStatus",
    "TransactionsQuery",
    "TRANSACTIONS_ENDPOINT",
    "SuperstateError",
    "ConfigError",
    "ValidationError",
    "RequestError",
]
