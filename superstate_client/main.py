# superstate_client/main.py
import logging
from typing import Optional

import requests
from fastapi import FastAPI, HTTPException

from .client import SuperstateClient
from .config import SERVICE_NAME, SERVICE_VERSION
from .errors import ConfigError, RequestError, ValidationError
from .models import TransactionsQuery, TransactionStatus

logger = logging.getLogger("superstate.main")

app = FastAPI(title="Superstate Connector", version=SERVICE_VERSION)


def client() -> SuperstateClient:
    # Lazy client creation so app can boot even if env vars are temporarily missing
    return SuperstateClient()


# ---- Health ----
@app.get("/")
def root():
    return {"ok": True, "service": SERVICE_NAME}


@app.get("/ping")
def ping():
    return {"ok": True}


@app.get("/version")
def version():
    return {"service": SERVICE_NAME, "version": SERVICE_VERSION}


# ---- Superstate passthroughs ----
@app.get("/superstate/transactions")
def list_transactions(
    transaction_status: Optional[TransactionStatus] = None,
    from_timestamp: Optional[str] = None,
    until_timestamp: Optional[str] = None,
    transaction_hash: Optional[str] = None,
):
    query = TransactionsQuery(
        transaction_status=transaction_status,
        from_timestamp=from_timestamp,
        until_timestamp=until_timestamp,
        transaction_hash=transaction_hash,
    )
    try:
        data = client().transactions(query)
    except ConfigError as e:
        raise HTTPException(status_code=500, detail={"error": "superstate not configured", "message": str(e)})
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": "invalid request", "message": str(e)})
    except RequestError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail={"error": "superstate request failed", "status_code": e.status_code, "message": e.text},
        )
    except requests.RequestException as e:
        logger.warning("Superstate unreachable: %s", e)
        raise HTTPException(status_code=502, detail={"error": "superstate unreachable", "message": str(e)})
    return {"ok": True, "data": data}
