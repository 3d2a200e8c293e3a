import base64
import hashlib
import hmac
import uuid

import pytest

from superstate_client import ConfigError, sign
from superstate_client.canonical import compute_body_hash, compute_params_hash
from superstate_client.signing import SIGNATURE_HEADER_NAMES, build_message, now_millis


def test_sign_produces_expected_hmac():
    nonce = "00000000-0000-4000-8000-000000000000"
    ts = "1721606400000"
    headers = sign("k1", "s1", "v2/transactions", {"b": 2, "a": 1}, {"z": 1}, nonce=nonce, timestamp=ts)

    params_hash = compute_params_hash("/v2/transactions", {"a": 1, "b": 2})
    body_hash = compute_body_hash({"z": 1})
    message = f"k1{nonce}{ts}{params_hash}{body_hash}"
    expected = base64.b64encode(hmac.new(b"s1", message.encode("utf-8"), hashlib.sha256).digest()).decode()

    assert headers == {
        "Authorization": "Bearer k1",
        "X-Nonce": nonce,
        "X-Timestamp": ts,
        "X-Params-Hash": params_hash,
        "X-Body-Hash": body_hash,
        "X-Hmac": expected,
        "Content-Type": "application/json",
    }


def test_build_message_has_no_separators():
    assert build_message("k", "n", "1", "p", "b") == "kn1pb"


def test_sign_is_fresh_per_call():
    a = sign("k1", "s1", "v2/transactions", {}, {})
    b = sign("k1", "s1", "v2/transactions", {}, {})

    assert a["X-Nonce"] != b["X-Nonce"]
    assert a["X-Hmac"] != b["X-Hmac"]
    assert a["X-Params-Hash"] == b["X-Params-Hash"]
    assert a["X-Body-Hash"] == b["X-Body-Hash"]
    assert uuid.UUID(a["X-Nonce"]).version == 4


def test_sign_header_names():
    headers = sign("k1", "s1", "x")
    assert set(headers) == set(SIGNATURE_HEADER_NAMES) | {"Content-Type"}
    assert all(isinstance(v, str) for v in headers.values())


def test_timestamp_is_epoch_millis():
    ts = now_millis()
    assert ts.isdigit()
    assert len(ts) == 13


@pytest.mark.parametrize("key,secret", [("", "s1"), ("k1", "")])
def test_sign_requires_credentials(key, secret):
    with pytest.raises(ConfigError):
        sign(key, secret, "x")
