from datetime import datetime, timedelta, timezone

from superstate_client import RequestMethod, TransactionsQuery, TransactionStatus
from superstate_client.models import BODYLESS_METHODS, format_timestamp


def test_transaction_status_values():
    assert [s.value for s in TransactionStatus] == ["Pending", "Completed"]
    assert TransactionStatus("Pending") is TransactionStatus.Pending


def test_bodyless_methods():
    assert BODYLESS_METHODS == {RequestMethod.GET, RequestMethod.HEAD, RequestMethod.DELETE, RequestMethod.OPTIONS}
    assert RequestMethod.POST not in BODYLESS_METHODS


def test_empty_query_has_no_params():
    assert TransactionsQuery().to_params() == {}


def test_query_params_from_datetimes():
    q = TransactionsQuery(
        transaction_status=TransactionStatus.Pending,
        from_timestamp=datetime(2024, 7, 22, tzinfo=timezone.utc),
        until_timestamp=datetime(2024, 7, 23, 2, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2))),
        transaction_hash="0xabc",
    )
    assert q.to_params() == {
        "transaction_status": "Pending",
        "from_timestamp": "2024-07-22T00:00:00.000Z",
        "until_timestamp": "2024-07-23T00:00:00.123Z",
        "transaction_hash": "0xabc",
    }


def test_format_timestamp_naive_is_utc():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"
    assert format_timestamp("2024-01-02T03:04:05Z") == "2024-01-02T03:04:05Z"


def test_empty_strings_are_kept_for_every_field():
    q = TransactionsQuery(from_timestamp="", until_timestamp="", transaction_hash="")
    assert q.to_params() == {"from_timestamp": "", "until_timestamp": "", "transaction_hash": ""}
