"""
List transactions for the API keypair in SUPERSTATE_API_KEY / SUPERSTATE_API_SECRET.

    python scripts/list_transactions.py --status Pending \
        --from 2024-07-22T00:00:00.000Z --until 2024-07-23T00:00:00.000Z
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from superstate_client import (
    ConfigError,
    RequestError,
    SuperstateClient,
    TransactionsQuery,
    TransactionStatus,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fetch Superstate transactions")
    p.add_argument("--status", choices=[s.value for s in TransactionStatus])
    p.add_argument("--from", dest="from_timestamp", help="ISO-8601 UTC, e.g. 2024-07-22T00:00:00.000Z")
    p.add_argument("--until", dest="until_timestamp", help="ISO-8601 UTC")
    p.add_argument("--hash", dest="transaction_hash")
    p.add_argument("--base-url", dest="base_url")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def fetch_transactions(args: argparse.Namespace, client: Optional[SuperstateClient] = None):
    client = client or SuperstateClient(base_url=args.base_url)
    query = TransactionsQuery(
        transaction_status=TransactionStatus(args.status) if args.status else None,
        from_timestamp=args.from_timestamp,
        until_timestamp=args.until_timestamp,
        transaction_hash=args.transaction_hash,
    )
    return client.transactions(query)


def main(argv: Optional[List[str]] = None, client: Optional[SuperstateClient] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        data = fetch_transactions(args, client=client)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except RequestError as e:
        print(f"[{e.status_code}] {e.text}", file=sys.stderr)
        return 1

    print(json.dumps(data, indent=2) if not isinstance(data, str) else data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
