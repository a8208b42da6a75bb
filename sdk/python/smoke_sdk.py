#!/usr/bin/env python3
"""Live smoke run of the EOS Python SDK against mainnet nodes"""

from eos_sdk import EosClient, TableQuery
from eos_sdk.logger import setup_logging
import time

ACCOUNT = 'cryptoforest'
PUBLIC_KEYS = [
    'EOS6zQQQXEgT9jmy9NHahAXqTRV4LaeCUwsE8XP8MP557Kn6s3KxP',
    'EOS71uwakr9eo8NMARvtaeA5mfccyWtJyXHCeiSzsrbdhnn5DJXu3',
]


def smoke_sdk():
    print("EOS PYTHON SDK SMOKE RUN\n")

    client = EosClient()
    checks = [
        ("Numeric id of account name", lambda: client.numeric_from_name(ACCOUNT)),
        ("Account exists", lambda: client.account_exists(ACCOUNT)),
        ("Key accounts #1", lambda: client.get_key_accounts(PUBLIC_KEYS[0])),
        ("Key accounts #2", lambda: client.get_key_accounts(PUBLIC_KEYS[1])),
        ("EOS balance", lambda: client.get_currency_balance(ACCOUNT, 'EOS')),
        ("EOS supply", lambda: client.get_currency_stats('eosio.token', 'EOS')),
        ("Top producers", lambda: client.get_table_rows(
            TableQuery(code='eosio', scope='eosio', table='producers', limit=3)).rows),
    ]

    passed = 0
    failed = 0
    with client:
        for number, (title, check) in enumerate(checks, start=1):
            print(f"TEST {number}: {title}...")
            try:
                print(f"  ✓ {check()}")
                passed += 1
            except Exception as e:
                print(f"  ✗ Failed: {e}")
                failed += 1
            time.sleep(0.1)

    print(f"\nRESULTS: {passed} passed, {failed} failed\n")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    setup_logging()
    exit(smoke_sdk())
