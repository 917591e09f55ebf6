#!/usr/bin/env python3
"""
Load accounts and contacts into the Account Service SQLite database.

The database schema is created (or migrated) first.  Accounts are read
from a JSON file shaped like::

    [
        {"accountNumber": "A100", "name": "Acme", "myField": "gold",
         "contacts": [{"name": "Bob", "isActive": true}]}
    ]

Without ``--file`` a small demo data set is loaded.  Accounts whose
account number already exists are skipped, so the script can be run
more than once.

Usage:
    python seed_accounts.py --db ./accounts.db --file accounts.json
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from account_service.app.core import db
from account_service.app.core.config import settings

DEMO_ACCOUNTS: List[Dict[str, Any]] = [
    {
        "accountNumber": "A100",
        "name": "Acme Corporation",
        "myField": "gold",
        "contacts": [
            {"name": "Bob", "isActive": True},
            {"name": "Ann", "isActive": False},
        ],
    },
    {
        "accountNumber": "B200",
        "name": "Globex",
        "myField": "silver",
        "contacts": [],
    },
]


def load_accounts(accounts: List[Dict[str, Any]]) -> int:
    """Insert accounts and their contacts; return how many accounts were added."""
    added = 0
    with db.get_cursor() as cur:
        for item in accounts:
            cur.execute(
                "INSERT OR IGNORE INTO accounts (account_number, name, my_field) VALUES (?, ?, ?)",
                (item["accountNumber"], item["name"], item.get("myField")),
            )
            if not cur.rowcount:
                continue
            account_id = cur.lastrowid
            for contact in item.get("contacts", []):
                cur.execute(
                    "INSERT INTO contacts (account_id, name, is_active) VALUES (?, ?, ?)",
                    (account_id, contact["name"], 1 if contact.get("isActive", True) else 0),
                )
            added += 1
    return added


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Seed the Account Service database (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    ap.add_argument("--file", help="JSON file with accounts to load. Demo data is used if omitted.")
    args = ap.parse_args(argv)

    if args.db:
        settings.database_url = os.path.abspath(args.db)

    if args.file:
        if not os.path.exists(args.file):
            print(f"[!] File not found: {args.file}", file=sys.stderr)
            return 1
        with open(args.file, "r", encoding="utf-8") as f:
            accounts = json.load(f)
    else:
        accounts = DEMO_ACCOUNTS

    db.init_db()
    added = load_accounts(accounts)
    print(f"[+] Loaded {added} account(s) into {db.get_database_path()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
