"""
Read-only access to accounts and contacts in SQLite.

``AccountStore`` is the only component that issues SQL.  It offers the
two queries the service needs: accounts by a set of account numbers and
contacts by owning account.  Every call opens its own connection.
"""

import logging
import sqlite3
from typing import Iterable, List

from ..schemas.account import Account
from ..schemas.contact import Contact
from .db import get_connection

logger = logging.getLogger(__name__)


class AccountStore:
    """SQLite-backed store for accounts and their contacts."""

    def fetch_by_key_set(self, keys: Iterable[str]) -> List[Account]:
        """Return all accounts whose account number is in ``keys``."""
        key_list = sorted(set(keys))
        if not key_list:
            return []
        placeholders = ", ".join("?" for _ in key_list)
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT id, account_number, name, my_field FROM accounts "
                f"WHERE account_number IN ({placeholders})",
                key_list,
            ).fetchall()
        finally:
            conn.close()
        logger.debug("Fetched %d of %d requested accounts", len(rows), len(key_list))
        return [self._row_to_account(row) for row in rows]

    def fetch_by_foreign_key(self, account_id: int) -> List[Contact]:
        """Return the contacts of one account ordered by id."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, account_id, name, is_active FROM contacts "
                "WHERE account_id = ? ORDER BY id",
                (account_id,),
            ).fetchall()
        finally:
            conn.close()
        return [self._row_to_contact(row) for row in rows]

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            id=row["id"],
            account_number=row["account_number"],
            name=row["name"],
            my_field=row["my_field"],
        )

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> Contact:
        return Contact(
            id=row["id"],
            account_id=row["account_id"],
            name=row["name"],
            is_active=bool(row["is_active"]),
        )
