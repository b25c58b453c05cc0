"""
Key‑value store on top of the SQLite ``kv_store`` table.

Every entity of the service (orders, inquiries and the id lists used
to enumerate them) is stored as a JSON document under a string key.
The store offers no multi‑key transactions: each call opens its own
connection and commits on its own, so callers that write several keys
accept that a failure between writes leaves them out of step.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional

from .db import get_cursor


def get_value(key: str) -> Optional[Any]:
    """Return the decoded value stored under ``key`` or ``None``."""
    with get_cursor() as cursor:
        row = cursor.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
    if row is None:
        return None
    return json.loads(row["value"])


def set_value(key: str, value: Any) -> None:
    """Store ``value`` under ``key``, replacing any previous value."""
    with get_cursor() as cursor:
        cursor.execute(
            """
            INSERT INTO kv_store (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, json.dumps(value)),
        )


def get_values(keys: Iterable[str]) -> List[Optional[Any]]:
    """Look up several keys at once.

    The result has one entry per requested key, in the same order;
    keys that are not present yield ``None``.
    """
    keys = list(keys)
    if not keys:
        return []
    found: dict[str, Any] = {}
    with get_cursor() as cursor:
        # SQLite limits the number of bound parameters per statement.
        for start in range(0, len(keys), 500):
            chunk = keys[start:start + 500]
            placeholders = ", ".join("?" for _ in chunk)
            rows = cursor.execute(
                f"SELECT key, value FROM kv_store WHERE key IN ({placeholders})",
                tuple(chunk),
            ).fetchall()
            for row in rows:
                found[row["key"]] = json.loads(row["value"])
    return [found.get(key) for key in keys]


def append_to_list(key: str, item: Any) -> None:
    """Append ``item`` to the JSON list stored under ``key``.

    A missing key starts a new list.  This is a plain read followed by a
    write: two concurrent appends to the same key can lose one item.
    """
    items = get_value(key) or []
    items.append(item)
    set_value(key, items)
