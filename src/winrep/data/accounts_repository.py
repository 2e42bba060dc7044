"""Read access to a rep's route accounts."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..db.supabase import get_supabase_client
from ..errors import PersistenceError
from ..models.domain import WEEKLY, Account

ACCOUNTS_TABLE = "route_accounts"


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_tags(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    return tuple(str(item) for item in value)


def account_from_row(row: Mapping[str, Any]) -> Account:
    """Convert a ``route_accounts`` row into an Account."""
    return Account(
        id=str(row["id"]),
        name=(row.get("name") or row.get("business_name") or "").strip(),
        address=(row.get("address") or "").strip(),
        region=(row.get("region") or "").strip(),
        frequency=(row.get("frequency") or WEEKLY).strip(),
        priority=(row.get("priority") or "medium").strip(),
        tags=_coerce_tags(row.get("tags")),
        notes=row.get("notes"),
        priority_score=_coerce_float(row.get("priority_score")),
        is_active=bool(row.get("is_active", True)),
    )


def accounts_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[Account]:
    accounts: list[Account] = []
    for row in rows:
        try:
            accounts.append(account_from_row(row))
        except (KeyError, ValueError) as e:
            logging.warning(f"Skipping malformed route account row {row.get('id', 'unknown')}: {e}")
    return accounts


def list_active_accounts(user_id: str) -> list[Account]:
    """Return the user's active accounts, highest priority score first.

    Returns an empty list when Supabase is not configured.
    """
    supabase = get_supabase_client()
    if not supabase:
        logging.warning("Supabase not configured - no route accounts available")
        return []

    try:
        response = (
            supabase.table(ACCOUNTS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("is_active", True)
            .order("priority_score", desc=True)
            .execute()
        )
    except Exception as e:
        logging.error(f"Failed to load route accounts for user '{user_id}': {e}")
        raise PersistenceError(f"Failed to load route accounts: {e}") from e

    accounts = accounts_from_rows(response.data or [])
    logging.info(f"Retrieved {len(accounts)} active route accounts for user '{user_id}'")
    return accounts
