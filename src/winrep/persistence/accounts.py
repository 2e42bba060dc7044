"""Route account writes."""

from __future__ import annotations

import logging
from typing import Any

from ..data.accounts_repository import ACCOUNTS_TABLE, account_from_row
from ..db.supabase import get_supabase_client
from ..errors import PersistenceError
from ..models.domain import Account


def _require_client():
    supabase = get_supabase_client()
    if not supabase:
        raise PersistenceError(
            "Supabase not configured. Set WINREP_SUPABASE_URL and WINREP_SUPABASE_KEY environment variables."
        )
    return supabase


def create_account(user_id: str, fields: dict[str, Any]) -> Account:
    supabase = _require_client()
    record = {**fields, "user_id": user_id, "is_active": True}
    try:
        response = supabase.table(ACCOUNTS_TABLE).insert(record).execute()
    except Exception as e:
        logging.error(f"Failed to create route account for user '{user_id}': {e}")
        raise PersistenceError(f"Failed to create route account: {e}") from e

    rows = response.data or []
    if not rows:
        raise PersistenceError("Route account insert returned no rows")
    account = account_from_row(rows[0])
    logging.info(f"Created route account '{account.id}' for user '{user_id}'")
    return account


def update_account(user_id: str, account_id: str, fields: dict[str, Any]) -> Account | None:
    """Apply a partial update. Returns None when the account does not exist."""
    supabase = _require_client()
    try:
        response = (
            supabase.table(ACCOUNTS_TABLE)
            .update(fields)
            .eq("id", account_id)
            .eq("user_id", user_id)
            .execute()
        )
    except Exception as e:
        logging.error(f"Failed to update route account '{account_id}': {e}")
        raise PersistenceError(f"Failed to update route account: {e}") from e

    rows = response.data or []
    return account_from_row(rows[0]) if rows else None


def deactivate_account(user_id: str, account_id: str) -> bool:
    """Soft-delete an account so it no longer takes part in routing."""
    supabase = _require_client()
    try:
        response = (
            supabase.table(ACCOUNTS_TABLE)
            .update({"is_active": False})
            .eq("id", account_id)
            .eq("user_id", user_id)
            .execute()
        )
    except Exception as e:
        logging.error(f"Failed to deactivate route account '{account_id}': {e}")
        raise PersistenceError(f"Failed to deactivate route account: {e}") from e

    deactivated = bool(response.data)
    if deactivated:
        logging.info(f"Deactivated route account '{account_id}' for user '{user_id}'")
    return deactivated
