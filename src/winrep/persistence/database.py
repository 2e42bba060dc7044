"""Supabase persistence for weekly routes, rate limiting and function logs."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from ..config import settings
from ..db.supabase import get_supabase_client
from ..errors import PersistenceError, RateLimitExceeded

WEEKLY_ROUTES_TABLE = "weekly_routes"
FUNCTION_LOGS_TABLE = "edge_function_logs"


def save_weekly_routes(
    user_id: str,
    week_number: int,
    week_start_date: date,
    origin_address: str,
    routes: dict[str, Any],
) -> bool:
    """Upsert one week of routes keyed by ``(user_id, week_start_date)``.

    A later run for the same week overwrites the earlier one.

    Returns:
        True when the record was written, False when Supabase is not configured.
    """
    supabase = get_supabase_client()
    if not supabase:
        logging.info("Supabase not configured - weekly routes will only be saved to files")
        return False

    record = {
        "user_id": user_id,
        "week_number": week_number,
        "week_start_date": week_start_date.isoformat(),
        "origin_address": origin_address,
        "routes": routes,
    }
    try:
        supabase.table(WEEKLY_ROUTES_TABLE).upsert(record, on_conflict="user_id,week_start_date").execute()
    except Exception as e:
        logging.error(f"Failed to save weekly routes for user '{user_id}' week {week_start_date}: {e}")
        raise PersistenceError(f"Failed to save weekly routes: {e}") from e

    logging.info(f"Saved weekly routes for user '{user_id}' (week {week_number}, starting {week_start_date})")
    return True


def get_weekly_routes(user_id: str, week_start_date: date) -> dict[str, Any] | None:
    supabase = get_supabase_client()
    if not supabase:
        return None

    try:
        response = (
            supabase.table(WEEKLY_ROUTES_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("week_start_date", week_start_date.isoformat())
            .limit(1)
            .execute()
        )
    except Exception as e:
        logging.error(f"Failed to retrieve weekly routes for user '{user_id}' week {week_start_date}: {e}")
        raise PersistenceError(f"Failed to retrieve weekly routes: {e}") from e

    rows = response.data or []
    return rows[0] if rows else None


def check_rate_limit(user_id: str) -> None:
    """Raise RateLimitExceeded when the user has exhausted the current window.

    Not enforced when Supabase is not configured.
    """
    supabase = get_supabase_client()
    if not supabase:
        return

    try:
        response = supabase.rpc(
            "check_rate_limit",
            {
                "p_user_id": user_id,
                "p_function_name": settings.function_name,
                "p_max_requests": settings.rate_limit_max_requests,
                "p_window_minutes": settings.rate_limit_window_minutes,
            },
        ).execute()
    except Exception as e:
        logging.warning(f"Rate limit check failed for user '{user_id}': {e}")
        raise RateLimitExceeded("Rate limit exceeded") from e

    if not response.data:
        raise RateLimitExceeded("Rate limit exceeded")


def log_function_call(
    *,
    status_code: int,
    response_time_ms: int,
    method: str,
    request_path: str,
    user_id: str | None = None,
    error_message: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> None:
    """Record one endpoint invocation. Failures are logged and swallowed."""
    supabase = get_supabase_client()
    if not supabase:
        return

    entry: dict[str, Any] = {
        "function_name": settings.function_name,
        "user_id": user_id,
        "status_code": status_code,
        "response_time_ms": response_time_ms,
        "method": method,
        "request_path": request_path,
    }
    if error_message:
        entry["error_message"] = error_message
    if metadata:
        entry["metadata"] = metadata

    try:
        supabase.table(FUNCTION_LOGS_TABLE).insert(entry).execute()
    except Exception as e:
        logging.warning(f"Failed to log function call: {e}")
