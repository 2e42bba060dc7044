"""Shared request dependencies."""

from __future__ import annotations

from fastapi import Header, HTTPException, status


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Caller identity forwarded by the gateway in the ``X-User-Id`` header."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_user_id.strip()
