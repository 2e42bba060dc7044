"""Route account endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from ...data.accounts_repository import list_active_accounts
from ...errors import PersistenceError
from ...models.domain import Account
from ...persistence.accounts import create_account, deactivate_account, update_account
from ...schemas.accounts import AccountCreate, AccountListResponse, AccountModel, AccountUpdate
from ..deps import get_user_id

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _to_model(account: Account) -> AccountModel:
    return AccountModel(**{**asdict(account), "tags": list(account.tags)})


@router.get("", response_model=AccountListResponse, status_code=status.HTTP_200_OK)
def list_accounts(user_id: str = Depends(get_user_id)) -> AccountListResponse:
    try:
        accounts = list_active_accounts(user_id)
    except PersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return AccountListResponse(items=[_to_model(account) for account in accounts], total=len(accounts))


@router.post("", response_model=AccountModel, status_code=status.HTTP_201_CREATED)
def create(payload: AccountCreate, user_id: str = Depends(get_user_id)) -> AccountModel:
    try:
        account = create_account(user_id, payload.model_dump())
    except PersistenceError as exc:
        logging.exception(f"Error creating route account: {exc}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return _to_model(account)


@router.patch("/{account_id}", response_model=AccountModel, status_code=status.HTTP_200_OK)
def update(account_id: str, payload: AccountUpdate, user_id: str = Depends(get_user_id)) -> AccountModel:
    fields = payload.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")
    try:
        account = update_account(user_id, account_id, fields)
    except PersistenceError as exc:
        logging.exception(f"Error updating route account: {exc}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Account {account_id} not found")
    return _to_model(account)


@router.delete("/{account_id}", status_code=status.HTTP_200_OK)
def delete(account_id: str, user_id: str = Depends(get_user_id)) -> dict:
    """Soft-delete an account; it stays in the store but is no longer routed."""
    try:
        deactivated = deactivate_account(user_id, account_id)
    except PersistenceError as exc:
        logging.exception(f"Error deleting route account: {exc}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if not deactivated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Account {account_id} not found")
    return {"success": True, "message": f"Account {account_id} deactivated"}
