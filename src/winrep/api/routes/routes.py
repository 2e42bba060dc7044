"""Weekly route endpoints."""

from __future__ import annotations

import logging
import time
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from ...errors import PersistenceError, RateLimitExceeded
from ...persistence.database import log_function_call
from ...schemas.routing import SavedWeeklyRoutesResponse, WeeklyRoutesRequest, WeeklyRoutesResponse
from ...services.routing.service import generate_weekly_routes, get_saved_weekly_routes
from ..deps import get_user_id

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/weekly", response_model=WeeklyRoutesResponse, status_code=status.HTTP_200_OK)
def generate(
    payload: WeeklyRoutesRequest,
    request: Request,
    user_id: str = Depends(get_user_id),
) -> WeeklyRoutesResponse:
    """Assign the caller's active accounts to the days of the requested week."""
    started = time.perf_counter()
    status_code = status.HTTP_200_OK
    error_message: str | None = None
    try:
        return generate_weekly_routes(payload, user_id)
    except RateLimitExceeded as exc:
        status_code = status.HTTP_429_TOO_MANY_REQUESTS
        error_message = str(exc)
        raise HTTPException(status_code=status_code, detail=error_message) from exc
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = str(exc)
        raise HTTPException(status_code=status_code, detail=error_message) from exc
    except Exception as exc:
        logging.exception(f"Error generating weekly routes: {exc}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_message = f"Failed to generate weekly routes: {str(exc)}"
        raise HTTPException(status_code=status_code, detail=error_message) from exc
    finally:
        log_function_call(
            status_code=status_code,
            response_time_ms=int((time.perf_counter() - started) * 1000),
            method=request.method,
            request_path=request.url.path,
            user_id=user_id,
            error_message=error_message,
            metadata={"weekNumber": payload.weekNumber},
        )


@router.get("/weekly", response_model=SavedWeeklyRoutesResponse, status_code=status.HTTP_200_OK)
def get_saved(
    week_start_date: date = Query(..., description="Week start date (YYYY-MM-DD)"),
    user_id: str = Depends(get_user_id),
) -> SavedWeeklyRoutesResponse:
    """Return the routes last generated for the given week."""
    try:
        record = get_saved_weekly_routes(user_id, week_start_date)
    except PersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc

    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No routes saved for week starting {week_start_date.isoformat()}",
        )
    return SavedWeeklyRoutesResponse.model_validate(record)
