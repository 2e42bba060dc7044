"""Weekly route generation service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Sequence

from ...config import settings
from ...data.accounts_repository import list_active_accounts
from ...models.domain import Account, WeeklyRoutes
from ...persistence.database import check_rate_limit, get_weekly_routes, save_weekly_routes
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    WeekPlanModel,
    WeeklyRoutesModel,
    WeeklyRoutesRequest,
    WeeklyRoutesResponse,
)
from ..outputs.routing_formatter import weekly_routes_to_csv, weekly_routes_to_json
from .engine import assign_weekly_routes
from .rules import is_half_day

MAX_WEEK_NUMBER = 53


@dataclass(slots=True)
class WeekPlan:
    week_number: int
    week_start_date: date
    origin: str
    routes: WeeklyRoutes

    def routes_json(self) -> dict:
        return weekly_routes_to_json(self.routes)


def following_week(week_number: int, week_start_date: date) -> tuple[int, date]:
    """Week number and start date of the next week; week 53 rolls over to 1."""
    next_number = week_number % MAX_WEEK_NUMBER + 1
    return next_number, week_start_date + timedelta(days=7)


def resolve_origin(origin_address: str | None) -> str:
    if origin_address and origin_address.strip():
        return origin_address.strip()
    return settings.default_origin_address


def plan_week(accounts: Sequence[Account], week_number: int, week_start_date: date, origin: str) -> WeekPlan:
    routes = assign_weekly_routes(accounts, week_number, week_start_date, origin)
    return WeekPlan(week_number=week_number, week_start_date=week_start_date, origin=origin, routes=routes)


def _week_plan_model(plan: WeekPlan) -> WeekPlanModel:
    return WeekPlanModel(
        weekNumber=plan.week_number,
        weekStartDate=plan.week_start_date,
        originAddress=plan.origin,
        routes=WeeklyRoutesModel.model_validate(plan.routes_json()),
    )


def _week_metadata(plan: WeekPlan) -> dict[str, Any]:
    return {
        "week_number": plan.week_number,
        "week_start_date": plan.week_start_date.isoformat(),
        "half_day": is_half_day(plan.week_start_date),
        "total_stops": plan.routes.total_stops,
        "stops_per_day": {day: len(route.stops) for day, route in plan.routes.items()},
    }


def _persist_outputs(user_id: str, plans: Sequence[WeekPlan]) -> dict[str, Any]:
    saved = [
        save_weekly_routes(
            user_id=user_id,
            week_number=plan.week_number,
            week_start_date=plan.week_start_date,
            origin_address=plan.origin,
            routes=plan.routes_json(),
        )
        for plan in plans
    ]

    first = plans[0]
    summary = {
        "user_id": user_id,
        "origin_address": first.origin,
        "weeks": [{**_week_metadata(plan), "routes": plan.routes_json()} for plan in plans],
    }
    stops_csv = weekly_routes_to_csv((plan.week_start_date.isoformat(), plan.routes) for plan in plans)

    storage = FileStorage()
    run_dir = storage.write_run(
        prefix=f"weekly_routes_{first.week_start_date.isoformat()}",
        summary=summary,
        stops_csv=stops_csv,
    )
    return {"saved_to_database": all(saved), "output_dir": str(run_dir)}


def generate_weekly_routes(payload: WeeklyRoutesRequest, user_id: str) -> WeeklyRoutesResponse:
    check_rate_limit(user_id)

    accounts = list_active_accounts(user_id)
    origin = resolve_origin(payload.originAddress)

    plans = [plan_week(accounts, payload.weekNumber, payload.weekStartDate, origin)]
    if payload.includeFollowingWeek:
        next_number, next_start = following_week(payload.weekNumber, payload.weekStartDate)
        plans.append(plan_week(accounts, next_number, next_start, origin))

    logging.info(
        f"Generated {len(plans)} week(s) of routes for user '{user_id}' from {len(accounts)} accounts "
        f"(week {payload.weekNumber}, starting {payload.weekStartDate})"
    )

    metadata: dict[str, Any] = {
        "account_count": len(accounts),
        "weeks": [_week_metadata(plan) for plan in plans],
        "persisted": False,
    }
    if payload.persist:
        metadata.update(_persist_outputs(user_id, plans))
        metadata["persisted"] = True

    week = plans[0]
    return WeeklyRoutesResponse(
        weekNumber=week.week_number,
        weekStartDate=week.week_start_date,
        originAddress=week.origin,
        routes=WeeklyRoutesModel.model_validate(week.routes_json()),
        followingWeek=_week_plan_model(plans[1]) if len(plans) > 1 else None,
        metadata=metadata,
    )


def get_saved_weekly_routes(user_id: str, week_start_date: date) -> dict[str, Any] | None:
    return get_weekly_routes(user_id, week_start_date)
