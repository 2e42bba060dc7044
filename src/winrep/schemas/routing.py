"""Weekly routing request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .accounts import AccountModel


class WeeklyRoutesRequest(BaseModel):
    weekNumber: int = Field(..., ge=1, le=53, description="Rotation week used for cadence rules.")
    weekStartDate: date = Field(..., description="Calendar date of the week's first day (ISO format).")
    originAddress: Optional[str] = Field(
        default=None,
        description="Start/end address for navigation links. Falls back to the configured default.",
    )
    includeFollowingWeek: bool = Field(
        default=False,
        description="Also generate the next week (week number + 1, start date + 7 days).",
    )
    persist: bool = True


class DailyRouteModel(BaseModel):
    stops: List[AccountModel]
    googleRoute: str


class WeeklyRoutesModel(BaseModel):
    Monday: DailyRouteModel
    Tuesday: DailyRouteModel
    Wednesday: DailyRouteModel
    Thursday: DailyRouteModel
    Friday: DailyRouteModel
    FlexDay: DailyRouteModel


class WeekPlanModel(BaseModel):
    weekNumber: int
    weekStartDate: date
    originAddress: str
    routes: WeeklyRoutesModel


class WeeklyRoutesResponse(BaseModel):
    success: bool = True
    weekNumber: int
    weekStartDate: date
    originAddress: str
    routes: WeeklyRoutesModel
    followingWeek: Optional[WeekPlanModel] = None
    metadata: dict


class SavedWeeklyRoutesResponse(BaseModel):
    user_id: str
    week_number: int
    week_start_date: date
    origin_address: str
    routes: dict
