"""Route account API schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

RegionName = Literal["Lakeland", "HainesCity", "Tampa", "Orlando", "Villages", "Ocala"]
FrequencyName = Literal["weekly", "biweekly", "monthly"]
PriorityName = Literal["low", "medium", "high"]
TagName = Literal["firstStop", "lastStop", "julietFalls"]


class AccountModel(BaseModel):
    id: str
    name: str
    address: str
    region: str
    frequency: str
    priority: str
    tags: List[str]
    notes: Optional[str] = None
    priority_score: Optional[float] = None
    is_active: bool = True


class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    region: RegionName = "Lakeland"
    frequency: FrequencyName = "weekly"
    priority: PriorityName = "medium"
    tags: List[TagName] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=2000)


class AccountUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    address: Optional[str] = Field(default=None, min_length=1, max_length=500)
    region: Optional[RegionName] = None
    frequency: Optional[FrequencyName] = None
    priority: Optional[PriorityName] = None
    tags: Optional[List[TagName]] = None
    notes: Optional[str] = Field(default=None, max_length=2000)


class AccountListResponse(BaseModel):
    items: List[AccountModel]
    total: int
