"""Domain models for route accounts and weekly route plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

LAKELAND = "Lakeland"
HAINES_CITY = "HainesCity"
TAMPA = "Tampa"
ORLANDO = "Orlando"
VILLAGES = "Villages"
OCALA = "Ocala"

REGIONS: tuple[str, ...] = (LAKELAND, HAINES_CITY, TAMPA, ORLANDO, VILLAGES, OCALA)

WEEKLY = "weekly"
BIWEEKLY = "biweekly"
MONTHLY = "monthly"

FREQUENCIES: tuple[str, ...] = (WEEKLY, BIWEEKLY, MONTHLY)

PRIORITIES: tuple[str, ...] = ("low", "medium", "high")

FIRST_STOP = "firstStop"
LAST_STOP = "lastStop"
JULIET_FALLS = "julietFalls"

TAGS: tuple[str, ...] = (FIRST_STOP, LAST_STOP, JULIET_FALLS)

DAYS: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "FlexDay")


@dataclass(frozen=True, slots=True)
class Account:
    """A customer stop owned by a sales rep.

    ``region`` keeps whatever string the store holds; only values listed in
    ``REGIONS`` are ever grouped into a day.
    """

    id: str
    name: str
    address: str
    region: str
    frequency: str = WEEKLY
    priority: str = "medium"
    tags: tuple[str, ...] = ()
    notes: Optional[str] = None
    priority_score: Optional[float] = None
    is_active: bool = True

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


@dataclass(frozen=True, slots=True)
class DailyRoute:
    stops: tuple[Account, ...] = ()
    google_route: str = ""


@dataclass(frozen=True, slots=True)
class WeeklyRoutes:
    """Six day buckets produced for one week and one origin."""

    monday: DailyRoute = field(default_factory=DailyRoute)
    tuesday: DailyRoute = field(default_factory=DailyRoute)
    wednesday: DailyRoute = field(default_factory=DailyRoute)
    thursday: DailyRoute = field(default_factory=DailyRoute)
    friday: DailyRoute = field(default_factory=DailyRoute)
    flex_day: DailyRoute = field(default_factory=DailyRoute)

    def items(self) -> Iterator[tuple[str, DailyRoute]]:
        """Yield ``(day_name, route)`` pairs in calendar order."""
        routes = (self.monday, self.tuesday, self.wednesday, self.thursday, self.friday, self.flex_day)
        return iter(zip(DAYS, routes))

    def day(self, name: str) -> DailyRoute:
        for day_name, route in self.items():
            if day_name == name:
                return route
        raise KeyError(name)

    @property
    def total_stops(self) -> int:
        return sum(len(route.stops) for _, route in self.items())
