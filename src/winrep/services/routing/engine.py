"""Weekly route assignment.

Accounts are partitioned into six day buckets by sequential slicing of
per-region lists. Slice boundaries and bucket order are fixed; a change
here moves stops between a rep's days.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from ...models.domain import (
    FIRST_STOP,
    HAINES_CITY,
    JULIET_FALLS,
    LAKELAND,
    LAST_STOP,
    OCALA,
    ORLANDO,
    REGIONS,
    TAMPA,
    VILLAGES,
    Account,
    DailyRoute,
    WeeklyRoutes,
)
from .links import build_route_url
from .rules import (
    block_friday_region,
    include_juliet_falls,
    is_eligible,
    is_half_day,
    villages_week,
)

MONDAY_MAX_STOPS = 7
MONDAY_LAKELAND_STOPS = 4
MONDAY_HAINES_CITY_STOPS = 3
TUESDAY_MAX_STOPS = 7
WEDNESDAY_MAX_STOPS = 7
THURSDAY_OCALA_STOPS = 5
FRIDAY_MIDDLE_STOPS = 5
FLEX_DAY_STOPS = 4
HALF_DAY_STOPS = 3

Buckets = dict[str, list[Account]]


def filter_eligible(accounts: Sequence[Account], week_number: int) -> list[Account]:
    return [account for account in accounts if is_eligible(account, week_number)]


def group_by_region(accounts: Sequence[Account]) -> Buckets:
    """Split accounts into one list per known region, keeping input order."""
    grouped: Buckets = {region: [] for region in REGIONS}
    for account in accounts:
        bucket = grouped.get(account.region)
        if bucket is not None:
            bucket.append(account)
    return grouped


def _find_tagged(accounts: Sequence[Account], tag: str) -> Account | None:
    # first match wins when several accounts carry the same tag
    return next((account for account in accounts if account.has_tag(tag)), None)


def _monday(grouped: Buckets) -> list[Account]:
    stops = grouped[LAKELAND][:MONDAY_LAKELAND_STOPS] + grouped[HAINES_CITY][:MONDAY_HAINES_CITY_STOPS]
    return stops[:MONDAY_MAX_STOPS]


def _tuesday(grouped: Buckets) -> list[Account]:
    return grouped[TAMPA][:TUESDAY_MAX_STOPS]


def _wednesday(grouped: Buckets, week_number: int) -> list[Account]:
    if not villages_week(week_number):
        return []
    return grouped[VILLAGES][:WEDNESDAY_MAX_STOPS]


def _thursday(grouped: Buckets, accounts: Sequence[Account], week_number: int) -> list[Account]:
    stops = grouped[OCALA][:THURSDAY_OCALA_STOPS]
    if include_juliet_falls(week_number):
        # Searched in the unfiltered input, and not deduplicated against other days.
        juliet = _find_tagged(accounts, JULIET_FALLS)
        if juliet is not None:
            stops = [juliet, *stops]
    return stops


def _friday(grouped: Buckets) -> list[Account]:
    orlando = [account for account in grouped[ORLANDO] if not block_friday_region(account.region)]

    first = _find_tagged(orlando, FIRST_STOP)
    last = _find_tagged(orlando, LAST_STOP)
    middle = [
        account
        for account in orlando
        if not account.has_tag(FIRST_STOP) and not account.has_tag(LAST_STOP)
    ][:FRIDAY_MIDDLE_STOPS]

    return [account for account in (first, *middle, last) if account is not None]


def _flex_day(grouped: Buckets) -> list[Account]:
    return grouped[LAKELAND][MONDAY_LAKELAND_STOPS:MONDAY_LAKELAND_STOPS + FLEX_DAY_STOPS]


def _daily_route(origin: str, stops: Sequence[Account]) -> DailyRoute:
    return DailyRoute(stops=tuple(stops), google_route=build_route_url(origin, stops))


def assign_weekly_routes(
    accounts: Sequence[Account],
    week_number: int,
    week_start_date: date,
    origin: str,
) -> WeeklyRoutes:
    """Assign a rep's active accounts to the days of one week.

    Args:
        accounts: Active accounts in the order they should be considered.
        week_number: Rotation week (1-53); only used for parity/modulo rules.
        week_start_date: First day of the week; only its day of month matters.
        origin: Start and end address for every navigation link.

    Returns:
        A WeeklyRoutes with six day buckets. Half-day weeks keep only a short
        local Friday.
    """
    grouped = group_by_region(filter_eligible(accounts, week_number))

    if is_half_day(week_start_date):
        return WeeklyRoutes(friday=_daily_route(origin, grouped[LAKELAND][:HALF_DAY_STOPS]))

    return WeeklyRoutes(
        monday=_daily_route(origin, _monday(grouped)),
        tuesday=_daily_route(origin, _tuesday(grouped)),
        wednesday=_daily_route(origin, _wednesday(grouped, week_number)),
        thursday=_daily_route(origin, _thursday(grouped, accounts, week_number)),
        friday=_daily_route(origin, _friday(grouped)),
        flex_day=_daily_route(origin, _flex_day(grouped)),
    )
