"""Business rules that decide which accounts a week's routes may use."""

from __future__ import annotations

from datetime import date

from ...models.domain import MONTHLY, OCALA, TAMPA, VILLAGES, Account

VILLAGES_WEEKS = frozenset({1, 2})
MONTHLY_WEEK = 1
HALF_DAY_DATES = frozenset({15, 30, 31})

# "DTE Legends" and "DTE Tampa" are legacy region labels; no account in the
# current taxonomy carries them.
FRIDAY_BLOCKED_REGIONS = frozenset({TAMPA, "DTE Legends", "DTE Tampa", OCALA, VILLAGES})


def villages_week(week_number: int) -> bool:
    """Villages accounts are only serviced in the first two weeks of the rotation."""
    return week_number in VILLAGES_WEEKS


def monthly_week(week_number: int) -> bool:
    return week_number == MONTHLY_WEEK


def include_juliet_falls(week_number: int) -> bool:
    """Juliet Falls is visited every other Thursday (odd weeks)."""
    return week_number % 2 == 1


def is_half_day(week_start: date) -> bool:
    """The 15th and the 30th/31st are half days with local stops only."""
    return week_start.day in HALF_DAY_DATES


def block_friday_region(region: str) -> bool:
    return region in FRIDAY_BLOCKED_REGIONS


def is_eligible(account: Account, week_number: int) -> bool:
    if account.region == VILLAGES and not villages_week(week_number):
        return False
    if account.frequency == MONTHLY and not monthly_week(week_number):
        return False
    return True
