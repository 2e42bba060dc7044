"""Serializers for weekly route outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from typing import Iterable

from ...models.domain import Account, WeeklyRoutes


def account_to_json(account: Account) -> dict:
    payload = asdict(account)
    payload["tags"] = list(account.tags)
    return payload


def weekly_routes_to_json(routes: WeeklyRoutes) -> dict:
    """Six day keys, each ``{"stops": [...], "googleRoute": "..."}``."""
    return {
        day: {
            "stops": [account_to_json(stop) for stop in route.stops],
            "googleRoute": route.google_route,
        }
        for day, route in routes.items()
    }


def weekly_routes_to_csv(weeks: Iterable[tuple[str, WeeklyRoutes]]) -> str:
    """One row per stop for each ``(week_start_date, routes)`` pair."""
    buffer = io.StringIO()
    fieldnames = [
        "week_start_date",
        "day",
        "sequence",
        "account_id",
        "name",
        "address",
        "region",
        "frequency",
        "tags",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for week_start_date, routes in weeks:
        for day, route in routes.items():
            for sequence, stop in enumerate(route.stops, start=1):
                writer.writerow(
                    {
                        "week_start_date": week_start_date,
                        "day": day,
                        "sequence": sequence,
                        "account_id": stop.id,
                        "name": stop.name,
                        "address": stop.address,
                        "region": stop.region,
                        "frequency": stop.frequency,
                        "tags": ";".join(stop.tags),
                    }
                )
    return buffer.getvalue()
