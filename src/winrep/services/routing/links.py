"""Google Maps navigation links for an ordered list of stops."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import quote

from ...models.domain import Account

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1"

# Characters JavaScript's encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_route_url(origin: str, stops: Sequence[Account]) -> str:
    """Build a round-trip driving URL that starts and ends at ``origin``.

    Returns an empty string when there are no stops.
    """
    if not stops:
        return ""

    encoded_origin = encode_component(origin)
    waypoints = "|".join(encode_component(stop.address) for stop in stops)
    return (
        f"{GOOGLE_MAPS_DIRECTIONS_URL}"
        f"&origin={encoded_origin}"
        f"&destination={encoded_origin}"
        f"&waypoints={waypoints}"
        "&travelmode=driving"
    )
