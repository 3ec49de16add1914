"""
Redirect targets for legacy page URLs.

Old standalone pages now live as tabs of the brand monitor; these helpers
carry the allowed query params over and pick the tab fragment.
"""

from __future__ import annotations

from urllib.parse import urlencode

from starlette.datastructures import QueryParams

BRAND_MONITOR_PATH = "/brand-monitor"


def forwarded_params(query: QueryParams, allowed: tuple[str, ...]) -> list[tuple[str, str]]:
    """
    Keep allowed params that were sent exactly once with a non-blank value.
    """
    forwarded: list[tuple[str, str]] = []
    for name in allowed:
        values = query.getlist(name)
        if len(values) != 1:
            continue
        value = values[0].strip()
        if value:
            forwarded.append((name, value))
    return forwarded


def redirect_target(query: QueryParams, *, allowed: tuple[str, ...], fragment: str) -> str:
    params = forwarded_params(query, allowed)
    qs = urlencode(params)
    return f"{BRAND_MONITOR_PATH}{'?' + qs if qs else ''}#{fragment}"
