"""General utility helpers for rngarena."""

from __future__ import annotations

_ELLIPSIS = "..."


def display_name(name: str, limit: int = 18) -> str:
    """Shorten *name* for narrow displays, keeping it at *limit* characters."""

    if len(name) <= limit:
        return name
    return name[: limit - len(_ELLIPSIS)] + _ELLIPSIS


__all__ = ["display_name"]
