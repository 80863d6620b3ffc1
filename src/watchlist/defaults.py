from __future__ import annotations

from typing import Any, Dict, List

# Functional options applied by `make_watch_list()` when the caller
# passes none of their own.
DEFAULT_WATCHLIST_FN_OPTS: List[Any] = []


def default_watchlist_seed() -> Dict[str, List[Any]]:
    """A fresh, empty topic -> watchers mapping."""
    return {}
