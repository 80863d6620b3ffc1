"""Smart constructor for `WatchList`, plus the functional-option plumbing."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, TypeVar

from .defaults import DEFAULT_WATCHLIST_FN_OPTS, default_watchlist_seed
from .errors import THROW_THE_ERROR, OnError
from .watch_list import WatchList

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


class FunctionalOption(Protocol[V]):
    """A post-construction step: takes the value, returns a (maybe new) value.

    Report problems through `on_error` rather than raising directly.
    """

    def __call__(self, value: V, *, on_error: OnError) -> V: ...


def apply_functional_options(
    value: V,
    fn_opts: Iterable[FunctionalOption[V]],
    *,
    on_error: OnError = THROW_THE_ERROR,
) -> V:
    """Run each option against `value`, left to right, and return the result."""
    for fn_opt in fn_opts:
        value = fn_opt(value, on_error=on_error)
    return value


def make_watch_list(
    initial: Optional[Dict[str, List[T]]] = None,
    *fn_opts: FunctionalOption[WatchList[T]],
    on_error: OnError = THROW_THE_ERROR,
    default_fn_opts: Optional[List[FunctionalOption[WatchList[T]]]] = None,
) -> WatchList[T]:
    """Build a `WatchList`, then run the functional options over it.

    If you pass no `fn_opts`, `default_fn_opts` are run instead
    (`DEFAULT_WATCHLIST_FN_OPTS` unless you say otherwise).
    """
    if initial is None:
        initial = default_watchlist_seed()

    opts: List[FunctionalOption[WatchList[T]]] = list(fn_opts)
    if not opts:
        opts = list(DEFAULT_WATCHLIST_FN_OPTS if default_fn_opts is None else default_fn_opts)

    logger.debug("[make_watch_list] topics=%d fn_opts=%d", len(initial), len(opts))
    return apply_functional_options(WatchList(initial), opts, on_error=on_error)
