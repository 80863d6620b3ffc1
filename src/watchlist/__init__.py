"""In-memory registry of topics and the watchers subscribed to them."""

from __future__ import annotations

from .defaults import DEFAULT_WATCHLIST_FN_OPTS, default_watchlist_seed
from .errors import (
    THROW_THE_ERROR,
    AppError,
    EmptyTopicListError,
    ErrorDetails,
    OnError,
    UnsupportedTypeError,
)
from .make_watch_list import FunctionalOption, apply_functional_options, make_watch_list
from .settings import RuntimeSettings, load_settings
from .validation import DEFAULT_DATA_PATH, is_watch_list, must_be_watch_list, validate_watch_list
from .watch_list import Unsubscriber, WatchList

__all__ = [
    "WatchList",
    "Unsubscriber",
    "make_watch_list",
    "apply_functional_options",
    "FunctionalOption",
    "DEFAULT_WATCHLIST_FN_OPTS",
    "default_watchlist_seed",
    "validate_watch_list",
    "is_watch_list",
    "must_be_watch_list",
    "DEFAULT_DATA_PATH",
    "AppError",
    "ErrorDetails",
    "UnsupportedTypeError",
    "EmptyTopicListError",
    "OnError",
    "THROW_THE_ERROR",
    "RuntimeSettings",
    "load_settings",
]
