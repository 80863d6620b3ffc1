"""Runtime checks that a value really is a `WatchList`.

We only prove the container type. The watchers inside it are not
inspected.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from pydantic import InstanceOf, TypeAdapter, ValidationError

from .errors import THROW_THE_ERROR, OnError, UnsupportedTypeError
from .watch_list import WatchList

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "object"

_WATCH_LIST_ADAPTER: TypeAdapter[WatchList[Any]] = TypeAdapter(InstanceOf[WatchList])


def validate_watch_list(path: str, value: Any) -> Union[WatchList[Any], UnsupportedTypeError]:
    """Return `value` if it is a `WatchList`, otherwise the error explaining why not.

    The error is returned, not raised, so callers can chain validators.
    """
    try:
        return _WATCH_LIST_ADAPTER.validate_python(value)
    except ValidationError as exc:
        logger.debug("[validate] %s is not a WatchList: %s", path, exc.errors()[0]["type"])
        return UnsupportedTypeError(
            data_path=path,
            expected="WatchList",
            actual=type(value).__name__,
        )


def is_watch_list(value: Any, *, data_path: str = DEFAULT_DATA_PATH) -> bool:
    return not isinstance(validate_watch_list(data_path, value), UnsupportedTypeError)


def must_be_watch_list(
    value: Any,
    *,
    data_path: str = DEFAULT_DATA_PATH,
    on_error: OnError = THROW_THE_ERROR,
) -> WatchList[Any]:
    """Return `value` unchanged if it is a `WatchList`.

    Otherwise the `UnsupportedTypeError` goes to `on_error`, which raises
    by default. Whatever a custom handler returns is handed back to you.
    """
    result = validate_watch_list(data_path, value)
    if isinstance(result, UnsupportedTypeError):
        return on_error(result)
    return result
