from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from .errors import EmptyTopicListError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Unsubscriber = Callable[[], None]


class WatchList(Generic[T]):
    """Keeps track of which watchers are interested in which topics.

    A watcher can be anything (usually a callback). We never call the
    watchers ourselves: use `for_each()` to visit the ones registered
    against the topics you care about.

    The `initial` mapping is used as-is, not copied. Once you hand it
    over, only this `WatchList` should change it.
    """

    def __init__(self, initial: Optional[Dict[str, List[T]]] = None):
        self._topics_and_watchers: Dict[str, List[T]] = initial if initial is not None else {}

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def add(self, watcher: T, *topics: str) -> Unsubscriber:
        """Register `watcher` against every topic in `topics`.

        Returns a callable that unsubscribes `watcher` from all of those
        topics again. It is safe to call it more than once.
        """
        if not topics:
            raise EmptyTopicListError("add")

        unsubs = [self._register_watcher_for_topic(topic, watcher) for topic in topics]

        def unsubscribe() -> None:
            for unsub in unsubs:
                unsub()

        return unsubscribe

    def _register_watcher_for_topic(self, topic: str, watcher: T) -> Unsubscriber:
        if topic not in self._topics_and_watchers:
            logger.debug("[watchlist] new topic=%s", topic)
            self._topics_and_watchers[topic] = []
        self._topics_and_watchers[topic].append(watcher)

        def unsubscribe() -> None:
            # the topic may already be gone if we've been called before
            watchers = self._topics_and_watchers.get(topic)
            if watchers is None:
                return
            # this exact instance, first occurrence only; an equal but
            # different watcher keeps its own slot
            index = next((i for i, w in enumerate(watchers) if w is watcher), None)
            if index is None:
                return
            del watchers[index]

            if not watchers:
                logger.debug("[watchlist] dropping empty topic=%s", topic)
                del self._topics_and_watchers[topic]

        return unsubscribe

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def for_each(self, callback: Callable[[T, str], None], *topics: str) -> None:
        """Call `callback(watcher, topic)` for every watcher of `topics`.

        Topics are visited in the order given, watchers in the order they
        were added. Unknown topics are skipped.
        """
        if not topics:
            raise EmptyTopicListError("for_each")

        for topic in topics:
            # copy, so callbacks can (un)subscribe while we walk the list
            for watcher in list(self._topics_and_watchers.get(topic, [])):
                callback(watcher, topic)

    def topics(self) -> List[str]:
        """Return the topics we currently know about (order not guaranteed)."""
        return list(self._topics_and_watchers.keys())

    @property
    def length(self) -> int:
        """Number of registrations; a watcher on two topics counts twice."""
        return sum(len(watchers) for watchers in self._topics_and_watchers.values())

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"WatchList(topics={len(self._topics_and_watchers)}, watchers={self.length})"
