from watchlist import WatchList

ValidWatchLists = [
    WatchList(),
    WatchList({}),
    WatchList({"topic1": ["watcher1"]}),
    WatchList({"topic1": [], "topic2": ["watcher1", "watcher2"]}),
]

InvalidWatchLists = [
    None,
    True,
    0,
    3.1415,
    "topic1",
    [],
    ["watcher1"],
    {},
    {"topic1": ["watcher1"]},
    object(),
    WatchList,
]
