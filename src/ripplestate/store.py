"""Store — named data and computed values with watchers.

A Store owns one Anchor and wires the interception layer, the computed
registry and the watcher registry around it. Nothing is shared between
stores.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from ripplestate import _tracking
from ripplestate._anchor import Anchor, DEFAULT_MAX_DEPTH
from ripplestate.computed import ComputedRegistry
from ripplestate.observable import ObservableData
from ripplestate.watch import WatcherRegistry

logger = logging.getLogger(__name__)


class Store:
    """Reactive store built from an initial mapping of data values.

    Usage:
        store = Store({"price": 10, "qty": 2})
        store.computed(total=lambda: store.data["price"] * store.data["qty"])
        store.watch(total=print)

        store.data["price"] = 15   # prints 30
        store.get("total")         # 30
    """

    def __init__(self, data: Mapping[str, object] | None = None, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._anchor = Anchor(data, max_depth=max_depth)
        self._watchers = WatcherRegistry(self._anchor)
        self._data = ObservableData(self._anchor, self._watchers)
        self._computed = ComputedRegistry(self._anchor, self._data)
        logger.debug("Created store with %d data keys", len(self._anchor.values))

    @property
    def data(self) -> ObservableData:
        """The live accessor. Reads and writes through it are reactive."""
        self._anchor.check_alive()
        return self._data

    @property
    def destroyed(self) -> bool:
        return self._anchor.destroyed

    def get(self, key: str, default: object = None) -> object:
        return self.data.get(key, default)

    def set(self, key: str, value: object) -> None:
        self.data.set(key, value)

    def computed(self, defs: Mapping[str, Callable[[], object]] | None = None, /, **kwargs: Callable[[], object]) -> None:
        """Register computed evaluators, evaluating each one immediately."""
        self._anchor.check_alive()
        for name, evaluator in _entries(defs, kwargs):
            self._computed.register(name, evaluator)

    def watch(self, defs: Mapping[str, Callable[[object], None]] | None = None, /, **kwargs: Callable[[object], None]) -> None:
        """Register watchers. None of them is called until its key changes."""
        self._anchor.check_alive()
        for name, callback in _entries(defs, kwargs):
            self._watchers.register(name, callback)

    def watcher(self, name: str, callback: Callable[[object], None]) -> Callable[[], None]:
        """Register a single watcher and return a disposer that removes it."""
        return self._watchers.register(name, callback)

    def dependents(self, key: str) -> tuple[str, ...]:
        """Computed keys that have read key, in first-read order."""
        self._anchor.check_alive()
        return _tracking.dependents(self._anchor, key)

    def is_computed(self, key: str) -> bool:
        self._anchor.check_alive()
        return self._computed.is_computed(key)

    def destroy(self) -> None:
        """Release all state. Any later access raises StoreDestroyedError."""
        if self._anchor.destroyed:
            return
        self._anchor.release()
        logger.debug("Store destroyed")

    def __repr__(self) -> str:
        if self._anchor.destroyed:
            return "Store(<destroyed>)"
        computed = sorted(self._anchor.computed_fns)
        data = sorted(k for k in self._anchor.values if k not in self._anchor.computed_fns)
        return f"Store(data={data}, computed={computed})"


def _entries(defs, kwargs):
    if defs:
        yield from defs.items()
    yield from kwargs.items()
