"""Watchers — callbacks notified with the new value whenever a key changes."""

from __future__ import annotations

from typing import Callable

from ripplestate._anchor import Anchor

Watcher = Callable[[object], None]
Disposer = Callable[[], None]


class WatcherRegistry:
    """Ordered per-key callback lists for one store."""

    __slots__ = ("_anchor",)

    def __init__(self, anchor: Anchor) -> None:
        self._anchor = anchor

    def register(self, name: str, callback: Watcher) -> Disposer:
        """Append callback to name's list. Returns a function that removes it.

        The callback is not invoked now, and name does not need to exist yet.
        """
        if not callable(callback):
            raise TypeError(f"watcher for {name!r} must be callable, got {type(callback).__name__}")
        self._anchor.check_alive()
        self._anchor.watchers.setdefault(name, []).append(callback)

        def _unwatch() -> None:
            callbacks = self._anchor.watchers.get(name)
            if not callbacks:
                return
            try:
                callbacks.remove(callback)
            except ValueError:
                return  # already removed
            if not callbacks:
                del self._anchor.watchers[name]

        return _unwatch

    def notify(self, name: str, value: object) -> None:
        """Call name's watchers in registration order. Exceptions propagate."""
        for callback in list(self._anchor.watchers.get(name, ())):
            callback(value)
