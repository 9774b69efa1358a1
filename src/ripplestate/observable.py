"""Observable data — the interception layer in front of a store's values.

Every read goes through get(): inside a computed evaluation it registers the
evaluating key as a dependent of the key read. Every write goes through
set(): a computed key is re-evaluated (the written value is discarded), a data
key is stored, and in both cases watchers are notified and dependents are
invalidated before set() returns.

Item syntax (data["k"], data["k"] = v, "k" in data) routes to the same paths.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ripplestate import _tracking
from ripplestate._anchor import Anchor
from ripplestate.watch import WatcherRegistry

logger = logging.getLogger(__name__)


class ObservableData:
    """Dict-like accessor whose reads are tracked and whose writes propagate."""

    __slots__ = ("_anchor", "_watchers")

    def __init__(self, anchor: Anchor, watchers: WatcherRegistry) -> None:
        self._anchor = anchor
        self._watchers = watchers

    # --- Read operations (track) ---

    def get(self, key: str, default: object = None) -> object:
        """Read key. Returns default when key was never written."""
        self._anchor.check_alive()
        _tracking.depend(self._anchor, key)
        return self._anchor.values.get(key, default)

    def __getitem__(self, key: str) -> object:
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        self._anchor.check_alive()
        _tracking.depend(self._anchor, key)
        return key in self._anchor.values

    # --- Untracked views ---

    def keys(self):
        self._anchor.check_alive()
        return self._anchor.values.keys()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        self._anchor.check_alive()
        return len(self._anchor.values)

    def to_dict(self) -> dict[str, object]:
        """Copy of the current values. Does not register dependencies."""
        self._anchor.check_alive()
        return dict(self._anchor.values)

    # --- Write operations (propagate) ---

    def set(self, key: str, value: object) -> None:
        """Write key and propagate synchronously.

        For a computed key, value is only an invalidation trigger: the
        evaluator runs and its result is what gets stored.
        """
        anchor = self._anchor
        anchor.check_alive()
        with _tracking.write_guard(anchor, key):
            evaluator = anchor.computed_fns.get(key)
            if evaluator is not None:
                with _tracking.evaluating(anchor, key):
                    value = evaluator()
            anchor.values[key] = value
            self._watchers.notify(key, value)
            self._invalidate_dependents(key)

    def __setitem__(self, key: str, value: object) -> None:
        self.set(key, value)

    def _invalidate_dependents(self, key: str) -> None:
        """Force recomputation of every computed key that has read key."""
        targets = _tracking.dependents(self._anchor, key)
        if not targets:
            return
        logger.debug("Invalidating %d dependents of %r: %s", len(targets), key, ", ".join(targets))
        for dependent in targets:
            self.set(dependent, None)

    def __repr__(self) -> str:
        if self._anchor.destroyed:
            return "ObservableData(<destroyed>)"
        return f"ObservableData({self._anchor.values!r})"
