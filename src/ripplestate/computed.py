"""Computed values — derived state with automatic dependency tracking.

A computed key is backed by a zero-argument evaluator. Registering it runs
the evaluator once through a synthetic write, which stores the first value
and records every key the evaluator reads. From then on, a write to any of
those keys re-runs the evaluator eagerly, before the write returns.
"""

from __future__ import annotations

import logging
from typing import Callable

from ripplestate._anchor import Anchor
from ripplestate.observable import ObservableData

logger = logging.getLogger(__name__)

Evaluator = Callable[[], object]


class ComputedRegistry:
    """Evaluators of one store, keyed by computed name."""

    __slots__ = ("_anchor", "_data")

    def __init__(self, anchor: Anchor, data: ObservableData) -> None:
        self._anchor = anchor
        self._data = data

    def register(self, name: str, evaluator: Evaluator) -> None:
        """Store or replace name's evaluator, then evaluate it.

        Edges recorded by a previous evaluator stay in place. If the first
        evaluation raises, the evaluator remains registered.
        """
        if not callable(evaluator):
            raise TypeError(f"computed {name!r} must be callable, got {type(evaluator).__name__}")
        self._anchor.check_alive()
        replaced = name in self._anchor.computed_fns
        self._anchor.computed_fns[name] = evaluator
        logger.debug("%s computed %r", "Replaced" if replaced else "Registered", name)
        self._data.set(name, None)

    def is_computed(self, name: str) -> bool:
        return name in self._anchor.computed_fns
