"""Data anchor — plain Python structures that hold one store's reactive state.

Every map the runtime needs lives on a single Anchor instance. The behavior
modules (observable, computed, watch, _tracking) only hold a reference to it,
so several stores can coexist without sharing anything.
"""

from __future__ import annotations

import sys
from typing import Callable, Mapping

from ripplestate.errors import StoreDestroyedError

# A nested write costs two to three interpreter frames.
DEFAULT_MAX_DEPTH = sys.getrecursionlimit() // 4


class Anchor:
    """Backing table, dependency edges, evaluators and watchers of one store."""

    __slots__ = (
        "values",
        "dependencies",
        "computed_fns",
        "watchers",
        "evaluating",
        "write_depth",
        "max_depth",
        "destroyed",
    )

    def __init__(self, data: Mapping[str, object] | None = None, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ValueError(f"max_depth must be a positive int, got {max_depth!r}")
        self.values: dict[str, object] = dict(data) if data else {}
        self.dependencies: dict[str, dict[str, None]] = {}  # source -> ordered dependents
        self.computed_fns: dict[str, Callable[[], object]] = {}
        self.watchers: dict[str, list[Callable[[object], None]]] = {}
        self.evaluating: list[str] = []  # top is the current dependent
        self.write_depth = 0
        self.max_depth = max_depth
        self.destroyed = False

    def check_alive(self) -> None:
        if self.destroyed:
            raise StoreDestroyedError("store destroyed")

    def release(self) -> None:
        """Drop every reference held by the store."""
        self.values.clear()
        self.dependencies.clear()
        self.computed_fns.clear()
        self.watchers.clear()
        self.destroyed = True
