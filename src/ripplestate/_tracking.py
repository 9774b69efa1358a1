"""Dependency tracking engine — the heart of ripplestate.

An evaluation stack on the Anchor records which computed key is evaluating.
When a key is read while the stack is non-empty, the top of the stack is
registered as a dependent of that key. Nested evaluations push and pop, so
an outer evaluator's later reads are still attributed to it.

Edges are additive: once recorded they are never removed.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ripplestate._anchor import Anchor
from ripplestate.errors import EvaluationDepthError


def current_dependent(anchor: Anchor) -> str | None:
    """Computed key currently evaluating, or None."""
    return anchor.evaluating[-1] if anchor.evaluating else None


def depend(anchor: Anchor, key: str) -> None:
    """Register the current dependent as a dependent of key. No-op outside evaluation."""
    dependent = current_dependent(anchor)
    if dependent is None:
        return
    edges = anchor.dependencies.get(key)
    if edges is None:
        edges = anchor.dependencies[key] = {}
    edges.setdefault(dependent, None)


def dependents(anchor: Anchor, key: str) -> tuple[str, ...]:
    """Snapshot of key's dependents in the order they were first recorded."""
    edges = anchor.dependencies.get(key)
    return tuple(edges) if edges else ()


@contextmanager
def evaluating(anchor: Anchor, name: str) -> Iterator[None]:
    """Mark name as the current dependent for the duration of the block."""
    anchor.evaluating.append(name)
    try:
        yield
    finally:
        anchor.evaluating.pop()


@contextmanager
def write_guard(anchor: Anchor, key: str) -> Iterator[None]:
    """Count nested writes; fail loudly instead of overflowing the call stack."""
    if anchor.write_depth >= anchor.max_depth:
        raise EvaluationDepthError(
            f"write to {key!r} exceeded max_depth={anchor.max_depth}; "
            "check for cyclic computed dependencies"
        )
    anchor.write_depth += 1
    try:
        yield
    finally:
        anchor.write_depth -= 1
