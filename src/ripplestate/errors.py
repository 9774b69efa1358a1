"""Exceptions raised by ripplestate."""


class RippleStateError(Exception):
    """Base class for ripplestate errors."""


class StoreDestroyedError(RippleStateError, RuntimeError):
    """The store was used after destroy()."""


class EvaluationDepthError(RippleStateError, RecursionError):
    """Nested writes went deeper than the store's max_depth.

    Almost always a cyclic computed dependency, or a watcher that writes
    back into a key it is watching.
    """
