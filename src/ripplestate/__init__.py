"""ripplestate: a minimal reactive store of data, computed values and watchers."""

from importlib.metadata import version as _version

__version__ = _version("ripplestate")

from ripplestate._anchor import DEFAULT_MAX_DEPTH
from ripplestate.errors import RippleStateError, StoreDestroyedError, EvaluationDepthError
from ripplestate.observable import ObservableData
from ripplestate.computed import ComputedRegistry
from ripplestate.watch import WatcherRegistry
from ripplestate.store import Store

__all__ = [
    "Store",
    "ObservableData",
    "ComputedRegistry",
    "WatcherRegistry",
    "RippleStateError",
    "StoreDestroyedError",
    "EvaluationDepthError",
    "DEFAULT_MAX_DEPTH",
]
