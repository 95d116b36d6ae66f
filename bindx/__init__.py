"""
bindx - Observable Values with Owner-Keyed Bindings

A small observable-value primitive: a container for one value that calls its
bound listeners synchronously whenever the value is assigned, plus a read-only
interface that consumers use to bind, unbind and read.
"""

from .interface import ObservableInterface
from .observable import ObservableValue
from .registration import Registration
from .types import (
    BindAndFireCallback,
    BindCallback,
    Listener,
    UnbindCallback,
    ValueCallback,
)

__all__ = [
    # Core classes
    "ObservableValue",
    "ObservableInterface",
    "Registration",
    # Callback types
    "Listener",
    "ValueCallback",
    "BindCallback",
    "BindAndFireCallback",
    "UnbindCallback",
]
