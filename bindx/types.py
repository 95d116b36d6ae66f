"""
bindx Common Types - Shared Type Definitions
============================================

Type aliases shared by the observable, its registrations and its interface.
Kept in one module so the facade and the implementation agree on callback
shapes without importing each other.
"""

from typing import Any, Callable, Optional, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")

# ============================================================================
# CALLBACK TYPES
# ============================================================================

# Invoked with the new value whenever the observed value changes
Listener = Callable[[T], None]

# Reads the current value
ValueCallback = Callable[[], T]

# Forwarders captured by the interface facade
BindCallback = Callable[[Optional[Listener[T]], Any], None]
BindAndFireCallback = BindCallback
UnbindCallback = Callable[[Any], None]
