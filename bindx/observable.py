"""
bindx ObservableValue - Value Owner and Listener Registry
=========================================================

An ObservableValue holds a single value and an ordered list of registrations.
Assigning a value notifies every registered listener synchronously, in
registration order, before the assignment returns.

Only the producer should keep the ObservableValue itself. Consumers get its
``interface``, which can bind and unbind listeners and read the value but
cannot assign it.

Key Features:
- Notification on every assignment, equal values included
- Owners held by weak reference, so binding never keeps an owner alive
- Identity-based unbind that also prunes registrations of collected owners
- Listeners may bind or unbind during a notification pass
"""

import logging
from typing import Any, Generic, List, Optional

from .interface import ObservableInterface
from .registration import Registration
from .types import Listener, T

logger = logging.getLogger(__name__)


class ObservableValue(Generic[T]):
    """
    A value that notifies bound listeners whenever it is assigned.

    Example:
        ```python
        direction = ObservableValue(Movement.UP)
        direction.interface.bind(lambda m: print(f"moving {m.name}"), hud)
        direction.value = Movement.RIGHT  # prints: moving RIGHT
        direction.interface.unbind(hud)
        ```
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._registrations: List[Registration[T]] = []
        self._interface = ObservableInterface(
            value_callback=self.current_value,
            bind_callback=self.bind,
            bind_and_fire_callback=self.bind_and_fire,
            unbind_callback=self.unbind,
        )

    @property
    def interface(self) -> ObservableInterface[T]:
        """Read-only handle for consumers; the same object for the observable's lifetime."""
        return self._interface

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value
        self._notify(value)

    def set(self, value: T) -> "ObservableValue[T]":
        """Assign ``value`` and notify listeners. Returns self for chaining."""
        self.value = value
        return self

    def current_value(self) -> T:
        return self._value

    @property
    def observer_count(self) -> int:
        """Number of registrations, including placeholders and not yet pruned stale ones."""
        return len(self._registrations)

    def bind(self, listener: Optional[Listener[T]], owner: Any) -> None:
        """
        Append a registration for ``owner``.

        Binding the same owner more than once adds independent registrations;
        all of them are removed together by a single ``unbind(owner)``.

        Args:
            listener: Callback receiving each new value. None registers a
                placeholder that is counted but never called.
            owner: Object the registration belongs to. Held weakly.

        Raises:
            TypeError: If ``owner`` cannot be weakly referenced.
        """
        self._registrations.append(Registration(owner, listener))
        logger.debug(
            f"Bound listener for {type(owner).__name__} ({len(self._registrations)} registrations)"
        )

    def bind_and_fire(self, listener: Optional[Listener[T]], owner: Any) -> None:
        """Bind ``listener`` for ``owner``, then call it once with the current value."""
        self.bind(listener, owner)
        if listener is not None:
            logger.debug("Firing listener with current value")
            listener(self._value)

    def unbind(self, owner: Any) -> None:
        """
        Remove every registration of ``owner``.

        Registrations whose owner has been garbage collected are removed as
        well, whichever owner is asked for. Unbinding an owner with no
        registrations only prunes stale entries.
        """
        kept: List[Registration[T]] = []
        removed = pruned = 0
        for registration in self._registrations:
            if not registration.is_alive:
                pruned += 1
            elif registration.matches(owner):
                removed += 1
            else:
                kept.append(registration)
        self._registrations = kept

        if removed or pruned:
            logger.debug(
                f"Unbound {removed} registrations for {type(owner).__name__}, pruned {pruned} stale"
            )

    def _notify(self, value: T) -> None:
        # Listeners may bind or unbind while we iterate
        for registration in tuple(self._registrations):
            registration.fire(value)

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r}, observers={self.observer_count})"
