"""
bindx ObservableInterface - Read-Only Capability View
=====================================================

The interface is what a producer hands to its consumers. It can read the
current value and manage subscriptions, but it has no way to assign a value:
it only holds four callbacks captured from the owning ObservableValue when
that observable was created.

Example:
    ```python
    class Player:
        def __init__(self):
            self._direction = ObservableValue(Movement.UP)

        @property
        def direction(self) -> ObservableInterface[Movement]:
            return self._direction.interface

    player.direction.bind_and_fire(hud.show_direction, hud)
    ```
"""

from typing import Any, Generic, Optional

from .types import (
    BindAndFireCallback,
    BindCallback,
    Listener,
    T,
    UnbindCallback,
    ValueCallback,
)


class ObservableInterface(Generic[T]):
    """Subscription and value-read surface of an ObservableValue."""

    __slots__ = (
        "_value_callback",
        "_bind_callback",
        "_bind_and_fire_callback",
        "_unbind_callback",
    )

    def __init__(
        self,
        value_callback: ValueCallback[T],
        bind_callback: BindCallback[T],
        bind_and_fire_callback: BindAndFireCallback[T],
        unbind_callback: UnbindCallback,
    ):
        self._value_callback = value_callback
        self._bind_callback = bind_callback
        self._bind_and_fire_callback = bind_and_fire_callback
        self._unbind_callback = unbind_callback

    @property
    def value(self) -> T:
        """The current value of the underlying observable."""
        return self._value_callback()

    def bind(self, listener: Optional[Listener[T]], owner: Any) -> None:
        """
        Register ``listener`` to be called with every new value.

        Args:
            listener: Callback receiving the new value, or None for a placeholder.
            owner: Object the registration belongs to; used as the key for unbind.
        """
        self._bind_callback(listener, owner)

    def bind_and_fire(self, listener: Optional[Listener[T]], owner: Any) -> None:
        """Register ``listener`` and call it right away with the current value."""
        self._bind_and_fire_callback(listener, owner)

    def unbind(self, owner: Any) -> None:
        """Remove every listener registered on behalf of ``owner``."""
        self._unbind_callback(owner)

    def __repr__(self) -> str:
        return f"ObservableInterface({self.value!r})"
