"""
bindx Registration - Listener Entries Keyed by Owner Identity
=============================================================

A registration pairs a listener with the object that registered it. The owner
is held through a weak reference, so binding never keeps an owner alive; once
the owner is collected the registration is stale and is pruned on the next
unbind pass.

Owners must support weak references. Builtins such as ``int``, ``str`` and
``tuple``, and slotted classes without ``__weakref__``, are rejected with the
``TypeError`` raised by ``weakref.ref``.
"""

import weakref
from typing import Any, Generic, Optional

from .types import Listener, T


class Registration(Generic[T]):
    """One listener registered on behalf of one owner."""

    __slots__ = ("_owner_ref", "listener")

    def __init__(self, owner: Any, listener: Optional[Listener[T]] = None):
        self._owner_ref = weakref.ref(owner)
        self.listener = listener

    @property
    def owner(self) -> Optional[Any]:
        """The owner, or None once it has been collected."""
        return self._owner_ref()

    @property
    def is_alive(self) -> bool:
        return self._owner_ref() is not None

    def matches(self, owner: Any) -> bool:
        """Identity test against ``owner``; a dead registration matches nothing."""
        current = self._owner_ref()
        return current is not None and current is owner

    def fire(self, value: T) -> None:
        """Invoke the listener with ``value`` if there is one and the owner is alive."""
        if self.listener is not None and self.is_alive:
            self.listener(value)

    def __repr__(self) -> str:
        current = self._owner_ref()
        owner = "<dead>" if current is None else repr(current)
        return f"Registration(owner={owner}, listener={self.listener!r})"
