"""Unit tests for owner-keyed registrations."""

import pytest

from bindx import Registration
from tests.utils.memory_utils import collect
from tests.utils.owners import Owner, SlottedOwner


@pytest.mark.unit
def test_registration_matches_its_owner_by_identity():
    """Registration matches the exact owner object it was created for"""
    owner = Owner("a")
    registration = Registration(owner, lambda value: None)

    assert registration.matches(owner)
    assert registration.owner is owner
    assert registration.is_alive


@pytest.mark.unit
def test_registration_does_not_match_equal_but_distinct_owner():
    """Owners that compare equal are still different owners"""
    # Arrange
    first, second = Owner("a"), Owner("b")
    assert first == second

    # Act
    registration = Registration(first, lambda value: None)

    # Assert
    assert not registration.matches(second)


@pytest.mark.unit
def test_registration_fire_calls_listener_with_value():
    """fire() passes the value to the listener"""
    owner = Owner()
    received = []
    registration = Registration(owner, received.append)

    registration.fire(3)

    assert received == [3]


@pytest.mark.unit
def test_registration_without_listener_fires_as_noop():
    """A placeholder registration can be fired without effect"""
    owner = Owner()
    registration = Registration(owner)

    registration.fire("ignored")

    assert registration.listener is None


@pytest.mark.edge_case
@pytest.mark.unit
def test_registration_does_not_keep_owner_alive():
    """Collected owners leave a stale registration behind"""
    # Arrange
    owner = Owner("short-lived")
    called = False

    def listener(value):
        nonlocal called
        called = True

    registration = Registration(owner, listener)

    # Act
    del owner
    collect()
    registration.fire("ignored")

    # Assert
    assert not registration.is_alive
    assert registration.owner is None
    assert not called
    assert "<dead>" in repr(registration)


@pytest.mark.edge_case
@pytest.mark.unit
def test_stale_registration_matches_nothing_and_never_fires():
    """A dead registration neither matches an owner nor invokes its listener"""
    owner = Owner("short-lived")
    received = []
    registration = Registration(owner, received.append)

    del owner
    collect()
    registration.fire(1)

    assert received == []
    assert not registration.matches(None)
    assert not registration.matches(Owner())


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.parametrize("owner", [SlottedOwner(), "label", (1, 2), 7])
def test_non_weakrefable_owner_is_rejected(owner):
    """Owners that refuse weak references cannot be registered"""
    with pytest.raises(TypeError):
        Registration(owner, lambda value: None)
