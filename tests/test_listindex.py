"""Indexed access tests."""

import logging

import pytest

import listoptions
from LinkedList import LinkedList, elements, nil
from listindex import ElementIndexError, elementAt, elementAtRecursive

BOTH = [elementAt, elementAtRecursive]


@pytest.mark.parametrize("at", BOTH)
def test_every_valid_index(at, build) -> None:
    """Position i is the element reached after i steps from the head."""
    items = ["a", "b", "c", "d"]
    l = build(items)
    for i, expected in enumerate(items):
        assert at(l, i) == expected


@pytest.mark.parametrize("at", BOTH)
def test_past_the_end(at, build) -> None:
    """The length itself and anything beyond it are out of bounds."""
    l = build([1, 2, 3])
    for i in (3, 4, 50):
        with pytest.raises(ElementIndexError):
            at(l, i)


@pytest.mark.parametrize("at", BOTH)
def test_empty_list(at) -> None:
    """Even index 0 fails on the empty list, and it is an IndexError."""
    with pytest.raises(IndexError):
        at(nil, 0)
    with pytest.raises(ElementIndexError):
        at(None, 0)


@pytest.mark.parametrize("at", BOTH)
def test_negative_index(at) -> None:
    """Negative indices don't count from the end."""
    with pytest.raises(ElementIndexError) as info:
        at(LinkedList([1, 2, 3]), -1)
    assert info.value.index == -1
    assert info.value.remaining is None
    assert "negative" in str(info.value)


@pytest.mark.parametrize("at", BOTH)
def test_error_reports_requested_index(at) -> None:
    """By default the message quotes the index asked for; both numbers are attributes."""
    with pytest.raises(ElementIndexError) as info:
        at(LinkedList([1, 2, 3]), 5)
    assert info.value.index == 5
    assert info.value.remaining == 2
    assert str(info.value) == "list index 5 out of range"


@pytest.mark.parametrize("at", BOTH)
def test_error_can_report_remaining(at) -> None:
    """reportRemaining quotes the countdown left when the list ran out."""
    opts = listoptions.listoptions(reportRemaining=True)
    with pytest.raises(ElementIndexError) as info:
        at(LinkedList([1, 2, 3]), 5, options=opts)
    assert info.value.index == 5
    assert info.value.remaining == 2
    assert str(info.value) == "list index out of range, 2 left to go at the end"

    with pytest.raises(ElementIndexError) as info:
        at(nil, 0, options=opts)
    assert info.value.remaining == 0


def test_recoverable() -> None:
    """Callers can probe and carry on."""
    l = LinkedList([1, 2])
    found = []
    for i in range(5):
        try:
            found.append(elementAt(l, i))
        except IndexError:
            break
    assert found == [1, 2]


def test_does_not_mutate(build) -> None:
    l = build([1, 2, 3])
    elementAt(l, 2)
    with pytest.raises(ElementIndexError):
        elementAt(l, 3)
    assert list(elements(l)) == [1, 2, 3]


def test_long_list() -> None:
    """The loop reaches the far end of a long list."""
    l = LinkedList(range(100000))
    assert elementAt(l, 99999) == 99999
    with pytest.raises(ElementIndexError):
        elementAt(l, 100000)
    with pytest.raises(RecursionError):
        elementAtRecursive(l, 99999)


def test_failure_is_logged(caplog) -> None:
    """Running off the end leaves a debug record."""
    caplog.set_level(logging.DEBUG, logger="listindex")
    with pytest.raises(ElementIndexError):
        elementAt(LinkedList([1]), 4)
    assert "elementAt(4) ran off the end with 3 to go" in caplog.text
