"""Tests for BindingRecord."""

import pytest

from button_binder.core.errors import BindingError, InvalidPosition
from button_binder.core.types import BindingRecord


def _accessor():
    return "trigger"


def test_origin_position_is_valid():
    record = BindingRecord("", _accessor, 0, 0)
    assert record.position == (0, 0)
    assert record.usage == ""
    assert not record.is_bound


@pytest.mark.parametrize("row, column", [(-1, 0), (-1, 5), (0, -1), (-3, -3)])
def test_negative_position_rejected(row, column):
    with pytest.raises(InvalidPosition):
        BindingRecord("", _accessor, row, column)


def test_invalid_position_is_a_value_error():
    with pytest.raises(ValueError, match="non-negative"):
        BindingRecord("", _accessor, -1, 2)
    assert issubclass(InvalidPosition, BindingError)


def test_position_is_row_then_column():
    record = BindingRecord("", _accessor, 3, 8)
    assert record.position == (3, 8)
    assert record.row == 3
    assert record.column == 8


def test_usage_is_writable_position_is_not():
    record = BindingRecord("", _accessor, 1, 4)
    record.usage = "Intake"
    assert record.usage == "Intake"
    assert record.is_bound
    with pytest.raises(AttributeError):
        record.position = (0, 0)  # type: ignore[misc]
    with pytest.raises(AttributeError):
        record.trigger_accessor = _accessor  # type: ignore[misc]


def test_accessor_not_called_on_construction():
    calls = []
    record = BindingRecord("", lambda: calls.append(1), 0, 0)
    assert calls == []
    record.trigger_accessor()
    assert calls == [1]


def test_repr():
    assert repr(BindingRecord("Shoot", _accessor, 2, 4)) == "BindingRecord(usage='Shoot', position=(2, 4))"
