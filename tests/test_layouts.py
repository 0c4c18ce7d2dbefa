"""Tests for the device layout registry."""

import pytest

from button_binder.core.registry import ButtonBinder
from button_binder.layouts import LAYOUTS, get_layout, register
from button_binder.layouts.xbox import XBOX_LAYOUT


def test_builtin_layouts_registered():
    assert {"xbox", "ps4"} <= set(LAYOUTS)


def test_xbox_reference_positions():
    positions = {spec.name: (spec.row, spec.column) for spec in XBOX_LAYOUT}
    assert [positions[n] for n in ("a", "b", "x", "y")] == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert [positions[n] for n in ("leftBumper", "rightBumper", "leftTrigger", "rightTrigger", "leftStick", "rightStick")] == [
        (r, 4) for r in range(6)
    ]
    assert [positions[n] for n in ("start", "back")] == [(0, 8), (1, 8)]


def test_layouts_have_unique_names():
    for layout in LAYOUTS.values():
        names = [spec.name for spec in layout]
        assert len(names) == len(set(names))


def test_ps4_mirrors_xbox_positions():
    ps4 = get_layout("ps4")
    assert [(s.row, s.column) for s in ps4] == [(s.row, s.column) for s in XBOX_LAYOUT]
    assert [s.method_name for s in ps4] == [s.method_name for s in XBOX_LAYOUT]


def test_duplicate_layout_rejected():
    with pytest.raises(ValueError, match="Duplicate layout 'xbox'"):
        register("xbox", XBOX_LAYOUT)


def test_unknown_layout_lists_known():
    with pytest.raises(ValueError) as excinfo:
        get_layout("n64")
    assert str(excinfo.value) == "Unknown layout 'n64', known layouts: ps4, xbox"


def test_unknown_layout_name_in_registry(gamepad):
    with pytest.raises(ValueError, match="n64"):
        ButtonBinder(gamepad, layout_name="n64")
