"""Shared pytest fixtures for button_binder tests."""

import pytest

from button_binder.core.registry import ButtonBinder
from button_binder.core.types import ControlSpec
from button_binder.inputs.controller import ControllerState, GamepadController


class CountingController:
    """Two-button controller that records how often each accessor runs."""

    def __init__(self) -> None:
        self.calls: dict[str, int] = {"a": 0, "b": 0}

    def a(self) -> str:
        self.calls["a"] += 1
        return "trigger-a"

    def b(self) -> str:
        self.calls["b"] += 1
        return "trigger-b"


@pytest.fixture
def state():
    return ControllerState()


@pytest.fixture
def gamepad(state):
    return GamepadController(state)


@pytest.fixture
def binder(gamepad):
    """Fresh registry seeded with the default xbox layout."""
    return ButtonBinder(gamepad)


@pytest.fixture
def counting_controller():
    return CountingController()


@pytest.fixture
def ab_binder(counting_controller):
    """Registry over just ["a", "b"]."""
    return ButtonBinder(counting_controller, [ControlSpec("a", 0, 0), ControlSpec("b", 1, 0)])
