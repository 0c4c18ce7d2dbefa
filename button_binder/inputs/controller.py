"""Live gamepad state and the triggers read from it."""

from dataclasses import dataclass, field
from typing import Callable


class Trigger:
    """Boolean view of some live input condition.

    The condition is evaluated on every ``get()``, so a trigger handed out
    during setup keeps reflecting the current controller state.
    """

    def __init__(self, condition: Callable[[], bool]) -> None:
        self._condition = condition

    def get(self) -> bool:
        return bool(self._condition())

    def __bool__(self) -> bool:
        return self.get()


@dataclass
class ControllerState:
    """Button and axis values, written by whatever polls the hardware."""

    buttons: dict[str, bool] = field(default_factory=dict)
    axes: dict[str, float] = field(default_factory=dict)

    def press(self, button: str) -> None:
        self.buttons[button] = True

    def release(self, button: str) -> None:
        self.buttons[button] = False

    def set_axis(self, axis: str, value: float) -> None:
        self.axes[axis] = float(value)

    def is_pressed(self, button: str) -> bool:
        return self.buttons.get(button, False)

    def axis(self, axis: str) -> float:
        return self.axes.get(axis, 0.0)


class GamepadController:
    """Xbox-style gamepad exposing one trigger factory per control."""

    def __init__(self, state: ControllerState | None = None, trigger_threshold: float = 0.5) -> None:
        self.state = state if state is not None else ControllerState()
        self.trigger_threshold = trigger_threshold

    def button(self, button: str) -> Trigger:
        return Trigger(lambda: self.state.is_pressed(button))

    def axis_above(self, axis: str, threshold: float) -> Trigger:
        return Trigger(lambda: self.state.axis(axis) > threshold)

    def a(self) -> Trigger:
        return self.button("a")

    def b(self) -> Trigger:
        return self.button("b")

    def x(self) -> Trigger:
        return self.button("x")

    def y(self) -> Trigger:
        return self.button("y")

    def left_bumper(self) -> Trigger:
        return self.button("left_bumper")

    def right_bumper(self) -> Trigger:
        return self.button("right_bumper")

    def left_trigger(self) -> Trigger:
        return self.axis_above("left_trigger", self.trigger_threshold)

    def right_trigger(self) -> Trigger:
        return self.axis_above("right_trigger", self.trigger_threshold)

    def left_stick(self) -> Trigger:
        return self.button("left_stick")

    def right_stick(self) -> Trigger:
        return self.button("right_stick")

    def start(self) -> Trigger:
        return self.button("start")

    def back(self) -> Trigger:
        return self.button("back")
