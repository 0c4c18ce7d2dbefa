"""DualShock naming over the same gamepad accessors as the Xbox layout."""

from button_binder.core.types import ControlSpec
from button_binder.layouts import register

PS4_LAYOUT = (
    ControlSpec("cross", 0, 0, "a"),
    ControlSpec("circle", 1, 0, "b"),
    ControlSpec("square", 2, 0, "x"),
    ControlSpec("triangle", 3, 0, "y"),
    ControlSpec("L1", 0, 4, "left_bumper"),
    ControlSpec("R1", 1, 4, "right_bumper"),
    ControlSpec("L2", 2, 4, "left_trigger"),
    ControlSpec("R2", 3, 4, "right_trigger"),
    ControlSpec("L3", 4, 4, "left_stick"),
    ControlSpec("R3", 5, 4, "right_stick"),
    ControlSpec("options", 0, 8, "start"),
    ControlSpec("share", 1, 8, "back"),
)


register("ps4", PS4_LAYOUT)
