"""Xbox-style gamepad, the reference device.

Face buttons in column 0, shoulder controls and stick clicks in column 4,
menu buttons in column 8.
"""

from button_binder.core.types import ControlSpec
from button_binder.layouts import register

XBOX_LAYOUT = (
    # Face buttons
    ControlSpec("a", 0, 0),
    ControlSpec("b", 1, 0),
    ControlSpec("x", 2, 0),
    ControlSpec("y", 3, 0),
    ControlSpec("leftBumper", 0, 4, "left_bumper"),
    ControlSpec("rightBumper", 1, 4, "right_bumper"),
    ControlSpec("leftTrigger", 2, 4, "left_trigger"),
    ControlSpec("rightTrigger", 3, 4, "right_trigger"),
    ControlSpec("leftStick", 4, 4, "left_stick"),
    ControlSpec("rightStick", 5, 4, "right_stick"),
    ControlSpec("start", 0, 8),
    ControlSpec("back", 1, 8),
)


register("xbox", XBOX_LAYOUT)
