##########################################################
# Linux Joystick / Gamepad Constants
#
# Source: Linux joystick API (see: linux/joystick.h)
# Only the codes the gait controller listens to are kept.
##########################################################

# ────────────────────────────────────────────────
# Event Type Bitmask Flags
# ────────────────────────────────────────────────
JS_EVENT_BUTTON = 0x01   # Button pressed/released
JS_EVENT_AXIS   = 0x02   # Axis motion
JS_EVENT_INIT   = 0x80   # Initial state of device (synthetic event)

# ────────────────────────────────────────────────
# Axis Codes (Analog Inputs)
# ────────────────────────────────────────────────
AXIS_LX         = 0x00   # Left stick X
AXIS_LY         = 0x01   # Left stick Y
AXIS_LZ         = 0x02   # L2 trigger on Sixaxis / DualShock pads
AXIS_RX         = 0x03   # Right stick X
AXIS_BRAKE      = 0x0A   # Left trigger on some pads
AXIS_HAT0Y      = 0x11   # D-pad vertical (-1=up, +1=down)

# ────────────────────────────────────────────────
# Button Codes (Digital Inputs)
# ────────────────────────────────────────────────
BTN_WEST        = 0x134  # Square on PlayStation pads
BTN_SELECT      = 0x13A
BTN_START       = 0x13B
BTN_DPAD_UP     = 0x220
BTN_DPAD_DOWN   = 0x221

# Alternative DPAD mappings sometimes reported
BTN_DPAD_UP_ALT     = 0x2C2
BTN_DPAD_DOWN_ALT   = 0x2C3

# Sticks report -127..127, triggers 0..255
STICK_AXES = {
    AXIS_LX: "left_stick_x",
    AXIS_LY: "left_stick_y",
    AXIS_RX: "right_stick_x",
}

TRIGGER_AXES = {
    AXIS_LZ: "left_trigger",
    AXIS_BRAKE: "left_trigger",
}

HAT_AXES = {
    AXIS_HAT0Y: ("dpad_up", "dpad_down"),
}

BUTTONS = {
    BTN_WEST: "square",
    BTN_SELECT: "select",
    BTN_START: "start",
    BTN_DPAD_UP: "dpad_up",
    BTN_DPAD_DOWN: "dpad_down",
    BTN_DPAD_UP_ALT: "dpad_up",
    BTN_DPAD_DOWN_ALT: "dpad_down",
}


def code_name(code: int) -> str:
    for table in (STICK_AXES, TRIGGER_AXES, BUTTONS):
        if code in table:
            return table[code]
    if code in HAT_AXES:
        return "dpad"
    return f"unknown(0x{code:02x})"
