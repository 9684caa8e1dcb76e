"""
Backlight Plugin - brightness via light
"""

NAME = "light"
DESCRIPTION = "Screen brightness via light"
KIND = "backlight"
BINARY = "light"


def available(core):
    return core.has_binary(BINARY)


def get_brightness(core):
    return core.read_percent([BINARY, "-G"])


def brightness_up(step, core):
    core.host_run([BINARY, "-A", str(step)])


def brightness_down(step, core):
    core.host_run([BINARY, "-U", str(step)])
