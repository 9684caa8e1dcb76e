"""
Backlight Plugin - brightness via xbacklight (X11 / acpilight)
"""

NAME = "xbacklight"
DESCRIPTION = "Screen brightness via xbacklight"
KIND = "backlight"
BINARY = "xbacklight"


def available(core):
    return core.has_binary(BINARY)


def get_brightness(core):
    return core.read_percent([BINARY, "-get"])


def brightness_up(step, core):
    core.host_run([BINARY, "-inc", str(step)])


def brightness_down(step, core):
    core.host_run([BINARY, "-dec", str(step)])
