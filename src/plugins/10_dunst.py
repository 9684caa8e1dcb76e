"""
Notifier Plugin - dunst, with the bar drawn client side
"""

from ..core.indicator import MUTED_ICON, render_bar
from ..core.main import BAR_WIDTH, REPLACE_ID

NAME = "dunst"
DESCRIPTION = "Client-rendered bar notification"
KIND = "notifier"
PROCESS = "dunst"


def available(core):
    return core.process_running(PROCESS)


def notify(mode, level, icon, muted, core):
    cmd = ["dunstify", "-r", str(REPLACE_ID), "-u", "low"]
    if muted:
        cmd += ["-i", MUTED_ICON, "Muted"]
    else:
        cmd += ["-i", icon, render_bar(level, BAR_WIDTH)]
    core.host_run(cmd)
