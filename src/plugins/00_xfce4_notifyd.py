"""
Notifier Plugin - xfce4-notifyd draws the progress bar itself

The level is sent as an ``int:value`` hint, and a synchronous tag per mode
makes each notification replace the previous one.
"""

from ..core.indicator import MUTED_ICON, clamp_level
from ..core.main import NOTIFY_TIMEOUT

NAME = "xfce4-notifyd"
DESCRIPTION = "Daemon-rendered progress notification"
KIND = "notifier"
PROCESS = "xfce4-notifyd"


def available(core):
    return core.process_running(PROCESS)


def notify(mode, level, icon, muted, core):
    cmd = ["notify-send", "-t", str(NOTIFY_TIMEOUT)]
    if muted:
        cmd += ["-i", MUTED_ICON, "-h", f"string:synchronous:{mode.value}"]
        cmd += [mode.value.capitalize(), "Muted"]
    else:
        cmd += ["-i", icon, "-h", f"int:value:{clamp_level(level)}"]
        cmd += ["-h", f"string:synchronous:{mode.value}", mode.value.capitalize()]
    core.host_run(cmd)
