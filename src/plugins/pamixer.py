"""
Mixer Plugin - PulseAudio/PipeWire volume via pamixer
"""

NAME = "pamixer"
DESCRIPTION = "Volume and mute control"
KIND = "mixer"


def available(core):
    return core.has_binary("pamixer")


def get_volume(core):
    return core.read_percent(["pamixer", "--get-volume"])


def is_muted(core):
    # pamixer exits 1 when printing "false", so only the output is checked
    result = core.host_run(["pamixer", "--get-mute"])
    return result.stdout.strip() == "true"


def unmute(core):
    core.host_run(["pamixer", "-u"])


def toggle_mute(core):
    core.host_run(["pamixer", "-t"])


def volume_up(step, core):
    core.host_run(["pamixer", "-i", str(step)])


def volume_down(step, core):
    core.host_run(["pamixer", "-d", str(step)])
