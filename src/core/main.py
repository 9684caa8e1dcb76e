"""
volbright Core - Volume and brightness control with an on-screen bar

Loads adapters from the plugins/ folder in file-name order, picks the first
working backlight utility and notification daemon, then runs one
Lock -> Mutate -> Render pass per invocation.
"""

import importlib
import subprocess
import sys
import tempfile
from enum import Enum
from pathlib import Path

import psutil

from .errors import ArgumentError, LockTimeoutError
from .indicator import BRIGHTNESS_ICON, volume_icon
from .lock import instance_lock

# =============================================================================
# CONFIGURATION
# =============================================================================


def program_name(argv0):
    """Program name from argv[0]; ``python -m`` runs count as volbright."""
    path = Path(argv0)
    if path.stem in ("", "__main__"):
        return "volbright"
    return path.name


PROG = program_name(sys.argv[0])
VOLUME_STEP = 4  # percent
BRIGHTNESS_STEP = 8  # percent
BAR_WIDTH = 25  # columns
NOTIFY_TIMEOUT = 5000  # ms
REPLACE_ID = 2593  # notification id reused by client-rendered bars
LOCK_TIMEOUT = 0.1  # seconds
LOCK_PATH = Path(tempfile.gettempdir()) / f"{PROG}.lock"

USAGE = f"""\
Usage: {PROG} MODE ACTION

MODE:   volume|vol|v | brightness|bright|b
ACTION: up|u|inc|i | down|dec|d | mute|m (volume only)

Options:
  -h, --help    show this help
  --backends    list detected mixer, backlight and notification backends
"""

# =============================================================================
# COMMAND PARSING
# =============================================================================


class Mode(Enum):
    VOLUME = "volume"
    BRIGHTNESS = "brightness"


class Action(Enum):
    INCREASE = "up"
    DECREASE = "down"
    MUTE = "mute"


MODES = {
    "v": Mode.VOLUME,
    "vol": Mode.VOLUME,
    "volume": Mode.VOLUME,
    "b": Mode.BRIGHTNESS,
    "bright": Mode.BRIGHTNESS,
    "brightness": Mode.BRIGHTNESS,
}

ACTIONS = {
    "up": Action.INCREASE,
    "u": Action.INCREASE,
    "inc": Action.INCREASE,
    "i": Action.INCREASE,
    "down": Action.DECREASE,
    "dec": Action.DECREASE,
    "d": Action.DECREASE,
    "mute": Action.MUTE,
    "m": Action.MUTE,
}


def parse_args(argv):
    """Turn ``[mode, action]`` into a ``(Mode, Action)`` pair."""
    if len(argv) != 2:
        raise ArgumentError(f"expected MODE and ACTION, got {len(argv)} argument(s)")

    mode_token, action_token = (arg.lower() for arg in argv)
    mode = MODES.get(mode_token)
    if mode is None:
        raise ArgumentError(f"unknown mode: {argv[0]}")

    action = ACTIONS.get(action_token)
    if action is None:
        raise ArgumentError(f"unknown action: {argv[1]}")
    if action is Action.MUTE and mode is not Mode.VOLUME:
        raise ArgumentError("mute is only available in volume mode")

    return mode, action


# =============================================================================
# CORE CLASS
# =============================================================================


class VolBright:
    def __init__(self):
        self.plugins = []
        self.mixer = None
        self.backlight = None
        self.notifier = None

    # --- Utilities for plugins ---

    def host_run(self, cmd):
        """Run a command. Failures are reported, never raised."""
        try:
            return subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            print(f"✗ {cmd[0]}: {e}", file=sys.stderr)
            return subprocess.CompletedProcess(cmd, 127, stdout="", stderr=str(e))

    def read_percent(self, cmd):
        """Run a query command and parse its output as a percentage."""
        result = self.host_run(cmd)
        try:
            return int(float(result.stdout.strip()))
        except ValueError:
            return None

    def has_binary(self, name):
        return self.host_run(["which", name]).returncode == 0

    def process_running(self, name):
        for proc in psutil.process_iter(["name"]):
            if proc.info["name"] == name:
                return True
        return False

    def warn(self, message):
        print(f"⚠ {message}", file=sys.stderr)

    # --- Plugin management ---

    def load_plugins(self):
        plugins_dir = Path(__file__).parent.parent / "plugins"
        if not plugins_dir.exists():
            self.warn("No plugins directory found")
            return

        package = __package__.rsplit(".", 1)[0]
        for file in sorted(plugins_dir.glob("*.py")):
            if file.name.startswith("_"):
                continue

            module_name = f"{package}.plugins.{file.stem}"
            try:
                module = importlib.import_module(module_name)

                if hasattr(module, "NAME") and hasattr(module, "KIND"):
                    self.plugins.append(module)
                else:
                    print(
                        f"✗ Invalid plugin: {file.name} (missing NAME or KIND)",
                        file=sys.stderr,
                    )
            except Exception as e:
                print(f"✗ Failed to load {file.name}: {e}", file=sys.stderr)

    def plugins_of(self, kind):
        return [plugin for plugin in self.plugins if plugin.KIND == kind]

    def first_available(self, kind):
        """First plugin of ``kind`` whose health check passes, in rank order."""
        for plugin in self.plugins_of(kind):
            if plugin.available(self):
                return plugin
        return None

    def probe(self):
        mixers = self.plugins_of("mixer")
        self.mixer = mixers[0] if mixers else None
        self.backlight = self.first_available("backlight")
        self.notifier = self.first_available("notifier")

    # --- Mutation ---

    def apply(self, mode, action):
        if mode is Mode.VOLUME:
            if action is Action.MUTE:
                self.mixer.toggle_mute(self)
            elif action is Action.INCREASE:
                self.mixer.unmute(self)
                self.mixer.volume_up(VOLUME_STEP, self)
            else:
                self.mixer.unmute(self)
                self.mixer.volume_down(VOLUME_STEP, self)
            return

        if self.backlight is None:
            self.warn("No supported backlight utility found (light, xbacklight)")
            return
        if action is Action.INCREASE:
            self.backlight.brightness_up(BRIGHTNESS_STEP, self)
        else:
            self.backlight.brightness_down(BRIGHTNESS_STEP, self)

    # --- Rendering ---

    def query_level(self, mode):
        if mode is Mode.VOLUME:
            return self.mixer.get_volume(self)
        if self.backlight is None:
            return None
        return self.backlight.get_brightness(self)

    def show(self, mode, icon=None):
        level = self.query_level(mode)
        muted = mode is Mode.VOLUME and self.mixer.is_muted(self)
        if mode is Mode.BRIGHTNESS:
            icon = BRIGHTNESS_ICON

        if self.notifier is None:
            self.warn("No supported notification daemon running (xfce4-notifyd, dunst)")
            return
        self.notifier.notify(mode, level, icon, muted, self)

    # --- Main flow ---

    def run(self, mode, action):
        icon = None
        if mode is Mode.VOLUME:
            # Icon follows the level before the change, the bar the level after
            icon = volume_icon(self.mixer.get_volume(self))

        with instance_lock(LOCK_PATH, LOCK_TIMEOUT):
            self.apply(mode, action)
            self.show(mode, icon)

    def list_backends(self):
        print(f"\n=== {PROG} backends ===")
        selected = (self.mixer, self.backlight, self.notifier)
        for plugin in self.plugins:
            mark = "✓" if plugin.available(self) else "✗"
            chosen = "  <- selected" if plugin in selected else ""
            print(f"  {mark} {plugin.KIND:<9} {plugin.NAME}{chosen}")
        print()


def run(argv=None):
    """Console entry point."""
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ("-h", "--help"):
        print(USAGE, end="")
        return

    if argv == ["--backends"]:
        app = VolBright()
        app.load_plugins()
        app.probe()
        app.list_backends()
        return

    try:
        mode, action = parse_args(argv)
    except ArgumentError as e:
        print(f"{PROG}: {e}\n", file=sys.stderr)
        print(USAGE, end="", file=sys.stderr)
        sys.exit(1)

    app = VolBright()
    app.load_plugins()
    app.probe()

    if app.mixer is None and mode is Mode.VOLUME:
        print("✗ No mixer plugin loaded", file=sys.stderr)
        sys.exit(1)

    try:
        app.run(mode, action)
    except LockTimeoutError:
        print(f"✗ Another instance of {PROG} is likely running", file=sys.stderr)
        sys.exit(1)

