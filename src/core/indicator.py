"""
Indicator rendering - bar math and icon selection
"""

FILLED = "█"
EMPTY = "░"

ICONS = {
    "none": "audio-volume-muted",
    "low": "audio-volume-low",
    "medium": "audio-volume-medium",
    "high": "audio-volume-high",
}
MUTED_ICON = "audio-volume-muted-blocking"
BRIGHTNESS_ICON = "display-brightness"


def clamp_level(level):
    """Missing levels count as 0, everything is kept within 0-100."""
    if level is None:
        return 0
    return max(0, min(100, level))


def filled_columns(level, width=25):
    return min(width, clamp_level(level) // (100 // width))


def render_bar(level, width=25):
    filled = filled_columns(level, width)
    return FILLED * filled + EMPTY * (width - filled)


def volume_icon_level(level):
    if level is None or level <= 0:
        return "none"
    if level < 30:
        return "low"
    if level < 80:
        return "medium"
    return "high"


def volume_icon(level):
    return ICONS[volume_icon_level(level)]
