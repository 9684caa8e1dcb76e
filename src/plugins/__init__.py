"""Adapters for the mixer, backlight and notification utilities."""
