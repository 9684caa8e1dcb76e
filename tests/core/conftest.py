"""Pytest fixtures for core module tests."""

from unittest.mock import Mock

import pytest


def create_mock_plugin(name="TestPlugin", kind="notifier", **kwargs) -> Mock:
    """
    Factory function to create mock plugin objects.

    Args:
        name: Plugin name (default: "TestPlugin")
        kind: Plugin kind, one of mixer/backlight/notifier (default: "notifier")
        **kwargs: Additional attributes to set on the plugin
            - available: Return value for the available health check
            - Any other attributes will be set directly on the plugin
    """
    plugin = Mock()
    plugin.NAME = name
    plugin.KIND = kind
    plugin.available = Mock(return_value=kwargs.pop("available", True))

    for key, val in kwargs.items():
        setattr(plugin, key, val)

    return plugin


@pytest.fixture
def mock_mixer():
    """Create a mock mixer reporting 50% and unmuted."""
    return create_mock_plugin(
        name="mixer",
        kind="mixer",
        get_volume=Mock(return_value=50),
        is_muted=Mock(return_value=False),
    )


@pytest.fixture
def mock_backlight():
    """Create a mock backlight reporting 40%."""
    return create_mock_plugin(
        name="backlight",
        kind="backlight",
        get_brightness=Mock(return_value=40),
    )


@pytest.fixture
def mock_notifier():
    """Create a mock notifier that is running."""
    return create_mock_plugin(name="notifier", kind="notifier")


@pytest.fixture
def mock_ranked_plugins():
    """Plugins of every kind, some failing their health check."""
    return [
        create_mock_plugin(name="notifier1", kind="notifier", available=False),
        create_mock_plugin(name="notifier2", kind="notifier"),
        create_mock_plugin(name="backlight1", kind="backlight", available=False),
        create_mock_plugin(name="backlight2", kind="backlight"),
        create_mock_plugin(name="backlight3", kind="backlight"),
        create_mock_plugin(name="mixer", kind="mixer", available=False),
    ]


@pytest.fixture
def lock_path(tmp_path, monkeypatch):
    """Point the instance lock at a per-test file."""
    from volbright.core import main

    path = tmp_path / "volbright.lock"
    monkeypatch.setattr(main, "LOCK_PATH", path)
    return path


@pytest.fixture
def mock_plugin_factory():
    """Factory fixture exposing create_mock_plugin to tests."""
    return create_mock_plugin
