"""Pytest fixtures for plugin tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_core():
    """Create a mock core object for testing plugins."""
    core = Mock()
    core.host_run.return_value = Mock(returncode=0, stdout="", stderr="")
    return core


@pytest.fixture
def mock_core_output(mock_core):
    """Factory fixture: a mock core whose commands print ``stdout``."""

    def _create_mock(stdout, returncode=0):
        mock_core.host_run.return_value = Mock(
            returncode=returncode, stdout=stdout, stderr=""
        )
        return mock_core

    return _create_mock
