"""Shared fixtures for 911 client unit tests."""

from unittest.mock import Mock

import pytest

from voip_api.platform.clients.x911.client import X911Client


@pytest.fixture
def account():
    """Account executor stub returning an empty payload."""
    executor = Mock()
    executor.execute = Mock(return_value={})
    return executor


@pytest.fixture
def client(account):
    """Client bound to the stub executor with the default production config."""
    return X911Client(account)
