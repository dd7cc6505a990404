"""
Shared test fixtures and configuration for pytest
"""
import os
import tempfile

# Keep credentials and logs out of the real config directory.
os.environ["RUSEND_CONFIG_DIR"] = tempfile.mkdtemp(prefix="rusend-tests-")

from io import StringIO  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from rusend.utils.config_manager import AppConfig, ConfigStore  # noqa: E402
from rusend.utils.console import get_buffer_console  # noqa: E402

from .test_helpers import ClientTestHelper, EmailTestHelper  # noqa: E402


@pytest.fixture
def config_store(tmp_path):
    """ConfigStore backed by a file in a temporary directory"""
    return ConfigStore(tmp_path / "rusend" / "credentials")


@pytest.fixture
def app_config():
    """Config with an API key and default addresses"""
    return AppConfig(
        api_key="re_test_key_123",
        default_from="Defaults <default@example.com>",
        default_to="inbox@example.com",
    )


@pytest.fixture
def output():
    """Console writing plain text into a buffer"""
    return get_buffer_console()


@pytest.fixture
def error_output():
    """Second buffer console used for the error stream"""
    return get_buffer_console()


@pytest.fixture
def fake_client():
    """ResendClient stand-in with async methods"""
    return ClientTestHelper.create_fake_client()


@pytest.fixture
def sent_emails():
    """Listing of sent emails, newest first"""
    return EmailTestHelper.create_sent_emails(3)


@pytest.fixture
def received_email():
    """A received email with both bodies"""
    return EmailTestHelper.create_received_email()


@pytest.fixture
def stdout_buffer():
    return StringIO()


@pytest.fixture
def client_factory(fake_client):
    """Factory returning the fake client for any API key"""
    return MagicMock(return_value=fake_client)
