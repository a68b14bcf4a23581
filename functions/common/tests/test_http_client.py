from unittest.mock import patch

from functions.common.core.config import BaseAppConfig
from functions.common.core.http_client import HttpClientFactory


class TestHttpClientFactory:
    @patch("httpx.Client")
    def test_create_sync_client_verify_false(self, mock_client):
        """VERIFY_SSL=False should produce client with verify=False"""
        config = BaseAppConfig(VERIFY_SSL=False, _env_file=None)
        factory = HttpClientFactory(config)
        factory.create_sync_client()

        mock_client.assert_called_once()
        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is False
        assert kwargs["follow_redirects"] is True

    @patch("httpx.Client")
    def test_create_sync_client_verify_true(self, mock_client):
        """VERIFY_SSL=True should produce client with verify=True"""
        config = BaseAppConfig(VERIFY_SSL=True, _env_file=None)
        factory = HttpClientFactory(config)
        factory.create_sync_client(timeout=5.0)

        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is True
        assert kwargs["timeout"] == 5.0

    @patch("httpx.Client")
    def test_explicit_verify_overrides_config(self, mock_client):
        config = BaseAppConfig(VERIFY_SSL=True, _env_file=None)
        factory = HttpClientFactory(config)
        factory.create_sync_client(verify=False, follow_redirects=False)

        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is False
        assert kwargs["follow_redirects"] is False
