"""Unit tests for the connectivity probe."""

import http.client
import urllib.error
from unittest.mock import MagicMock, patch

import pytest
from vmprov.core.network import ConnectivityProbe


@pytest.fixture
def probe() -> ConnectivityProbe:
    """Probe without delays between attempts."""
    return ConnectivityProbe(retry_delay=0)


class TestConnectivityProbe:
    """Tests for ConnectivityProbe.probe."""

    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_reachable_on_first_attempt(
        self, mock_open: MagicMock, probe: ConnectivityProbe
    ) -> None:
        """A successful response stops probing immediately."""
        assert probe.probe("http://google.com", attempts=3, timeout=5) is True
        mock_open.assert_called_once()
        request = mock_open.call_args[0][0]
        assert request.get_method() == "HEAD"
        assert mock_open.call_args.kwargs["timeout"] == 5

    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_unreachable_after_all_attempts(
        self, mock_open: MagicMock, probe: ConnectivityProbe
    ) -> None:
        """The probe gives up after the configured number of attempts."""
        mock_open.side_effect = urllib.error.URLError("Name or service not known")

        assert probe.probe("http://google.com", attempts=3, timeout=5) is False
        assert mock_open.call_count == 3

    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_retries_until_success(self, mock_open: MagicMock, probe: ConnectivityProbe) -> None:
        """A later successful attempt counts as reachable."""
        mock_open.side_effect = [TimeoutError("timed out"), MagicMock()]

        assert probe.probe("http://google.com", attempts=3, timeout=5) is True
        assert mock_open.call_count == 2

    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_http_error_counts_as_reachable(
        self, mock_open: MagicMock, probe: ConnectivityProbe
    ) -> None:
        """Any HTTP answer, even an error status, proves connectivity."""
        mock_open.side_effect = urllib.error.HTTPError(
            "http://google.com", 405, "Method Not Allowed", hdrs=None, fp=None
        )

        assert probe.probe("http://google.com") is True

    @pytest.mark.parametrize(
        "error",
        [http.client.BadStatusLine("garbage"), http.client.IncompleteRead(b"")],
    )
    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_malformed_reply_counts_as_reachable(
        self, mock_open: MagicMock, probe: ConnectivityProbe, error: Exception
    ) -> None:
        """A garbled HTTP reply still proves a connection was made."""
        mock_open.side_effect = error

        assert probe.probe("http://google.com", attempts=3, timeout=5) is True
        mock_open.assert_called_once()

    @patch("vmprov.core.network.time.sleep")
    @patch("vmprov.core.network.urllib.request.urlopen")
    def test_waits_between_attempts(self, mock_open: MagicMock, mock_sleep: MagicMock) -> None:
        """The retry delay applies between attempts, not after the last one."""
        mock_open.side_effect = OSError("Network is unreachable")

        assert ConnectivityProbe(retry_delay=2.0).probe("http://google.com", attempts=3) is False
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(2.0)
