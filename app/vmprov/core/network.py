"""Network reachability probe.

Decides whether outside access is available before any provisioning work
is attempted.
"""

import http.client
import logging
import time
import urllib.error
import urllib.request

from vmprov import __version__

logger = logging.getLogger(__name__)


class ConnectivityProbe:
    """HTTP reachability check with bounded retries.

    A host counts as reachable as soon as it answers an HTTP request with
    any status code, including error statuses.

    Example:
        >>> probe = ConnectivityProbe()
        >>> probe.probe("http://google.com", attempts=3, timeout=5)
        True
    """

    def __init__(self, retry_delay: float = 1.0) -> None:
        """Initialize the probe.

        Args:
            retry_delay: Seconds to wait between failed attempts.
        """
        self._retry_delay = retry_delay

    def probe(self, url: str, attempts: int = 3, timeout: float = 5.0) -> bool:
        """Check whether a URL can be reached.

        Args:
            url: URL to request.
            attempts: Maximum number of attempts.
            timeout: Timeout of each attempt in seconds.

        Returns:
            True if any attempt got an HTTP response, False otherwise.
        """
        for attempt in range(1, attempts + 1):
            if self._attempt(url, timeout):
                logger.info("Reached %s on attempt %d", url, attempt)
                return True
            logger.debug("Attempt %d/%d to reach %s failed", attempt, attempts, url)
            if attempt < attempts and self._retry_delay > 0:
                time.sleep(self._retry_delay)

        logger.warning("Could not reach %s after %d attempt(s)", url, attempts)
        return False

    def _attempt(self, url: str, timeout: float) -> bool:
        request = urllib.request.Request(
            url,
            method="HEAD",
            headers={"User-Agent": f"vmprov/{__version__}"},
        )
        try:
            with urllib.request.urlopen(request, timeout=timeout):
                return True
        except urllib.error.HTTPError as e:
            logger.debug("%s answered with HTTP %d", url, e.code)
            return True
        except http.client.HTTPException as e:
            # Connected, but the reply was malformed (captive portal, broken proxy)
            logger.debug("%s sent a malformed HTTP reply: %r", url, e)
            return True
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            logger.debug("Request to %s failed: %s", url, e)
            return False
