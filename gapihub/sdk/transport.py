"""HTTP transport used by the hubs.

The transport is a thin wrapper around a shared `requests.Session`, so a
hub reuses one connection pool for all of its calls. It raises
`requests.RequestException` subclasses on transport failure and returns the
response for every HTTP status.
"""

import logging
from typing import Mapping, Optional

import requests

from .timing import time_api_call

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Sends requests through a `requests.Session`."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout

    @time_api_call
    def request(self, method: str, url: str, headers: Mapping[str, str],
                data: Optional[bytes] = None) -> requests.Response:
        logger.debug(f"{method} {url}")
        return self.session.request(
            method, url, headers=dict(headers), data=data, timeout=self.timeout
        )

    def close(self):
        self.session.close()
