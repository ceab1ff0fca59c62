"""
API for how providers need to interact with other classes
"""
import abc
import logging
from typing import Any, Optional

import requests

from ..http_session import http_session

LOGGER = logging.getLogger(__name__)


class AbstractProvider(abc.ABC):
    """
    Abstract class to indicate what other providers should provide
    """

    session: requests.Session

    def __init__(self, timeout: Optional[float] = None):
        super().__init__()
        self.session = http_session(timeout)

    # Abstract Methods
    @abc.abstractmethod
    def download(self, url: str) -> Any:
        """
        Download an object from a service
        :param url: URL to download content from
        """

    @staticmethod
    def log_download(response: requests.Response) -> None:
        """
        Log how the URL was acquired
        :param response: Response from Server
        """
        LOGGER.debug(f"Downloaded {response.url} (HTTP {response.status_code})")
