"""
API for how providers need to interact with other classes
"""
import abc
import logging
from typing import Any, Mapping, Sequence

import requests

LOGGER = logging.getLogger(__name__)


class AbstractProvider(abc.ABC):
    """
    Abstract class to indicate what other providers should provide
    """

    session: requests.Session

    def __init__(self, session: requests.Session):
        super().__init__()
        self.session = session

    # Abstract Methods
    @abc.abstractmethod
    def fetch_page(self, endpoint: str, form_fields: Mapping[str, Sequence[str]]) -> str:
        """
        Submit a form to a service and return the page it answers with
        :param endpoint: URL to post the form to
        :param form_fields: Form fields, each with one or more values
        :return: Raw page body
        """

    @staticmethod
    def log_download(response: Any) -> None:
        """
        Log how the URL was acquired
        :param response: Response from Server
        """
        LOGGER.debug(
            f"Downloaded {response.url} ({response.status_code}, {len(response.content)} bytes)"
        )
