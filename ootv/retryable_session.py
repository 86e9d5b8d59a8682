"""
Retryable Session to download content
"""
import functools
from typing import Optional

import requests
import requests.adapters
import urllib3

from .ootv_config import OotvConfig


def retryable_session(
    retries: Optional[int] = None, timeout: Optional[float] = None
) -> requests.Session:
    """
    Session with requests to allow for re-attempts at downloading missing data
    :param retries: How many retries to attempt
    :param timeout: Seconds to wait on any single request
    :return: Session that does the downloading
    """
    if retries is None:
        retries = OotvConfig().retries
    if timeout is None:
        timeout = OotvConfig().request_timeout

    session = requests.Session()

    # The Oracle search and card pages are POST forms with no side effects
    retry = urllib3.util.retry.Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.3,
        status_forcelist=(500, 502, 504),
        allowed_methods=frozenset(["GET", "POST"]),
    )

    adapter = requests.adapters.HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.request = functools.partial(session.request, timeout=timeout)  # type: ignore

    session.headers.update(
        {"User-Agent": "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 ootv/1.0"}
    )
    return session
