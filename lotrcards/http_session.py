"""
HTTP Session to download catalog pages and card images
"""
import functools
from typing import Optional

import requests


def http_session(timeout: Optional[float] = None) -> requests.Session:
    """
    Plain session, no retries and no caching
    :param timeout: Seconds to wait per request, None to wait forever
    :return: Session that does the downloading
    """
    session = requests.Session()

    if timeout is not None:
        session.request = functools.partial(session.request, timeout=timeout)  # type: ignore

    return session
