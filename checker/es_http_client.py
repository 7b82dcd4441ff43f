import logging
from datetime import datetime
from typing import Optional

import requests

from .errors import RequestError

logger = logging.getLogger(__name__)

# Daily indices are suffixed like logstash-2024.05.17
INDEX_DATE_FORMAT = "%Y.%m.%d"


def build_search_url(base_url: str, index_pattern: str, now: Optional[datetime] = None) -> str:
    """Return the _search endpoint of today's index for ``index_pattern``.

    The date comes from the host's local clock at call time, not at process start.
    """
    now = now or datetime.now()
    return f"{base_url}/{index_pattern}-{now.strftime(INDEX_DATE_FORMAT)}/_search"


def post_query(url: str, body: str, timeout: Optional[float] = None) -> str:
    """POST a rendered query and return the raw response body.

    Parameters
    ----------
    url : str
        Full _search URL (see build_search_url).
    body : str
        Rendered JSON query.
    timeout : float | None
        Socket timeout handed to requests; None waits indefinitely.

    Raises
    ------
    RequestError
        On any transport failure or a status other than 200.
    """
    logger.debug("POST %s", url)
    try:
        response = requests.post(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.warning("Search request to %s failed: %s", url, exc)
        raise RequestError(str(exc)) from exc

    if response.status_code != 200:
        logger.warning("Search request to %s returned %s", url, response.status_code)
        raise RequestError(f"HTTP response code: {response.status_code} {response.reason}")
    return response.text
