import json
import logging

from .errors import ParseError

logger = logging.getLogger(__name__)


def parse_hit_count(data: str) -> int:
    """Extract ``hits.total`` from a _search response body.

    Everything else in the response (aggregations, shards, ...) is ignored.
    Any decoding problem surfaces as the same generic ParseError.
    """
    try:
        result = json.loads(data)
        total = result["hits"]["total"]
    except (ValueError, TypeError, KeyError) as exc:
        logger.debug("Unparseable search response: %s", exc)
        raise ParseError() from exc

    # bool is an int subclass; true/false is not a count
    if isinstance(total, bool) or not isinstance(total, int):
        logger.debug("hits.total is not an integer: %r", total)
        raise ParseError()
    return total
