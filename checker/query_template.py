"""Rendering of the Elasticsearch count query.

The query skeleton lives in ``templates/count_query.json`` and uses
``string.Template`` placeholders:

    $query      free-text query_string, already escaped for a JSON string
    $time_from  lower @timestamp bound in epoch milliseconds
"""

import logging
from pathlib import Path
from string import Template

from .errors import TemplateError

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "count_query.json"


def load_template_source(path: Path = TEMPLATE_PATH) -> str:
    """Return the raw query skeleton."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"cannot read query template {path}: {exc}") from exc


def escape_query(query: str) -> str:
    """Backslash-escape double quotes so the query fits inside a JSON string."""
    return query.replace('"', '\\"')


def render_query(template_source: str, query: str, time_from: int) -> str:
    """Fill the template with ``query`` and ``time_from`` (seconds since epoch)."""
    try:
        rendered = Template(template_source).substitute(
            query=query,
            time_from=time_from * 1000,
        )
    except (KeyError, ValueError) as exc:
        raise TemplateError(f"template: {exc}") from exc
    logger.debug("Rendered count query (time_from=%s)", time_from * 1000)
    return rendered
