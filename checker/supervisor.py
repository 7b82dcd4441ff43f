"""Runs the search pipeline in the background and races it against a timeout.

Pipeline: render template -> POST to today's index -> parse hits.total.
The pipeline runs on a daemon thread that hands exactly one Outcome to the
caller through a single-slot queue. If the timeout wins, the thread is simply
abandoned; being a daemon it never delays process exit.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import CheckTimeoutError, ProbeError
from .es_http_client import build_search_url, post_query
from .query_template import render_query
from .result_parser import parse_hit_count
from .settings import ProbeSettings
from .threshold import Verdict, evaluate

logger = logging.getLogger(__name__)

# Socket timeout stays past the wait deadline so a slow host always reads as a timeout
REQUEST_TIMEOUT_GRACE = 1


@dataclass(frozen=True)
class Outcome:
    """Result handed from the pipeline thread to the waiting caller."""

    count: Optional[int] = None
    error: Optional[Exception] = None


def run_query_pipeline(
    settings: ProbeSettings,
    template_source: str,
    query: str,
    time_from: int,
) -> Outcome:
    """Render, send and parse one count query. Never raises ProbeError."""
    try:
        body = render_query(template_source, query, time_from)
        url = build_search_url(settings.url, settings.index_pattern)
        data = post_query(url, body, timeout=max(settings.timeout, 0) + REQUEST_TIMEOUT_GRACE)
        count = parse_hit_count(data)
    except ProbeError as exc:
        return Outcome(error=exc)
    logger.debug("Search matched %d entries", count)
    return Outcome(count=count)


def _pipeline_worker(outbox: "queue.Queue[Outcome]", *args) -> None:
    try:
        outcome = run_query_pipeline(*args)
    except Exception as exc:
        # Unexpected failure still has to reach the caller as an outcome
        logger.exception("Query pipeline crashed: %s", exc)
        outcome = Outcome(error=exc)
    outbox.put(outcome)


def _await_outcome(outbox: "queue.Queue[Outcome]", timeout: int) -> Outcome:
    try:
        return outbox.get(timeout=max(timeout, 0))
    except queue.Empty:
        raise CheckTimeoutError() from None


def wait_for_outcome(
    settings: ProbeSettings,
    template_source: str,
    query: str,
    time_from: int,
) -> Verdict:
    """Run the pipeline and return a verdict, or UNKNOWN once ``settings.timeout`` elapses."""
    outbox: "queue.Queue[Outcome]" = queue.Queue(maxsize=1)
    worker = threading.Thread(
        target=_pipeline_worker,
        args=(outbox, settings, template_source, query, time_from),
        name="es-count-query",
        daemon=True,
    )
    worker.start()

    try:
        outcome = _await_outcome(outbox, settings.timeout)
    except CheckTimeoutError as exc:
        logger.warning("No search result after %ss; abandoning request", settings.timeout)
        return Verdict.unknown(str(exc))

    if outcome.error is not None:
        return Verdict.unknown(str(outcome.error))
    return evaluate(outcome.count, settings)
