"""Command line entry point for the Elasticsearch log count check.

Usage:
    check-es-logs-count -T 100 -q 'level:ERROR' -o lt
or, from a checkout:
    python scripts/check_es_logs_count.py -T 100

Prints one status line ("OK: ...", "CRITICAL: ...", "UNKNOWN: ...") on stdout
and exits with the matching monitoring plugin code.
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from .config.config_loader import config
from .errors import ConfigValidationError, ProbeError
from .query_template import escape_query, load_template_source
from .settings import ProbeSettings
from .supervisor import wait_for_outcome
from .threshold import CheckStatus, Verdict

logger = logging.getLogger(__name__)

FALLBACK_VERSION = "0.10"


def package_version() -> str:
    """Installed distribution version, or the built-in one when run from a checkout."""
    try:
        return version("es-logs-count")
    except PackageNotFoundError:
        return FALLBACK_VERSION


VERSION = package_version()


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors become UNKNOWN verdicts instead of exit 2."""

    def error(self, message):
        raise ConfigValidationError(message)


def build_parser() -> argparse.ArgumentParser:
    defaults = config.PROBE_DEFAULTS
    parser = CheckArgumentParser(
        prog="check-es-logs-count",
        description="Count recent log entries in Elasticsearch and compare them with a threshold.",
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("-u", "--url", default=defaults["url"], help="elasticsearch URL")
    parser.add_argument(
        "--timeout", type=int, default=defaults["timeout"],
        help="timeout for HTTP requests in seconds",
    )
    parser.add_argument(
        "-t", "--time-period", dest="time_period", type=int, default=defaults["time_period"],
        help="check last X minutes until now",
    )
    parser.add_argument(
        "-i", "--index-pattern", dest="index_pattern", default=defaults["index_pattern"],
        help="index pattern, eg.: logstash-mediawiki",
    )
    parser.add_argument("-q", "--query", default=defaults["query"], help="elasticsearch query")
    parser.add_argument(
        "-T", "--threshold", type=int, required=True, help="threshold for logs count",
    )
    parser.add_argument(
        "-o", "--compare-operator", dest="compare_operator", default=defaults["compare_operator"],
        help="operator to compare returned value with threshold, 'lt' or 'gt'",
    )
    parser.add_argument(
        "--log-level", dest="log_level", default=config.LOG_LEVEL,
        help="diagnostic log level (records go to stderr or the configured log file)",
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=config.LOG_FORMAT,
        filename=config.LOG_FILE,
    )


def settings_from_args(args: argparse.Namespace) -> ProbeSettings:
    return ProbeSettings(
        threshold=args.threshold,
        url=args.url,
        timeout=args.timeout,
        time_period=args.time_period,
        index_pattern=args.index_pattern,
        query=args.query,
        compare_operator=args.compare_operator,
    )


def report(verdict: Verdict) -> int:
    print(verdict.render())
    return int(verdict.status)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one check and return its exit code."""
    try:
        args = build_parser().parse_args(argv)
    except ConfigValidationError as exc:
        return report(Verdict.unknown(str(exc)))

    if config.LOAD_ERROR:
        return report(Verdict.unknown(config.LOAD_ERROR))

    setup_logging(args.log_level)
    settings = settings_from_args(args)

    try:
        settings.validate()
        template_source = load_template_source()
    except ProbeError as exc:
        return report(Verdict.unknown(str(exc)))

    time_from = settings.lookback_start()
    logger.debug(
        "Checking %s/%s for '%s' since %d (threshold %d, operator %s)",
        settings.url, settings.index_pattern, settings.query,
        time_from, settings.threshold, settings.compare_operator,
    )
    verdict = wait_for_outcome(settings, template_source, escape_query(settings.query), time_from)
    if verdict.status is CheckStatus.UNKNOWN:
        logger.info("Check inconclusive: %s", verdict.message)
    return report(verdict)


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
