"""Invocation settings for a single check run."""

import time
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigValidationError

COMPARE_OPERATORS = ("gt", "lt")


@dataclass(frozen=True)
class ProbeSettings:
    """Immutable parameters of one check invocation.

    Built once by the CLI from parsed flags and handed to every component,
    so nothing reads process-wide state at run time.
    """

    threshold: int
    url: str = "http://localhost:9200"
    timeout: int = 20
    time_period: int = 5
    index_pattern: str = "logstash-*"
    query: str = "*"
    compare_operator: str = "gt"

    def validate(self) -> None:
        """Raise ConfigValidationError if the settings cannot produce a verdict."""
        if self.compare_operator not in COMPARE_OPERATORS:
            raise ConfigValidationError("compare-operator parameter should be 'lt' or 'gt'")
        if self.threshold == 0:
            raise ConfigValidationError("threshold cannot be equal to 0")

    def lookback_start(self, now: Optional[float] = None) -> int:
        """Lower bound of the lookback window in whole seconds since epoch."""
        if now is None:
            now = time.time()
        return int(now) - 60 * self.time_period
