"""Threshold evaluation and check verdicts."""

from dataclasses import dataclass
from enum import IntEnum

from .settings import ProbeSettings


class CheckStatus(IntEnum):
    """Monitoring plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1  # part of the convention, never produced by this check
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Verdict:
    status: CheckStatus
    message: str

    def render(self) -> str:
        """Status line in the form the monitoring supervisor expects."""
        return f"{self.status.name}: {self.message}"

    @classmethod
    def unknown(cls, message: str) -> "Verdict":
        return cls(CheckStatus.UNKNOWN, message)


def is_healthy(count: int, threshold: int, compare_operator: str) -> bool:
    """True when ``count`` sits on the healthy side of ``threshold``.

    ``gt``: at least ``threshold`` entries expected.
    ``lt``: at most ``threshold`` entries allowed.
    Equality is healthy for both.
    """
    if compare_operator == "gt":
        return count >= threshold
    return count <= threshold


def evaluate(count: int, settings: ProbeSettings) -> Verdict:
    """Turn a hit count into an OK or CRITICAL verdict."""
    percentage = count / settings.threshold * 100
    message = "%d entries of '%s' (%.2f%%) found in the past %d minutes" % (
        count,
        settings.query,
        percentage,
        settings.time_period,
    )
    if is_healthy(count, settings.threshold, settings.compare_operator):
        return Verdict(CheckStatus.OK, message)
    return Verdict(CheckStatus.CRITICAL, message)
