"""Exceptions raised by the log count check."""


class ProbeError(Exception):
    """Base exception for the log count check."""
    pass


class ConfigValidationError(ProbeError):
    """Invocation parameters failed validation."""
    pass


class TemplateError(ProbeError):
    """Query template could not be parsed or rendered."""
    pass


class RequestError(ProbeError):
    """Search request failed or returned a non-200 status."""
    pass


class ParseError(ProbeError):
    """Search response could not be decoded into a hit count."""

    def __init__(self, message: str = "JSON parse failed"):
        super().__init__(message)


class CheckTimeoutError(ProbeError):
    """No search outcome arrived within the configured timeout."""

    def __init__(self, message: str = "connection timeout"):
        super().__init__(message)
