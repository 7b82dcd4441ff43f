import sys
import time
from pathlib import Path

import pytest

# Make repository root importable for tests without installing the package.
# Keeps local iteration fast (pytest sees source directly).
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeResponse:
    """Stands in for requests.Response; only the attributes the client reads."""

    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason


class FakeSearchBackend:
    """Replacement for requests.post that records every call it receives."""

    def __init__(self, status_code=200, text='{"hits": {"total": 0}}', reason="OK", exc=None, delay=0.0,
                 honor_timeout=False):
        self.response = FakeResponse(status_code, text, reason)
        self.exc = exc
        self.delay = delay
        # Sleep for the socket timeout the caller passed, like a blackholed host
        self.honor_timeout = honor_timeout
        self.calls = []

    def __call__(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.honor_timeout and timeout is not None:
            time.sleep(timeout)
        elif self.delay:
            time.sleep(self.delay)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def fake_backend(monkeypatch):
    """Install a FakeSearchBackend in place of requests.post and return a factory for it."""

    def install(**kwargs):
        backend = FakeSearchBackend(**kwargs)
        monkeypatch.setattr("checker.es_http_client.requests.post", backend)
        return backend

    return install

