"""Shared fixtures: a fake dictyBase site and a recording event sink."""

import json
import logging

import httpx
import pytest
import structlog

from genecache.api_clients.base import GeneCacheClient
from genecache.log_setup import QUIET_LOGGERS

BASE_URL = "http://example.test"
EMPTY_PAGE = b'[{"items": [], "layout": "column"}]'


class RecordingSink:
    """Event sink that keeps every event as (level, event, fields)."""

    def __init__(self):
        self.events = []

    def _record(self, level, event, **fields):
        self.events.append((level, event, fields))

    def debug(self, event, **fields):
        self._record("debug", event, **fields)

    def info(self, event, **fields):
        self._record("info", event, **fields)

    def error(self, event, **fields):
        self._record("error", event, **fields)

    def by_level(self, level):
        return [e for e in self.events if e[0] == level]

    def fetch_events(self):
        """Events tied to a url (one per fetch or decode attempt)."""
        return [e for e in self.events if "url" in e[2]]


class FakeSite:
    """In-memory site served through httpx.MockTransport.

    Unknown urls answer 200 with a page that has no panels. Urls listed in
    ``network_errors`` raise a ConnectError.
    """

    def __init__(self):
        self.responses = {}
        self.network_errors = set()
        self.requested = []

    def page(self, url, sources, layout="column"):
        """Serve a page layout document whose panels point at sources."""
        body = [{
            "items": [
                {"key": f"panel{i}", "label": [{"text": f"Panel {i}"}], "source": source}
                for i, source in enumerate(sources)
            ],
            "layout": layout,
        }]
        self.responses[url] = (200, json.dumps(body).encode())

    def status(self, url, status_code, body=b""):
        self.responses[url] = (status_code, body)

    def handler(self, request):
        url = str(request.url)
        self.requested.append(url)
        if url in self.network_errors:
            raise httpx.ConnectError("connection refused", request=request)
        status_code, body = self.responses.get(url, (200, EMPTY_PAGE))
        return httpx.Response(status_code, content=body)

    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def site():
    return FakeSite()


@pytest.fixture
def client(site):
    with GeneCacheClient(transport=site.transport()) as c:
        yield c


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging set up by CLI runs so later tests don't write to closed streams."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
