"""Tests for the cache warming HTTP client."""

from unittest.mock import patch

import httpx
import pytest

from genecache.api_clients.base import GeneCacheClient
from genecache.config import load_config_with_overrides
from genecache.outcomes import OutcomeKind
from genecache.resources import ResourceKind, ResourceRequest


def _request(url="http://example.test/gene/DDB_G1/gene.json"):
    return ResourceRequest(kind=ResourceKind.GENE_DETAIL, url=url, gene_id="DDB_G1")


def test_fetch_ok_without_body(site, client):
    """Status 200 is FETCHED and the body is not kept by default."""
    outcome = client.fetch(_request())

    assert outcome.kind is OutcomeKind.FETCHED
    assert outcome.ok
    assert outcome.status_code == 200
    assert outcome.body is None
    assert site.requested == ["http://example.test/gene/DDB_G1/gene.json"]


def test_fetch_ok_with_body(site, client):
    site.status("http://example.test/gene/DDB_G1/gene.json", 200, b"[]")

    outcome = client.fetch(_request(), read_body=True)

    assert outcome.body == b"[]"


@pytest.mark.parametrize("status_code", [301, 404, 500, 503])
def test_non_200_is_http_error(site, client, status_code):
    site.status("http://example.test/gene/DDB_G1/gene.json", status_code)

    outcome = client.fetch(_request(), read_body=True)

    assert outcome.kind is OutcomeKind.HTTP_ERROR
    assert outcome.status_code == status_code
    assert outcome.body is None


def test_network_error_is_returned_not_raised(site, client):
    site.network_errors.add("http://example.test/gene/DDB_G1/gene.json")

    outcome = client.fetch(_request())

    assert outcome.kind is OutcomeKind.NETWORK_ERROR
    assert outcome.status_code is None
    assert "connection refused" in outcome.error


def test_timeout_is_network_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with GeneCacheClient(transport=httpx.MockTransport(handler)) as client:
        outcome = client.fetch(_request())

    assert outcome.kind is OutcomeKind.NETWORK_ERROR


def test_response_closed_on_every_path(site, client):
    """Streams are closed whether the fetch succeeds or fails."""
    site.status("http://example.test/bad", 500)
    closed = []
    original_close = httpx.Response.close

    def tracking_close(self):
        closed.append(str(self.request.url))
        original_close(self)

    with patch.object(httpx.Response, "close", tracking_close):
        client.fetch(_request("http://example.test/good"))
        client.fetch(_request("http://example.test/good"), read_body=True)
        client.fetch(_request("http://example.test/bad"))

    assert closed.count("http://example.test/good") >= 2
    assert "http://example.test/bad" in closed


def test_client_from_config():
    """Creating client from WarmerConfig applies the HTTP settings."""
    config = load_config_with_overrides(None, {
        "http.timeout_seconds": 5,
        "http.follow_redirects": False,
    })

    client = GeneCacheClient.from_config(config)
    try:
        assert client.timeout == 5
        assert client.follow_redirects is False
        assert client.session.follow_redirects is False
    finally:
        client.close()


def test_redirects_followed():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(302, headers={"Location": "http://example.test/new"})
        return httpx.Response(200, content=b"ok")

    with GeneCacheClient(transport=httpx.MockTransport(handler)) as redirecting:
        outcome = redirecting.fetch(_request("http://example.test/old"))

    assert outcome.kind is OutcomeKind.FETCHED
