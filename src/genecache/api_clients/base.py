"""HTTP client that issues cache warming GETs and classifies their outcome."""

import logging
from typing import Optional

import httpx

from genecache.config.schema import WarmerConfig
from genecache.outcomes import FetchOutcome, OutcomeKind
from genecache.resources.models import ResourceRequest

logger = logging.getLogger(__name__)


class GeneCacheClient:
    """
    HTTP client for warming the dictyBase cache.

    Features:
    - One plain GET per request, no retries and no local caching
    - Network and HTTP failures returned as FetchOutcome values, never raised
    - Response bodies released on every exit path
    - Shared connection pool, safe to use from several worker threads
    """

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds
            follow_redirects: Follow redirects before judging the status
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.session = httpx.Client(
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
        )

    def fetch(self, request: ResourceRequest, read_body: bool = False) -> FetchOutcome:
        """
        Issue a GET for one resource.

        Args:
            request: Resource request to fetch
            read_body: Keep the body on the outcome for decoding. Otherwise
                the body is drained and discarded.

        Returns:
            FetchOutcome with kind FETCHED on status 200, HTTP_ERROR on any
            other status, NETWORK_ERROR on transport failures
        """
        try:
            with self.session.stream("GET", request.url) as response:
                if response.status_code != httpx.codes.OK:
                    return FetchOutcome(
                        kind=OutcomeKind.HTTP_ERROR,
                        request=request,
                        status_code=response.status_code,
                    )
                if read_body:
                    body = response.read()
                else:
                    # Pull the whole body through so every cache layer sees a
                    # complete response
                    for _ in response.iter_bytes():
                        pass
                    body = None
                return FetchOutcome(
                    kind=OutcomeKind.FETCHED,
                    request=request,
                    status_code=response.status_code,
                    body=body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FetchOutcome(
                kind=OutcomeKind.NETWORK_ERROR,
                request=request,
                error=str(e) or e.__class__.__name__,
            )

    @classmethod
    def from_config(
        cls,
        config: WarmerConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "GeneCacheClient":
        """
        Create client from warmer configuration.

        Args:
            config: WarmerConfig instance
            transport: Custom httpx transport

        Returns:
            Configured GeneCacheClient instance
        """
        return cls(
            timeout=config.http.timeout_seconds,
            follow_redirects=config.http.follow_redirects,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.session.close()
        logger.debug("HTTP client closed")

    def __enter__(self) -> "GeneCacheClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
