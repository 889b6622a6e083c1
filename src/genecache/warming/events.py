"""Structured events reported for every fetch attempt.

Every event carries the gene id (``id``), the ``url`` and a ``kind``:
``fetch`` (transport failure), ``http`` (non-200 status), ``decoding``
(bad page layout document) or ``caching`` (success). Successful urls are
reported at debug level, the per-gene summary at info, failures at error.
"""

from typing import Any

import structlog

from genecache.outcomes import FetchOutcome, OutcomeKind, TerminalOutcome

EVENT_KIND_FETCH = "fetch"
EVENT_KIND_HTTP = "http"
EVENT_KIND_DECODING = "decoding"
EVENT_KIND_CACHING = "caching"


def get_event_sink() -> Any:
    """Default event sink: the process wide structlog logger."""
    return structlog.get_logger("genecache.warming")


def report_fetch(sink: Any, outcome: FetchOutcome) -> None:
    """Report one fetch or decode attempt."""
    request = outcome.request
    fields = {
        "id": request.gene_id,
        "url": request.url,
        "resource": request.kind.value,
    }

    if outcome.kind is OutcomeKind.FETCHED:
        sink.debug("url_cached", kind=EVENT_KIND_CACHING, **fields)
    elif outcome.kind is OutcomeKind.HTTP_ERROR:
        sink.error(
            "url_http_error",
            kind=EVENT_KIND_HTTP,
            status_code=outcome.status_code,
            **fields,
        )
    elif outcome.kind is OutcomeKind.NETWORK_ERROR:
        sink.error("url_fetch_failed", kind=EVENT_KIND_FETCH, error=outcome.error, **fields)
    else:
        sink.error(
            "response_decode_failed",
            kind=EVENT_KIND_DECODING,
            error=outcome.error,
            **fields,
        )


def report_gene_cached(sink: Any, gene_id: str, fetch_count: int) -> None:
    """Report the summary event of a completed gene."""
    sink.info("gene_cached", id=gene_id, kind=EVENT_KIND_CACHING, fetch_count=fetch_count)


def report_aborted(sink: Any, outcome: TerminalOutcome) -> None:
    """Report that the run stops at this gene."""
    sink.error("warming_aborted", id=outcome.gene_id, reason=outcome.reason)
