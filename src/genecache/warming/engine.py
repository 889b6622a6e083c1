"""Fetch traversal engine: the per-gene cache warming walk.

For one gene the walk visits, strictly in order:
1. Gene detail and protein detail pages
2. Every panel source listed in each of those pages
3. The references document

Failures on steps 1 and 2 are logged and skipped. A failed references fetch
is taken as a sign the site is down and aborts the whole run.
"""

import threading
from typing import Any, Iterable, Optional

from genecache.api_clients.base import GeneCacheClient
from genecache.errors import DecodeError
from genecache.outcomes import (
    FetchOutcome,
    OutcomeKind,
    TerminalOutcome,
    TerminalStatus,
    WarmingReport,
)
from genecache.resources.models import GeneRecord, ResourceRequest
from genecache.resources.parser import first_page, parse_page_responses
from genecache.resources.urls import URLBuilder
from genecache.warming import events


class WalkCancelled(Exception):
    """Raised inside a walk when the shared cancel signal is set."""


class _Walk:
    """Counters and cancellation check for one gene walk."""

    def __init__(self, gene_id: str, cancel: Optional[threading.Event]):
        self.gene_id = gene_id
        self.cancel = cancel
        self.fetch_count = 0
        self.failure_count = 0

    def check_cancelled(self) -> None:
        if self.cancel is not None and self.cancel.is_set():
            raise WalkCancelled(self.gene_id)

    def outcome(self, status: TerminalStatus, reason: Optional[str] = None) -> TerminalOutcome:
        return TerminalOutcome(
            status=status,
            gene_id=self.gene_id,
            reason=reason,
            fetch_count=self.fetch_count,
            failure_count=self.failure_count,
        )


class FetchTraversalEngine:
    """Walks the resources of one gene at a time and applies the failure policy.

    Args:
        client: HTTP client used for every GET
        base_url: Base url of the site being warmed
        event_sink: structlog style logger receiving one event per attempt.
            Defaults to the process wide structlog logger.
    """

    def __init__(
        self,
        client: GeneCacheClient,
        base_url: str,
        event_sink: Any = None,
    ):
        self.client = client
        self.urls = URLBuilder(base_url)
        self.events = event_sink if event_sink is not None else events.get_event_sink()

    def process_gene(
        self,
        record: GeneRecord,
        cancel: Optional[threading.Event] = None,
    ) -> TerminalOutcome:
        """
        Warm every resource of one gene.

        Args:
            record: Gene/transcript pair to warm
            cancel: Shared cancel signal, checked before every fetch

        Returns:
            TerminalOutcome: COMPLETED after a successful references fetch,
            ABORTED when the references fetch failed, CANCELLED when the
            cancel signal was set mid walk
        """
        walk = _Walk(record.gene_id, cancel)
        try:
            for request in self.urls.detail_requests(record.gene_id, record.transcript_id):
                self._warm_page(walk, request)

            walk.check_cancelled()
            refs = self._fetch(walk, self.urls.references_request(record.gene_id))
        except WalkCancelled:
            return walk.outcome(TerminalStatus.CANCELLED, reason="run cancelled")

        if not refs.ok:
            outcome = walk.outcome(TerminalStatus.ABORTED, reason=_abort_reason(refs))
            events.report_aborted(self.events, outcome)
            return outcome

        events.report_gene_cached(self.events, record.gene_id, walk.fetch_count)
        return walk.outcome(TerminalStatus.COMPLETED)

    def run(self, records: Iterable[GeneRecord]) -> WarmingReport:
        """
        Warm genes one at a time, in input order.

        Stops pulling records right after the first aborted gene.

        Args:
            records: Gene records, consumed lazily

        Returns:
            WarmingReport for the run
        """
        report = WarmingReport()
        for record in records:
            outcome = self.process_gene(record)
            report.add(outcome)
            if outcome.status is TerminalStatus.ABORTED:
                break
        return report

    def _warm_page(self, walk: _Walk, request: ResourceRequest) -> None:
        """Fetch a detail page and every panel it lists. Never aborts."""
        walk.check_cancelled()
        page_outcome = self._fetch(walk, request, read_body=True)
        if not page_outcome.ok:
            return

        try:
            page = first_page(parse_page_responses(page_outcome.body))
        except DecodeError as e:
            walk.failure_count += 1
            events.report_fetch(
                self.events,
                FetchOutcome(kind=OutcomeKind.DECODE_ERROR, request=request, error=str(e)),
            )
            return

        for item in page.items:
            walk.check_cancelled()
            self._fetch(walk, self.urls.panel_request(walk.gene_id, item.source_path))

    def _fetch(self, walk: _Walk, request: ResourceRequest, read_body: bool = False) -> FetchOutcome:
        outcome = self.client.fetch(request, read_body=read_body)
        walk.fetch_count += 1
        if not outcome.ok:
            walk.failure_count += 1
        events.report_fetch(self.events, outcome)
        return outcome


def _abort_reason(outcome: FetchOutcome) -> str:
    url = outcome.request.url
    if outcome.kind is OutcomeKind.HTTP_ERROR:
        return f"http error {outcome.status_code} in fetching url {url}"
    return f"error fetching url {url} {outcome.error}"
