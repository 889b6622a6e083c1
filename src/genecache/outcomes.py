"""Result types for fetch attempts, gene walks and warming runs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from genecache.resources.models import ResourceRequest


class OutcomeKind(str, Enum):
    """Result of a single fetch attempt."""

    FETCHED = "fetched"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class FetchOutcome:
    """Outcome of one GET, reported to the event sink and then dropped.

    Attributes:
        kind: What happened
        request: The request that was attempted
        status_code: HTTP status, when a response was received
        error: Error text for network and decode failures
        body: Response body, only kept when the caller asked to decode it
    """
    kind: OutcomeKind
    request: ResourceRequest
    status_code: Optional[int] = None
    error: Optional[str] = None
    body: Optional[bytes] = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.FETCHED


class TerminalStatus(str, Enum):
    """How the walk for one gene ended."""

    COMPLETED = "completed"
    ABORTED = "aborted"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TerminalOutcome:
    """Outcome of the full walk for one gene.

    Attributes:
        status: COMPLETED, ABORTED (references fetch failed) or CANCELLED
            (another worker aborted the run first)
        gene_id: Gene that was walked
        reason: Why the walk did not complete
        fetch_count: Number of GETs issued for this gene
        failure_count: Number of non-fatal failures absorbed along the way
    """
    status: TerminalStatus
    gene_id: str
    reason: Optional[str] = None
    fetch_count: int = 0
    failure_count: int = 0

    @property
    def completed(self) -> bool:
        return self.status is TerminalStatus.COMPLETED


@dataclass
class WarmingReport:
    """Summary of a warming run.

    Attributes:
        genes_completed: Genes whose walk reached a successful references fetch
        genes_cancelled: Genes stopped midway after another gene aborted the run
        fetch_count: Total GETs issued
        failure_count: Total non-fatal failures absorbed
        aborted: Outcome of the gene whose references fetch failed, if any
    """
    genes_completed: int = 0
    genes_cancelled: int = 0
    fetch_count: int = 0
    failure_count: int = 0
    aborted: Optional[TerminalOutcome] = None

    @property
    def ok(self) -> bool:
        return self.aborted is None

    def add(self, outcome: TerminalOutcome) -> None:
        """Fold one gene outcome into the run totals."""
        self.fetch_count += outcome.fetch_count
        self.failure_count += outcome.failure_count
        if outcome.status is TerminalStatus.COMPLETED:
            self.genes_completed += 1
        elif outcome.status is TerminalStatus.CANCELLED:
            self.genes_cancelled += 1
        elif self.aborted is None:
            self.aborted = outcome
