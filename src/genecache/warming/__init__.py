"""Cache warming: the per-gene fetch walk and the run loops around it.

Key exports:
- engine: FetchTraversalEngine
- pool: ConcurrentWarmer
- events: report_fetch, report_gene_cached, report_aborted
"""

from genecache.warming.engine import FetchTraversalEngine
from genecache.warming.pool import ConcurrentWarmer
from genecache.warming.events import (
    report_aborted,
    report_fetch,
    report_gene_cached,
)

__all__ = [
    "FetchTraversalEngine",
    "ConcurrentWarmer",
    "report_fetch",
    "report_gene_cached",
    "report_aborted",
]
