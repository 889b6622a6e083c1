"""Read gene/transcript pairs from a tab separated input list."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from genecache.errors import RecordFormatError
from genecache.resources.models import GeneRecord

logger = logging.getLogger(__name__)


def parse_record_line(line: str, line_number: int) -> GeneRecord:
    """Parse one ``geneId<TAB>transcriptId`` line.

    Tokens past the second one are ignored.

    Raises:
        RecordFormatError: If the line has fewer than two tokens
    """
    tokens = line.rstrip("\r\n").split("\t")
    if len(tokens) < 2:
        raise RecordFormatError(line_number, line.rstrip("\r\n"))
    return GeneRecord(gene_id=tokens[0], transcript_id=tokens[1])


def iter_records(lines: Iterable[str]) -> Iterator[GeneRecord]:
    """Lazily turn input lines into GeneRecords, in input order.

    Records are produced one at a time so an aborted run never reads past
    the gene that failed.
    """
    for line_number, line in enumerate(lines, 1):
        yield parse_record_line(line, line_number)


def open_gene_list(path: Path | str) -> TextIO:
    """Open an input gene list for reading.

    Raises:
        OSError: If the file cannot be opened
    """
    path = Path(path)
    logger.debug(f"Opening gene list {path}")
    return open(path, "r", encoding="utf-8")
