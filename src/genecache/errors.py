"""Exception hierarchy for genecache."""


class GeneCacheError(Exception):
    """Base class for all genecache errors."""


class DecodeError(GeneCacheError):
    """Response body is not valid JSON or does not have the page layout shape."""


class RecordFormatError(GeneCacheError):
    """Input line does not hold a tab separated gene and transcript id."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"malformed record at line {line_number}: {line!r} "
            f"(expected geneId<TAB>transcriptId)"
        )


class WarmingAborted(GeneCacheError):
    """The run stopped because a references fetch failed."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(outcome.reason or f"warming aborted at gene {outcome.gene_id}")
