"""Resolve gene resources into request urls on a dictyBase site."""

from typing import Optional

from genecache.resources.models import ResourceKind, ResourceRequest


class URLBuilder:
    """Typed request builder for the resources of a gene.

    Urls are pure string templates over the base url; gene and transcript
    ids are not validated, so a bad id turns into a bad url and shows up
    later as an HTTP error.

    Templates:
    - GENE_DETAIL: {base}/gene/{gene_id}/gene.json
    - PROTEIN_DETAIL: {base}/gene/{gene_id}/protein/{transcript_id}.json
    - PANEL_SOURCE: {base}{source_path}
    - REFERENCES: {base}/gene/{gene_id}/references.json
    """

    def __init__(self, base_url: str):
        self.base_url = base_url

    def build(
        self,
        kind: ResourceKind,
        gene_id: str,
        transcript_id: Optional[str] = None,
        source_path: Optional[str] = None,
    ) -> ResourceRequest:
        """
        Build the request for one resource of a gene.

        Args:
            kind: Resource kind to resolve
            gene_id: dictyBase gene ID
            transcript_id: Transcript ID, required for PROTEIN_DETAIL
            source_path: Panel source path, required for PANEL_SOURCE

        Returns:
            ResourceRequest with the fully qualified url

        Raises:
            ValueError: If an argument required by the kind is missing
        """
        base = self.base_url
        if kind is ResourceKind.GENE_DETAIL:
            url = f"{base}/gene/{gene_id}/gene.json"
        elif kind is ResourceKind.PROTEIN_DETAIL:
            if transcript_id is None:
                raise ValueError("protein detail url needs a transcript id")
            url = f"{base}/gene/{gene_id}/protein/{transcript_id}.json"
        elif kind is ResourceKind.PANEL_SOURCE:
            if source_path is None:
                raise ValueError("panel source url needs a source path")
            # source paths carry their own leading slash
            url = f"{base}{source_path}"
        elif kind is ResourceKind.REFERENCES:
            url = f"{base}/gene/{gene_id}/references.json"
        else:
            raise ValueError(f"unknown resource kind: {kind!r}")
        return ResourceRequest(kind=kind, url=url, gene_id=gene_id)

    def detail_requests(self, gene_id: str, transcript_id: str) -> list[ResourceRequest]:
        """Gene and protein detail requests, in the order they are visited."""
        return [
            self.build(ResourceKind.GENE_DETAIL, gene_id),
            self.build(ResourceKind.PROTEIN_DETAIL, gene_id, transcript_id=transcript_id),
        ]

    def panel_request(self, gene_id: str, source_path: str) -> ResourceRequest:
        return self.build(ResourceKind.PANEL_SOURCE, gene_id, source_path=source_path)

    def references_request(self, gene_id: str) -> ResourceRequest:
        return self.build(ResourceKind.REFERENCES, gene_id)


def build_url(
    base_url: str,
    gene_id: str,
    kind: ResourceKind,
    transcript_id: Optional[str] = None,
    source_path: Optional[str] = None,
) -> str:
    """Resolve a single resource url without keeping a builder around."""
    return URLBuilder(base_url).build(
        kind, gene_id, transcript_id=transcript_id, source_path=source_path
    ).url
