"""Data models for gene records and dictyBase page layout responses."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResourceKind(str, Enum):
    """Kinds of remote resources visited while warming one gene."""

    GENE_DETAIL = "gene_detail"
    PROTEIN_DETAIL = "protein_detail"
    PANEL_SOURCE = "panel_source"
    REFERENCES = "references"


class GeneRecord(BaseModel):
    """One gene/transcript pair read from the input list."""

    model_config = ConfigDict(frozen=True)

    gene_id: str = Field(description="dictyBase gene ID (e.g., DDB_G0271324)")
    transcript_id: str = Field(description="dictyBase transcript ID (e.g., DDB0302984)")


@dataclass(frozen=True)
class ResourceRequest:
    """A resolved GET request for one resource of a gene.

    Attributes:
        kind: Which resource of the gene this is
        url: Fully qualified URL
        gene_id: Gene the request belongs to
    """
    kind: ResourceKind
    url: str
    gene_id: str


class PanelLabel(BaseModel):
    """Display label of a panel item."""

    text: str = ""


class PanelItem(BaseModel):
    """A panel embedded in a gene or protein page.

    The ``source`` path is relative to the site base url and is appended to
    it verbatim to get the panel url.
    """

    model_config = ConfigDict(populate_by_name=True)

    key: str
    labels: list[PanelLabel] = Field(default_factory=list, alias="label")
    source_path: str = Field(alias="source")


class PageResponse(BaseModel):
    """Page layout document returned for gene and protein detail urls."""

    items: list[PanelItem]
    layout: str

    def panel_sources(self) -> list[str]:
        """Source paths of all panel items, in page order."""
        return [item.source_path for item in self.items]
