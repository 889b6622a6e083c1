"""dictyBase gene resources: request urls and page layout decoding.

Key exports:
- models: GeneRecord, ResourceKind, ResourceRequest, PageResponse, PanelItem
- urls: URLBuilder, build_url
- parser: parse_page_responses, first_page
"""

from genecache.resources.models import (
    GeneRecord,
    PageResponse,
    PanelItem,
    PanelLabel,
    ResourceKind,
    ResourceRequest,
)
from genecache.resources.urls import URLBuilder, build_url
from genecache.resources.parser import first_page, parse_page_responses

__all__ = [
    # Models
    "GeneRecord",
    "PageResponse",
    "PanelItem",
    "PanelLabel",
    "ResourceKind",
    "ResourceRequest",
    # Urls
    "URLBuilder",
    "build_url",
    # Parser
    "parse_page_responses",
    "first_page",
]
