"""Decode page layout documents served for gene and protein detail urls."""

from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from genecache.errors import DecodeError
from genecache.resources.models import PageResponse

_PAGES_ADAPTER = TypeAdapter(list[PageResponse])


def parse_page_responses(raw: bytes | str) -> list[PageResponse]:
    """Decode a JSON array of page layout objects.

    Unknown fields are ignored so new fields on the site don't break warming.

    Args:
        raw: Response body

    Returns:
        Decoded pages, in document order

    Raises:
        DecodeError: If the body is not JSON or not an array of pages
    """
    try:
        return _PAGES_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"unexpected page response: {e}") from e


def first_page(pages: Sequence[PageResponse]) -> PageResponse:
    """Return the page whose panels get warmed.

    Raises:
        DecodeError: If the site returned an empty array
    """
    if not pages:
        raise DecodeError("page response is an empty array")
    return pages[0]
