"""Tests for page layout response decoding."""

import json

import pytest

from genecache.errors import DecodeError
from genecache.resources import PageResponse, PanelItem, first_page, parse_page_responses


SAMPLE_PAGE = json.dumps([
    {
        "items": [
            {
                "key": "info",
                "label": [{"text": "Gene Information"}],
                "source": "/gene/DDB_G0271324/gene/info",
            },
            {
                "key": "go",
                "label": [{"text": "GO Annotations"}],
                "source": "/gene/DDB_G0271324/gene/go",
            },
        ],
        "layout": "accordion",
    },
    {"items": [], "layout": "column"},
])


def test_parse_page_items_in_order():
    pages = parse_page_responses(SAMPLE_PAGE.encode())

    assert len(pages) == 2
    page = pages[0]
    assert page.layout == "accordion"
    assert [item.key for item in page.items] == ["info", "go"]
    assert page.items[0].labels[0].text == "Gene Information"
    assert page.panel_sources() == [
        "/gene/DDB_G0271324/gene/info",
        "/gene/DDB_G0271324/gene/go",
    ]


def test_encoded_page_decodes_to_same_items():
    """A page serialized with the site field names decodes back unchanged."""
    page = PageResponse(
        items=[
            PanelItem(key="a", labels=[{"text": "A"}], source_path="/a"),
            PanelItem(key="b", labels=[], source_path="/b"),
        ],
        layout="x",
    )
    raw = json.dumps([page.model_dump(by_alias=True)])

    decoded = parse_page_responses(raw)

    assert decoded == [page]


def test_unknown_fields_ignored():
    raw = json.dumps([{
        "items": [{"key": "k", "label": [], "source": "/s", "extra": 1}],
        "layout": "x",
        "version": 2,
    }])
    pages = parse_page_responses(raw)
    assert pages[0].items[0].source_path == "/s"


def test_invalid_json_raises_decode_error():
    with pytest.raises(DecodeError):
        parse_page_responses(b"<html>not json</html>")


def test_object_instead_of_array_raises_decode_error():
    with pytest.raises(DecodeError):
        parse_page_responses(json.dumps({"items": [], "layout": "x"}))


def test_item_without_source_raises_decode_error():
    raw = json.dumps([{"items": [{"key": "k", "label": []}], "layout": "x"}])
    with pytest.raises(DecodeError):
        parse_page_responses(raw)


def test_empty_array_decodes_but_has_no_first_page():
    pages = parse_page_responses(b"[]")
    assert pages == []
    with pytest.raises(DecodeError, match="empty"):
        first_page(pages)
