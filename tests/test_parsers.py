"""Tests for CSV row reading and header column discovery."""

from __future__ import annotations

import logging

import pytest

from post_classifier.models import Record
from post_classifier.parsers import (
    ColumnLayout,
    find_columns,
    iter_records,
    resolve_layout,
    split_fields,
)

# ---------------------------------------------------------------------------
# split_fields
# ---------------------------------------------------------------------------


class TestSplitFields:
    """Tests for comma splitting of a single line."""

    def test_basic_split(self) -> None:
        assert split_fields("sports,go team go") == ["sports", "go team go"]

    def test_strips_newline(self) -> None:
        assert split_fields("a,b\n") == ["a", "b"]

    def test_strips_crlf(self) -> None:
        assert split_fields("a,b\r\n") == ["a", "b"]

    def test_empty_line_is_one_empty_field(self) -> None:
        assert split_fields("") == [""]
        assert split_fields("\n") == [""]

    def test_trailing_comma_keeps_empty_field(self) -> None:
        assert split_fields("sports,") == ["sports", ""]

    def test_comma_in_content_splits(self) -> None:
        """No quoting support: an embedded comma is a separator."""
        assert split_fields('news,"hello, world"') == ["news", '"hello', ' world"']

    def test_whitespace_is_preserved(self) -> None:
        assert split_fields(" a , b ") == [" a ", " b "]


# ---------------------------------------------------------------------------
# find_columns / resolve_layout
# ---------------------------------------------------------------------------


class TestFindColumns:
    """Tests for the pure header scan."""

    def test_standard_header(self) -> None:
        layout = find_columns("tag,content\n")
        assert layout == ColumnLayout(label_index=0, content_index=1)
        assert layout.is_complete

    def test_extra_columns(self) -> None:
        layout = find_columns("n,content,author,tag")
        assert layout.label_index == 3
        assert layout.content_index == 1

    def test_exact_match_only(self) -> None:
        layout = find_columns("Tag,CONTENT, tag,content ")
        assert layout.label_index is None
        assert layout.content_index is None
        assert layout.missing_columns == ["tag", "content"]

    def test_last_duplicate_wins(self) -> None:
        layout = find_columns("tag,content,tag")
        assert layout.label_index == 2

    def test_missing_content(self) -> None:
        layout = find_columns("tag,body")
        assert layout.label_index == 0
        assert layout.content_index is None
        assert not layout.is_complete
        assert layout.missing_columns == ["content"]


class TestResolveLayout:
    """Tests for the lenient fallback on incomplete headers."""

    def test_complete_header_unchanged(self) -> None:
        assert resolve_layout("x,content,tag") == ColumnLayout(2, 1)

    def test_missing_tag_defaults_to_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="post_classifier.parsers"):
            layout = resolve_layout("id,content")
        assert layout == ColumnLayout(label_index=0, content_index=1)
        assert "tag" in caplog.text

    def test_missing_content_stays_none(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="post_classifier.parsers"):
            layout = resolve_layout("tag,text")
        assert layout.content_index is None
        assert "content" in caplog.text


# ---------------------------------------------------------------------------
# ColumnLayout.to_record / iter_records
# ---------------------------------------------------------------------------


class TestRecords:
    """Tests for turning rows into records."""

    def test_to_record(self) -> None:
        layout = ColumnLayout(label_index=1, content_index=0)
        record = layout.to_record(["hello there", "greeting"])
        assert record == Record(label="greeting", content="hello there")

    def test_short_row_has_no_content(self) -> None:
        layout = ColumnLayout(label_index=0, content_index=1)
        record = layout.to_record(["sports"])
        assert record.label == "sports"
        assert record.content is None
        assert not record.has_content

    def test_short_row_has_empty_label(self) -> None:
        layout = ColumnLayout(label_index=2, content_index=0)
        record = layout.to_record(["text"])
        assert record.label == ""
        assert record.content == "text"

    def test_iter_records_skips_header(self, tiny_train_lines: list[str]) -> None:
        records = list(iter_records(tiny_train_lines))
        assert [r.label for r in records] == ["sports", "news"]
        assert records[0].content == "go team go"

    def test_iter_records_empty_stream(self) -> None:
        assert list(iter_records([])) == []

    def test_iter_records_header_only(self) -> None:
        assert list(iter_records(["tag,content\n"])) == []

    def test_iter_records_is_lazy(self) -> None:
        def lines():
            yield "tag,content\n"
            yield "a,x\n"
            raise AssertionError("read past the first record")

        assert next(iter_records(lines())).label == "a"
