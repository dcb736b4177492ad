"""CSV row reading for labeled post files.

Splits raw lines into comma-delimited fields and locates the ``tag`` and
``content`` columns from the header row. There is no quoting or escaping
support: a comma inside the content is a field separator like any other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .models import Record

logger = logging.getLogger(__name__)

LABEL_COLUMN = "tag"
CONTENT_COLUMN = "content"
FIELD_SEPARATOR = ","


@dataclass(frozen=True)
class ColumnLayout:
    """Zero-based positions of the label and content columns.

    ``None`` means the column was not found in the header.
    """

    label_index: Optional[int] = None
    content_index: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """Whether both columns were found."""
        return self.label_index is not None and self.content_index is not None

    @property
    def missing_columns(self) -> list[str]:
        missing = []
        if self.label_index is None:
            missing.append(LABEL_COLUMN)
        if self.content_index is None:
            missing.append(CONTENT_COLUMN)
        return missing

    def to_record(self, fields: list[str]) -> Record:
        """Pick the label and content out of a row's fields.

        A row too short to reach a column gets ``""`` for the label and
        ``None`` for the content.
        """
        label = _field_at(fields, self.label_index)
        content = _field_at(fields, self.content_index)
        return Record(label=label if label is not None else "", content=content)


def _field_at(fields: list[str], index: Optional[int]) -> Optional[str]:
    if index is None or index >= len(fields):
        return None
    return fields[index]


def split_fields(line: str) -> list[str]:
    """Split one CSV line into its fields.

    The trailing line terminator is dropped first. An empty line yields a
    single empty field.
    """
    return line.rstrip("\r\n").split(FIELD_SEPARATOR)


def find_columns(header_line: str) -> ColumnLayout:
    """Locate the ``tag`` and ``content`` columns in a header line.

    Names must match exactly. When a name repeats, the last occurrence wins.

    Args:
        header_line: The first line of a CSV file.

    Returns:
        ColumnLayout with ``None`` for any column that was not found.
    """
    label_index: Optional[int] = None
    content_index: Optional[int] = None
    for index, name in enumerate(split_fields(header_line)):
        if name == LABEL_COLUMN:
            label_index = index
        if name == CONTENT_COLUMN:
            content_index = index
    return ColumnLayout(label_index=label_index, content_index=content_index)


def resolve_layout(header_line: str) -> ColumnLayout:
    """Discover the columns, falling back when the header is incomplete.

    A missing ``tag`` column is read from index 0. A missing ``content``
    column stays ``None``, so no row carries content. Neither case is an
    error; a warning is logged instead.
    """
    layout = find_columns(header_line)
    if layout.is_complete:
        return layout

    logger.warning(
        "Header %r is missing column(s): %s",
        header_line.rstrip("\r\n"),
        ", ".join(layout.missing_columns),
    )
    if layout.label_index is None:
        layout = ColumnLayout(label_index=0, content_index=layout.content_index)
    return layout


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield a Record for every data row of a CSV stream.

    The first line is consumed as the header. An empty stream yields nothing.
    """
    iterator = iter(lines)
    header = next(iterator, None)
    if header is None:
        logger.warning("Input has no header row")
        return

    layout = resolve_layout(header)
    for line in iterator:
        yield layout.to_record(split_fields(line))
