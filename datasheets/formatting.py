"""
Cell Formatting

Shared text decisions for both renderers: how a cell becomes text, what
counts as blank, and which rows and columns of a section are shown.
Renderers only decide how the resulting text is painted, never which
text appears.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from django.utils import timezone

from .document import Section, SectionKind


def is_number(value: Any) -> bool:
    """True for int and float cells; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_percentage(value: Any) -> bool:
    return is_number(value) and 0 < value < 1


def format_percentage(value: float) -> str:
    """
    Format a fraction as a whole percentage, rounding halves up.

    Example:
        >>> format_percentage(0.125)
        '13 %'
    """
    return f"{int(math.floor(value * 100 + 0.5))} %"


def _number_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def tag_text(value: Any) -> str:
    """
    Coerce a cell to text without percentage formatting.

    Used for tag detection, scalar fields and list items.
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        return _number_text(value)
    return str(value)


def cell_text(value: Any) -> str:
    """Coerce a table cell to its display text."""
    if is_percentage(value):
        return format_percentage(value)
    return tag_text(value)


def is_blank(value: Any) -> bool:
    """A cell is blank if it is absent or a whitespace-only string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ''
    return False


def is_blank_row(row) -> bool:
    return all(is_blank(cell) for cell in row)


def as_row(row: Any) -> tuple:
    """
    Normalize anything a spreadsheet reader may hand over into a row tuple.

    ``None`` becomes an empty row, strings and other scalars become a
    one-cell row.
    """
    if row is None:
        return ()
    if isinstance(row, (str, bytes)):
        return (row,)
    try:
        return tuple(row)
    except TypeError:
        return (row,)


def first_cell(row: tuple) -> Any:
    return row[0] if row else None


def zebra_column_count(rows) -> int:
    """Number of non-blank cells in the header row of a zebra table."""
    if not rows:
        return 0
    return sum(1 for cell in rows[0] if not is_blank(cell))


def _fit_row(row: tuple, width: int) -> list[str]:
    texts = [cell_text(cell) for cell in row[:width]]
    texts.extend([''] * (width - len(texts)))
    return texts


@dataclass(frozen=True)
class SectionView:
    """
    Renderer-independent content of one section.

    ``items`` is filled for lists, ``rows`` for tables. For zebra tables
    the first row is the header row.
    """

    kind: SectionKind
    subtitle: str = ''
    items: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items and not self.rows

    @property
    def header_row(self) -> Optional[list[str]]:
        return self.rows[0] if self.rows else None

    @property
    def body_rows(self) -> list[list[str]]:
        return self.rows[1:]

    def texts(self) -> list[str]:
        """All displayed texts in reading order, subtitle first."""
        texts = [self.subtitle] if self.subtitle else []
        texts.extend(self.items)
        for row in self.rows:
            texts.extend(row)
        return texts


def section_view(section: Section) -> SectionView:
    """Build the content view of a section."""
    if section.kind is SectionKind.LIST:
        items = [tag_text(item) for item in section.data if not is_blank(item)]
        return SectionView(kind=section.kind, subtitle=section.subtitle, items=items)

    rows = [as_row(row) for row in section.data]
    rows = [row for row in rows if not is_blank_row(row)]

    if section.kind is SectionKind.KEY_VALUE_TABLE:
        width = 2
    else:
        width = zebra_column_count(rows)
        if width == 0:
            rows = []

    return SectionView(
        kind=section.kind,
        subtitle=section.subtitle,
        rows=[_fit_row(row, width) for row in rows],
    )


def document_views(document) -> list[SectionView]:
    """Content views of the sections that show anything, in document order."""
    views = [section_view(section) for section in document.sections]
    return [view for view in views if not view.is_empty]


def version_date() -> str:
    """Date stamped into the footer of both backends, e.g. '2024-05-31'."""
    return timezone.now().date().isoformat()


DEFAULT_PRODUCT_NAME = 'Product Name'


def product_name(document) -> str:
    """Header text shown in the header band of both backends."""
    return document.header or DEFAULT_PRODUCT_NAME
