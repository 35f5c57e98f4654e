"""
Document Model for Product Data Sheets

Immutable value types produced by the tag parser and consumed by the
renderers. A ParsedDocument is created fresh per parse and never changes
afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum


class SectionKind(str, Enum):
    """Kind of a content section, named after the tag that opens it."""

    LIST = 'list'
    KEY_VALUE_TABLE = 'invisible_table'
    ZEBRA_TABLE = 'zebra_table'


@dataclass(frozen=True)
class Section:
    """
    A contiguous run of list items or table rows.

    For LIST sections ``data`` holds the item texts; for the table kinds
    it holds the rows (tuples of raw cells) with fully-blank rows removed.
    """

    kind: SectionKind
    subtitle: str = ''
    data: tuple = ()


@dataclass(frozen=True)
class ParsedDocument:
    """Structured content of one product data sheet."""

    header: str = ''
    footer: str = ''
    title: str = ''
    code: str = ''
    power_supply: str = ''
    sections: tuple[Section, ...] = field(default_factory=tuple)
