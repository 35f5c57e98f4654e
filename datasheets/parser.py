"""
Tag Parser

Recovers a ParsedDocument from spreadsheet rows annotated with tag rows
such as ``_title_`` or ``_zebraTable_``. Parsing is total: malformed,
sparse or oddly typed input degrades to default values or omitted
sections, never to an exception.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional

from .document import ParsedDocument, Section, SectionKind
from .formatting import as_row, first_cell, is_blank, is_blank_row, tag_text


logger = logging.getLogger(__name__)


SCALAR_TAGS = {
    '_header_': 'header',
    '_footer_': 'footer',
    '_title_': 'title',
    '_code_': 'code',
    '_powerSupply_': 'power_supply',
    '_subtitle_': 'subtitle',
}

SECTION_TAGS = {
    '_list_': SectionKind.LIST,
    '_invisible_table_': SectionKind.KEY_VALUE_TABLE,
    '_zebraTable_': SectionKind.ZEBRA_TABLE,
}


class ParserState(str, Enum):
    IDLE = 'idle'
    AWAITING_SCALAR_VALUE = 'awaiting_scalar_value'
    IN_LIST = 'in_list'
    IN_KEY_VALUE_TABLE = 'in_key_value_table'
    IN_ZEBRA_TABLE = 'in_zebra_table'


STATE_FOR_KIND = {
    SectionKind.LIST: ParserState.IN_LIST,
    SectionKind.KEY_VALUE_TABLE: ParserState.IN_KEY_VALUE_TABLE,
    SectionKind.ZEBRA_TABLE: ParserState.IN_ZEBRA_TABLE,
}

KIND_FOR_STATE = {state: kind for kind, state in STATE_FOR_KIND.items()}


def is_tag(text: str) -> bool:
    return text.startswith('_') and text.endswith('_')


class TagParser:
    """
    State machine behind :func:`parse`.

    Feed rows one by one with :meth:`feed`, then call :meth:`finish`.
    Each instance parses exactly one document.
    """

    def __init__(self):
        self.state = ParserState.IDLE
        self.fields = {name: '' for name in SCALAR_TAGS.values() if name != 'subtitle'}
        self.sections: list[Section] = []
        self.accumulator: list = []
        self.pending_subtitle = ''
        self._scalar_target: Optional[str] = None

    def feed(self, row: Any) -> None:
        row = as_row(row)
        text = tag_text(first_cell(row))

        if is_tag(text):
            self.on_tag(text)
        elif self.state is ParserState.AWAITING_SCALAR_VALUE:
            self.on_scalar_value(text)
        elif self.state is ParserState.IN_LIST:
            self.on_list_row(text)
        elif self.state in (ParserState.IN_KEY_VALUE_TABLE, ParserState.IN_ZEBRA_TABLE):
            self.on_table_row(row)

    def on_tag(self, tag: str) -> None:
        """Close the open section, then switch state on the new tag."""
        self.flush()

        if tag in SCALAR_TAGS:
            self.state = ParserState.AWAITING_SCALAR_VALUE
            self._scalar_target = SCALAR_TAGS[tag]
        elif tag in SECTION_TAGS:
            self.state = STATE_FOR_KIND[SECTION_TAGS[tag]]
        else:
            logger.debug(f"Ignoring unknown tag {tag!r}")
            self.state = ParserState.IDLE

    def on_scalar_value(self, text: str) -> None:
        if self._scalar_target == 'subtitle':
            self.pending_subtitle = text
        else:
            self.fields[self._scalar_target] = text
        self._scalar_target = None
        self.state = ParserState.IDLE

    def on_list_row(self, text: str) -> None:
        # Membership is decided on the trimmed text, the item is kept as is
        if not is_blank(text):
            self.accumulator.append(text)

    def on_table_row(self, row: tuple) -> None:
        if not is_blank_row(row):
            self.accumulator.append(row)

    def flush(self) -> None:
        """Emit the accumulated section, if any, and reset the subtitle."""
        kind = KIND_FOR_STATE.get(self.state)
        if kind is not None and self.accumulator:
            self.sections.append(
                Section(kind=kind, subtitle=self.pending_subtitle, data=tuple(self.accumulator))
            )
            self.accumulator = []
            self.pending_subtitle = ''

    def finish(self) -> ParsedDocument:
        self.flush()
        self.state = ParserState.IDLE
        return ParsedDocument(sections=tuple(self.sections), **self.fields)


def parse(rows: Optional[Iterable[Any]]) -> ParsedDocument:
    """
    Parse spreadsheet rows into a ParsedDocument.

    Args:
        rows: Rows as extracted from the first worksheet. Each row is a
            sequence of cells (str, int, float, bool or None).

    Returns:
        ParsedDocument; never raises.
    """
    parser = TagParser()
    if rows is None:
        return parser.finish()

    try:
        iterator = iter(rows)
    except TypeError:
        logger.debug(f"Rows of type {type(rows).__name__} are not iterable")
        return parser.finish()

    for row in iterator:
        parser.feed(row)

    document = parser.finish()
    logger.debug(
        f"Parsed data sheet {document.header!r} with {len(document.sections)} section(s)"
    )
    return document
