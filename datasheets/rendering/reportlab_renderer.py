"""
ReportLab Renderer Implementation

Direct-draw backend: paints the data sheet onto a single A4 page with
ReportLab canvas primitives, moving a cursor from top to bottom.
"""

import logging
from typing import BinaryIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas as pdf_canvas
from reportlab.platypus import Paragraph, Table

from datasheets.assets import AssetResolver
from datasheets.document import ParsedDocument, SectionKind
from datasheets.exceptions import RenderError
from datasheets.formatting import SectionView, document_views, product_name, version_date

from .canvas import (
    PAGE_MARGIN,
    PRODUCT_IMAGE_PLACEHOLDER,
    draw_footer,
    draw_header,
    draw_image,
)
from .interfaces import IDatasheetRenderer
from .styles import (
    get_datasheet_styles,
    get_fonts,
    get_key_value_table_style,
    get_zebra_table_style,
)


logger = logging.getLogger(__name__)

HEADER_BAND_HEIGHT = 70
PRODUCT_IMAGE_SIZE = 150
PRODUCT_IMAGE_GAP = 10
FIRST_LIST_WIDTH_RATIO = 0.6
BULLET_RADIUS = 2
BULLET_INDENT = 10
TEXT_INDENT = 20
SECTION_GAP = 4


class _PageCursor:
    """Vertical flow over one page; ``y`` is the top of the free space."""

    def __init__(self, canvas, page_size, styles):
        self.canvas = canvas
        self.width, self.height = page_size
        self.styles = styles
        self.left = PAGE_MARGIN
        self.content_width = self.width - 2 * PAGE_MARGIN
        self.y = self.height - HEADER_BAND_HEIGHT

    def space(self, points: float) -> None:
        self.y -= points

    def paragraph(self, text: str, style_name: str, width: float = None) -> None:
        style = self.styles[style_name]
        if text:
            para = Paragraph(escape(text), style)
            _, height = para.wrapOn(self.canvas, width or self.content_width, self.height)
            para.drawOn(self.canvas, self.left, self.y - height)
            self.y -= height
        else:
            self.y -= style.leading
        self.y -= style.spaceAfter

    def bullet_list(self, items: list[str], width: float) -> None:
        style = self.styles['Body']
        self.canvas.setFillColor(colors.black)
        for item in items:
            para = Paragraph(escape(item), style)
            _, height = para.wrapOn(self.canvas, width - TEXT_INDENT, self.height)
            para.drawOn(self.canvas, self.left + TEXT_INDENT, self.y - height)
            # Bullet sits on the middle of the first line
            bullet_y = self.y - style.leading + style.fontSize * 0.35
            self.canvas.circle(self.left + BULLET_INDENT, bullet_y, BULLET_RADIUS, stroke=0, fill=1)
            self.y -= height

    def table(self, data: list[list], col_widths: list[float], table_style) -> None:
        table = Table(data, colWidths=col_widths)
        table.setStyle(table_style)
        _, height = table.wrapOn(self.canvas, self.content_width, self.height)
        table.drawOn(self.canvas, self.left, self.y - height)
        self.y -= height


class ReportLabRenderer(IDatasheetRenderer):
    """
    Data sheet renderer drawing directly with ReportLab.

    Everything is laid out on one page; content that does not fit runs
    off the bottom and the footer always reads 'Page 1 of 1'.
    """

    backend = 'reportlab'

    def __init__(self, page_size=A4, compress: bool = True):
        """
        Args:
            page_size: Page size in points
            compress: Compress page content streams
        """
        self.page_size = page_size
        self.compress = compress

    def render(self, document: ParsedDocument, assets: AssetResolver, sink: BinaryIO) -> None:
        try:
            self._render(document, assets, sink)
        except Exception as e:
            logger.error(f"Failed to render data sheet with ReportLab: {e}", exc_info=True)
            raise RenderError(f"ReportLab rendering failed: {e}", backend=self.backend) from e

        logger.info(
            f"Successfully rendered data sheet {document.header!r} with ReportLab "
            f"({len(document.sections)} sections)"
        )

    def _render(self, document: ParsedDocument, assets: AssetResolver, sink: BinaryIO) -> None:
        fonts = get_fonts()
        styles = get_datasheet_styles(*fonts)

        canvas = pdf_canvas.Canvas(sink, pagesize=self.page_size, pageCompression=int(self.compress))
        canvas.setTitle(document.title or product_name(document))
        canvas.setSubject(document.code)

        draw_header(canvas, self.page_size, product_name(document), assets.find_logo(), fonts)

        cursor = _PageCursor(canvas, self.page_size, styles)
        cursor.paragraph(document.title, 'Title')
        cursor.paragraph(document.code, 'Meta')
        cursor.paragraph(document.power_supply, 'Meta')

        self._draw_product_image(cursor, assets.find_product_image(document.header))
        cursor.space(SECTION_GAP)

        for index, view in enumerate(document_views(document)):
            self._draw_section(cursor, view, first=index == 0)

        draw_footer(canvas, self.page_size, document.footer, version_date(), fonts)

        canvas.showPage()
        canvas.save()

    def _draw_product_image(self, cursor: _PageCursor, image_path) -> None:
        top = cursor.y - PRODUCT_IMAGE_GAP
        right = cursor.width - PAGE_MARGIN
        drawn = False
        if image_path:
            drawn = draw_image(
                cursor.canvas, image_path,
                right - PRODUCT_IMAGE_SIZE,
                top - PRODUCT_IMAGE_SIZE,
                PRODUCT_IMAGE_SIZE,
                PRODUCT_IMAGE_SIZE
            )
        if not drawn:
            body = cursor.styles['Body']
            cursor.canvas.setFont(body.fontName, body.fontSize)
            cursor.canvas.setFillColor(colors.black)
            cursor.canvas.drawRightString(right, top - body.fontSize, PRODUCT_IMAGE_PLACEHOLDER)

    def _draw_section(self, cursor: _PageCursor, view: SectionView, first: bool) -> None:
        if view.subtitle:
            cursor.paragraph(view.subtitle, 'Subtitle')

        if view.kind is SectionKind.LIST:
            width = cursor.content_width
            if first:
                width *= FIRST_LIST_WIDTH_RATIO
            cursor.bullet_list(view.items, width)
        elif view.kind is SectionKind.KEY_VALUE_TABLE and view.rows:
            body = cursor.styles['Body']
            data = [[Paragraph(escape(text), body) for text in row] for row in view.rows]
            half = cursor.content_width / 2
            cursor.table(data, [half, half], get_key_value_table_style())
        elif view.kind is SectionKind.ZEBRA_TABLE and view.rows:
            column_count = len(view.header_row)
            header_style = cursor.styles['ZebraHeader']
            cell_style = cursor.styles['ZebraCell']
            data = [[Paragraph(escape(text), header_style) for text in view.header_row]]
            data.extend(
                [Paragraph(escape(text), cell_style) for text in row] for row in view.body_rows
            )
            column_width = cursor.content_width / column_count
            cursor.table(data, [column_width] * column_count, get_zebra_table_style(column_count))

        cursor.space(SECTION_GAP)
