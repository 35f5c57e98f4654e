"""
Canvas Helpers

Provides helper functions for drawing the header band, the footer band and
images of the direct-draw data sheet.
"""

import logging

from reportlab.lib import colors

from datasheets import conf

from .styles import BRAND_COLOR


logger = logging.getLogger(__name__)

PAGE_MARGIN = 50
FOOTER_MARGIN = 20
LOGO_WIDTH = 80
LOGO_HEIGHT = 30
LOGO_TOP = 20
HEADER_TOP = 30
FOOTER_OFFSET = 40

LOGO_PLACEHOLDER = '[Logo placeholder]'
PRODUCT_IMAGE_PLACEHOLDER = '[Product image placeholder]'


def draw_image(canvas, path, x, y, width, height) -> bool:
    """
    Draw an image scaled into a box, keeping its aspect ratio.

    Args:
        canvas: ReportLab canvas object
        path: Image file path
        x, y: Lower left corner of the box
        width, height: Box size

    Returns:
        True if the image was drawn, False if it could not be loaded
    """
    try:
        canvas.drawImage(
            str(path), x, y,
            width=width,
            height=height,
            preserveAspectRatio=True,
            anchor='ne',
            mask='auto'
        )
    except Exception as e:
        logger.warning(f"Could not draw image {path}: {e}")
        return False
    return True


def draw_header(canvas, page_size, product_name, logo_path, fonts):
    """
    Draw the product name and the logo (or its placeholder).

    Args:
        canvas: ReportLab canvas object
        page_size: (width, height) of the page
        product_name: Text shown at the top left
        logo_path: Resolved logo file, or None
        fonts: (regular, bold) font names
    """
    width, height = page_size
    regular, bold = fonts

    canvas.saveState()

    canvas.setFont(bold, 14)
    canvas.setFillColor(BRAND_COLOR)
    canvas.drawString(PAGE_MARGIN, height - HEADER_TOP - 14, product_name)

    canvas.setFillColor(colors.black)
    logo_drawn = False
    if logo_path:
        logo_drawn = draw_image(
            canvas, logo_path,
            width - PAGE_MARGIN - LOGO_WIDTH,
            height - LOGO_TOP - LOGO_HEIGHT,
            LOGO_WIDTH,
            LOGO_HEIGHT
        )
    if not logo_drawn:
        canvas.setFont(regular, 10)
        canvas.drawRightString(width - PAGE_MARGIN, height - LOGO_TOP - 10, LOGO_PLACEHOLDER)

    canvas.restoreState()


def page_label(page_number: int = 1, total_pages: int = 1) -> str:
    return f"Page {page_number} of {total_pages}"


def draw_footer(canvas, page_size, footer_text, version_date, fonts):
    """
    Draw the footer band: footer text left, version and page label right,
    disclaimer beneath.

    The direct-draw data sheet is a single page, so the label is always
    'Page 1 of 1'.
    """
    width, _ = page_size
    regular, _ = fonts
    baseline = FOOTER_OFFSET - 7

    canvas.saveState()
    canvas.setFont(regular, 7)
    canvas.setFillColor(colors.black)

    if footer_text:
        canvas.drawString(FOOTER_MARGIN, baseline, footer_text)
    canvas.drawRightString(
        width - FOOTER_MARGIN,
        baseline,
        f"Version: {version_date}    {page_label()}"
    )
    canvas.drawString(FOOTER_MARGIN, baseline - 10, conf.get_disclaimer())

    canvas.restoreState()
