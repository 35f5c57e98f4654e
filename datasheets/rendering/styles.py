"""
PDF Styling

Provides the fonts, paragraph styles and table styles of the direct-draw
data sheet.
"""

import logging

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import TableStyle

from datasheets import conf


logger = logging.getLogger(__name__)

BRAND_COLOR = colors.HexColor('#c91e42')
ZEBRA_SHADE = colors.HexColor('#e2e2e2')
RULE_COLOR = colors.HexColor('#000000')

FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'


def get_fonts() -> tuple[str, str]:
    """
    Get the regular and bold font names.

    Registers DejaVu Sans from DATASHEETS_FONT_DIR when both faces are
    present, so that text outside Latin-1 renders; otherwise Helvetica.

    Returns:
        (regular, bold) font names
    """
    font_dir = conf.get_font_dir()
    if font_dir is None:
        return FONT_REGULAR, FONT_BOLD

    regular = font_dir / 'DejaVuSans.ttf'
    bold = font_dir / 'DejaVuSans-Bold.ttf'
    if not (regular.is_file() and bold.is_file()):
        logger.warning(f"DejaVu fonts not found in {font_dir}, using Helvetica")
        return FONT_REGULAR, FONT_BOLD

    registered = pdfmetrics.getRegisteredFontNames()
    if 'DejaVuSans' not in registered:
        pdfmetrics.registerFont(TTFont('DejaVuSans', str(regular)))
    if 'DejaVuSans-Bold' not in registered:
        pdfmetrics.registerFont(TTFont('DejaVuSans-Bold', str(bold)))
    return 'DejaVuSans', 'DejaVuSans-Bold'


def get_datasheet_styles(regular: str = FONT_REGULAR, bold: str = FONT_BOLD):
    """
    Get data sheet paragraph styles.

    Returns:
        Dictionary of ParagraphStyle objects
    """
    styles = getSampleStyleSheet()

    return {
        'ProductName': ParagraphStyle(
            'ProductName',
            parent=styles['Normal'],
            fontSize=14,
            leading=17,
            textColor=BRAND_COLOR,
            fontName=bold
        ),
        'Title': ParagraphStyle(
            'Title',
            parent=styles['Heading1'],
            fontSize=14,
            leading=17,
            textColor=colors.black,
            spaceBefore=0,
            spaceAfter=4,
            alignment=TA_LEFT,
            fontName=bold
        ),
        'Meta': ParagraphStyle(
            'Meta',
            parent=styles['Normal'],
            fontSize=10,
            leading=12,
            spaceAfter=2,
            alignment=TA_RIGHT,
            fontName=regular
        ),
        'Subtitle': ParagraphStyle(
            'Subtitle',
            parent=styles['Heading3'],
            fontSize=11,
            leading=13,
            textColor=colors.black,
            spaceBefore=0,
            spaceAfter=2,
            alignment=TA_LEFT,
            fontName=bold
        ),
        'Body': ParagraphStyle(
            'Body',
            parent=styles['BodyText'],
            fontSize=10,
            leading=12,
            alignment=TA_LEFT,
            fontName=regular
        ),
        'ZebraHeader': ParagraphStyle(
            'ZebraHeader',
            parent=styles['Normal'],
            fontSize=8,
            leading=10,
            alignment=TA_CENTER,
            fontName=bold
        ),
        'ZebraCell': ParagraphStyle(
            'ZebraCell',
            parent=styles['Normal'],
            fontSize=8,
            leading=10,
            alignment=TA_CENTER,
            fontName=regular
        ),
    }


def get_key_value_table_style():
    """Borderless two-column table."""
    return TableStyle([
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('LEFTPADDING', (0, 0), (-1, -1), 5),
        ('RIGHTPADDING', (0, 0), (-1, -1), 5),
        ('TOPPADDING', (0, 0), (-1, -1), 2),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
    ])


def get_zebra_table_style(column_count: int):
    """
    Get the zebra table style.

    Even columns are shaded; the header row is ruled above and (heavier)
    below, the last row below.
    """
    commands = [
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('LEFTPADDING', (0, 0), (-1, -1), 5),
        ('RIGHTPADDING', (0, 0), (-1, -1), 5),
        ('TOPPADDING', (0, 0), (-1, -1), 3),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
        ('LINEABOVE', (0, 0), (-1, 0), 1, RULE_COLOR),
        ('LINEBELOW', (0, -1), (-1, -1), 1, RULE_COLOR),
        ('LINEBELOW', (0, 0), (-1, 0), 2, RULE_COLOR),
    ]
    for column in range(0, column_count, 2):
        commands.append(('BACKGROUND', (column, 0), (column, -1), ZEBRA_SHADE))
    return TableStyle(commands)
