"""
Settings access for the datasheets app.

All values are read lazily from ``django.conf.settings`` so that
``override_settings`` works in tests.
"""

from pathlib import Path

from django.conf import settings


DEFAULT_BACKEND = 'reportlab'
DEFAULT_BROWSER_ARGS = ['--no-sandbox', '--disable-setuid-sandbox']
DEFAULT_BROWSER_TIMEOUT_MS = 30000
DEFAULT_DISCLAIMER = 'Data is subject to change without notice.'


def get_uploads_dir() -> Path:
    """Root directory searched for logo and product images."""
    uploads_dir = getattr(settings, 'DATASHEETS_UPLOADS_DIR', None)
    if uploads_dir:
        return Path(uploads_dir)
    base_dir = getattr(settings, 'BASE_DIR', None)
    return Path(base_dir) / 'uploads' if base_dir else Path('uploads')


def get_default_backend() -> str:
    return getattr(settings, 'DATASHEETS_DEFAULT_BACKEND', DEFAULT_BACKEND)


def get_browser_args() -> list[str]:
    return list(getattr(settings, 'DATASHEETS_BROWSER_ARGS', DEFAULT_BROWSER_ARGS))


def get_browser_timeout_ms() -> int:
    return int(getattr(settings, 'DATASHEETS_BROWSER_TIMEOUT_MS', DEFAULT_BROWSER_TIMEOUT_MS))


def get_disclaimer() -> str:
    return getattr(settings, 'DATASHEETS_DISCLAIMER', DEFAULT_DISCLAIMER)


def get_font_dir():
    """
    Directory holding DejaVuSans.ttf and DejaVuSans-Bold.ttf.

    When unset or the fonts are missing, the direct-draw backend falls
    back to the built-in Helvetica faces.
    """
    font_dir = getattr(settings, 'DATASHEETS_FONT_DIR', None)
    return Path(font_dir) if font_dir else None
