"""
Asset Resolver

Read-only lookup of the logo and product images below the uploads root.
Lookups never raise: a missing directory or no match yields None.
"""

import base64
import logging
import os
import re
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from . import conf


logger = logging.getLogger(__name__)

IMAGE_SUFFIX = '.png'

_WHITESPACE = re.compile(r'\s+')


def normalize_name(name: str) -> str:
    """Lowercase and drop all whitespace, e.g. 'Product X' -> 'productx'."""
    return _WHITESPACE.sub('', name.lower())


class AssetResolver:
    """
    Finds images for a data sheet under an uploads directory.

    The directory is walked top-down; files within one directory are
    visited in name order, and the first match wins.
    """

    def __init__(self, uploads_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            uploads_dir: Root directory to search (defaults to the
                DATASHEETS_UPLOADS_DIR setting)
        """
        self.uploads_dir = Path(uploads_dir) if uploads_dir else conf.get_uploads_dir()

    def _walk(self) -> Iterator[str]:
        """Yield file paths relative to the uploads root."""
        if not self.uploads_dir.is_dir():
            return

        def on_error(error):
            logger.debug(f"Skipping unreadable path during asset lookup: {error}")

        for dirpath, dirnames, filenames in os.walk(self.uploads_dir, onerror=on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                yield os.path.relpath(os.path.join(dirpath, filename), self.uploads_dir)

    def _find(self, predicate: Callable[[str], bool]) -> Optional[Path]:
        for relative_path in self._walk():
            filename = os.path.basename(relative_path)
            if filename.lower().endswith(IMAGE_SUFFIX) and predicate(filename):
                return self.uploads_dir / relative_path
        return None

    def find_logo(self) -> Optional[Path]:
        """Return the first PNG whose name contains 'logo' (any case)."""
        logo = self._find(lambda filename: 'logo' in filename.lower())
        logger.debug(f"Logo lookup in {self.uploads_dir}: {logo}")
        return logo

    def find_product_image(self, name) -> Optional[Path]:
        """
        Return the first PNG whose normalized name contains ``name``.

        Both sides are compared lowercased with whitespace removed, so
        'Product X' matches 'ProductX.png' and 'product x.png'. A name that
        is not a non-empty string resolves to None without any filesystem
        access.
        """
        if not name or not isinstance(name, str):
            return None

        wanted = normalize_name(name)
        if not wanted:
            return None

        image = self._find(lambda filename: wanted in normalize_name(filename))
        logger.debug(f"Product image lookup for {name!r} in {self.uploads_dir}: {image}")
        return image

    @staticmethod
    def read_data_uri(path: Optional[Union[str, Path]]) -> Optional[str]:
        """
        Read a PNG and encode it as a data URI.

        Returns:
            'data:image/png;base64,...' or None if the file cannot be read
        """
        if not path:
            return None
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.warning(f"Could not read image {path}: {e}")
            return None
        return f"data:image/png;base64,{base64.b64encode(data).decode('ascii')}"
