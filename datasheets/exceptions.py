"""
Exceptions for data sheet rendering.

The tag parser and the asset resolver never raise; everything that can go
wrong while producing PDF bytes surfaces as a RenderError.
"""


class DatasheetError(Exception):
    """Base exception for all data sheet errors."""
    pass


class RenderError(DatasheetError):
    """
    Raised when a renderer fails to produce a complete PDF.

    Any bytes already written to the output sink must be discarded by the
    caller. The underlying exception is available as ``__cause__``.
    """

    def __init__(self, message: str, backend: str = ''):
        super().__init__(message)
        self.backend = backend


class BackendNotAvailable(RenderError):
    """
    Raised when a rendering backend cannot run in this environment.

    Example:
        The HTML backend is selected but Playwright is not installed.
    """
    pass
