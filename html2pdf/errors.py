"""Errors raised while converting HTML to PDF."""

from __future__ import annotations


class Html2PdfError(Exception):
    """Base class for every error raised by html2pdf."""


class InvalidPaperSize(Html2PdfError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid paper size {value!r}, expected a value in "
            "A4, Letter, Legal, A3, Tabloid, A2, A1, A0, A5, A6"
        )


class InvalidMarginDefinition(Html2PdfError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid margin definition, expected 1, 2, or 4 values, got {value!r}")


class InvalidMarginValue(Html2PdfError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid margin value: {value!r}")


class InvalidScale(Html2PdfError, ValueError):
    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Invalid scale {value}, expected a value between 0.1 and 2.0")


class InvalidDuration(Html2PdfError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid duration {value!r}, expected e.g. 150ms, 10s, 1m 30s")


class BrowserError(Html2PdfError):
    """Headless browser failed to launch, navigate or print."""

    def __init__(self, message: str):
        super().__init__(f"Oops, an error occurred with the headless browser: {message}")


class Html2PdfIOError(Html2PdfError, OSError):
    """Reading the input or writing the output failed."""


class InputNotFound(Html2PdfIOError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"HTML file not found: {path}")
