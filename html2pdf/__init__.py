"""Convert HTML to PDF using a headless Chromium."""

from html2pdf.config import Settings, load_settings
from html2pdf.errors import (
    BrowserError,
    Html2PdfError,
    Html2PdfIOError,
    InputNotFound,
    InvalidDuration,
    InvalidMarginDefinition,
    InvalidMarginValue,
    InvalidPaperSize,
    InvalidScale,
)
from html2pdf.converter import convert, html_to_pdf, resolve_output
from html2pdf.models import Margin, PaperSize, PrintOptions

__version__ = "0.7.1"

__all__ = [
    "BrowserError",
    "Html2PdfError",
    "Html2PdfIOError",
    "InputNotFound",
    "InvalidDuration",
    "InvalidMarginDefinition",
    "InvalidMarginValue",
    "InvalidPaperSize",
    "InvalidScale",
    "Margin",
    "PaperSize",
    "PrintOptions",
    "Settings",
    "convert",
    "html_to_pdf",
    "load_settings",
    "resolve_output",
]
