"""Print-to-PDF request sent to the headless browser."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from html2pdf.errors import InvalidScale
from html2pdf.models.margin import Margin
from html2pdf.models.paper import PaperSize

MIN_SCALE = 0.1
MAX_SCALE = 2.0


def check_scale(value: float) -> float:
    """Reject scales the browser would refuse."""
    if not MIN_SCALE <= value <= MAX_SCALE:
        raise InvalidScale(value)
    return value


class PrintOptions(BaseModel):
    """Layout parameters for a single print-to-PDF render."""

    model_config = ConfigDict(frozen=True)

    landscape: bool = Field(default=False, description="Use landscape orientation")
    background: bool = Field(default=False, description="Print background graphics")
    header: Optional[str] = Field(default=None, description="HTML template for the print header")
    footer: Optional[str] = Field(default=None, description="HTML template for the print footer")
    scale: Optional[float] = Field(default=None, ge=MIN_SCALE, le=MAX_SCALE, description="Rendering scale")
    page_ranges: Optional[str] = Field(default=None, description="Pages to print, e.g. '1-5, 8, 11-13'")
    paper: Optional[PaperSize] = Field(default=None, description="Paper format")
    margin: Optional[Margin] = Field(default=None, description="Page margins in inches")
    prefer_css_page_size: bool = Field(default=False, description="Let CSS @page size win over paper")

    def __init__(self, **data: Any) -> None:
        scale = data.get("scale")
        if isinstance(scale, (int, float)) and not isinstance(scale, bool):
            check_scale(scale)
        super().__init__(**data)

    @property
    def display_header_footer(self) -> bool:
        return self.header is not None or self.footer is not None

    def to_pdf_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for Playwright's ``page.pdf()``.

        Options left unset are omitted so the browser defaults apply.
        """
        kwargs: dict[str, Any] = {
            "landscape": self.landscape,
            "display_header_footer": self.display_header_footer,
            "print_background": self.background,
        }
        if self.prefer_css_page_size:
            kwargs["prefer_css_page_size"] = True
        if self.scale is not None:
            kwargs["scale"] = self.scale
        if self.paper is not None:
            kwargs["width"] = f"{self.paper.width:g}in"
            kwargs["height"] = f"{self.paper.height:g}in"
        if self.margin is not None:
            kwargs["margin"] = self.margin.as_dict()
        if self.page_ranges:
            kwargs["page_ranges"] = self.page_ranges
        if self.header is not None:
            kwargs["header_template"] = self.header
        if self.footer is not None:
            kwargs["footer_template"] = self.footer
        return kwargs
