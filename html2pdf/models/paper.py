"""Named paper formats and their physical dimensions."""

from __future__ import annotations

from enum import Enum

from html2pdf.errors import InvalidPaperSize


class PaperSize(Enum):
    """Paper size, valued as (width, height) in inches."""

    A0 = (33.1, 46.8)  # 84.1cm x 118.9cm
    A1 = (23.4, 33.1)  # 59.4cm x 84.1cm
    A2 = (16.5, 23.4)  # 42.0cm x 59.4cm
    A3 = (11.7, 16.5)  # 29.7cm x 42.0cm
    A4 = (8.27, 11.7)  # 21.0cm x 29.7cm
    A5 = (5.83, 8.27)  # 14.8cm x 21.0cm
    A6 = (4.13, 5.83)  # 10.5cm x 14.8cm
    LETTER = (8.5, 11.0)
    LEGAL = (8.5, 17.0)
    TABLOID = (11.0, 17.0)

    @property
    def width(self) -> float:
        return self.value[0]

    @property
    def height(self) -> float:
        return self.value[1]

    @classmethod
    def parse(cls, value: str) -> "PaperSize":
        """Look up a paper size by name, ignoring case (e.g. 'a4', 'Letter')."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise InvalidPaperSize(value) from None
