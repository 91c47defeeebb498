"""Page margins, written the way CSS shorthand writes them."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from html2pdf.errors import InvalidMarginDefinition, InvalidMarginValue


class MarginKind(str, Enum):
    ALL = "all"
    VERTICAL_HORIZONTAL = "vertical_horizontal"
    TOP_RIGHT_BOTTOM_LEFT = "top_right_bottom_left"


def _parse_value(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InvalidMarginValue(token) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidMarginValue(token)
    return value


class Margin(BaseModel):
    """Margin in inches.

    Accepted definitions:
    - '0.4': the value is applied to all sides
    - '0.4 0.6': first value for top and bottom, second for left and right
    - '0.4 0.5 0.6 0.7': top, right, bottom, then left
    """

    model_config = ConfigDict(frozen=True)

    kind: MarginKind
    top: float = Field(ge=0)
    right: float = Field(ge=0)
    bottom: float = Field(ge=0)
    left: float = Field(ge=0)

    @classmethod
    def all(cls, value: float) -> "Margin":
        return cls(kind=MarginKind.ALL, top=value, right=value, bottom=value, left=value)

    @classmethod
    def vertical_horizontal(cls, vertical: float, horizontal: float) -> "Margin":
        return cls(
            kind=MarginKind.VERTICAL_HORIZONTAL,
            top=vertical,
            right=horizontal,
            bottom=vertical,
            left=horizontal,
        )

    @classmethod
    def top_right_bottom_left(cls, top: float, right: float, bottom: float, left: float) -> "Margin":
        return cls(kind=MarginKind.TOP_RIGHT_BOTTOM_LEFT, top=top, right=right, bottom=bottom, left=left)

    @classmethod
    def parse(cls, value: str) -> "Margin":
        tokens = value.split()
        if len(tokens) not in (1, 2, 4):
            raise InvalidMarginDefinition(value)

        values = [_parse_value(token) for token in tokens]
        if len(values) == 1:
            return cls.all(values[0])
        if len(values) == 2:
            return cls.vertical_horizontal(*values)
        return cls.top_right_bottom_left(*values)

    def as_dict(self, unit: str = "in") -> dict[str, str]:
        """Margins keyed by side, each as a length string (e.g. '0.4in')."""
        return {
            "top": f"{self.top:g}{unit}",
            "right": f"{self.right:g}{unit}",
            "bottom": f"{self.bottom:g}{unit}",
            "left": f"{self.left:g}{unit}",
        }
