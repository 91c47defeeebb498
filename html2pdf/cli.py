#!/usr/bin/env python3
"""Generate a PDF from a local HTML file using a headless Chromium."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from html2pdf.config import load_settings
from html2pdf.durations import parse_duration
from html2pdf.errors import Html2PdfError
from html2pdf.converter import convert
from html2pdf.models import Margin, PaperSize, PrintOptions
from html2pdf.models.print_options import check_scale


def _argument_type(parse: Callable) -> Callable:
    """Turn a parser's ValueError into an argparse usage error with our message."""

    def convert_value(value: str):
        try:
            return parse(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert_value


def _scale(value: str) -> float:
    return check_scale(float(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2pdf",
        description="Generate a PDF from a local HTML file using a headless Chromium.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Same name as the input, with a .pdf extension
  html2pdf report.html

  # A4 landscape with backgrounds and half-inch margins
  html2pdf report.html -o out/report.pdf --paper A4 --landscape --background --margin 0.5

  # Wait for scripts to finish, print pages 1 to 3 with a page counter footer
  html2pdf chart.html --wait 1s --range 1-3 \\
      --footer '<span class=pageNumber></span>/<span class=totalPages></span>'
        """,
    )

    parser.add_argument("input", type=Path, help="Input HTML file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (default: same name as input with .pdf)",
    )
    parser.add_argument(
        "--landscape",
        action="store_true",
        help="Use landscape mode",
    )
    parser.add_argument(
        "--background",
        action="store_true",
        help="Print background graphics",
    )
    parser.add_argument(
        "--wait",
        type=_argument_type(parse_duration),
        help="Time to wait before printing, e.g. 150ms, 10s",
    )
    parser.add_argument(
        "--header",
        help=(
            "HTML template for the print header. Elements with the classes date, title, url, "
            "pageNumber and totalPages get the matching print values injected, "
            "e.g. '<span class=title></span>'"
        ),
    )
    parser.add_argument(
        "--footer",
        help="HTML template for the print footer, same format as --header",
    )
    parser.add_argument(
        "--paper",
        type=_argument_type(PaperSize.parse),
        help="Paper size: A4, Letter, Legal, A3, Tabloid, A2, A1, A0, A5, A6",
    )
    parser.add_argument(
        "--scale",
        type=_argument_type(_scale),
        help="Scale between 0.1 and 2.0 (default: 1.0)",
    )
    parser.add_argument(
        "--range",
        dest="page_ranges",
        help="Page ranges to print, e.g. '1-5, 8, 11-13'",
    )
    parser.add_argument(
        "--margin",
        type=_argument_type(Margin.parse),
        help=(
            "Margin in inches: '0.4' for all sides, '0.4 0.6' for vertical then horizontal, "
            "'0.4 0.5 0.6 0.7' for top, right, bottom, left"
        ),
    )
    parser.add_argument(
        "--prefer-css-page-size",
        action="store_true",
        help="Give CSS @page size priority over --paper",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print parsed arguments and the PDF options sent to the browser",
    )
    return parser


def print_options_from_args(args: argparse.Namespace) -> PrintOptions:
    return PrintOptions(
        landscape=args.landscape,
        background=args.background,
        header=args.header,
        footer=args.footer,
        scale=args.scale,
        page_ranges=args.page_ranges,
        paper=args.paper,
        margin=args.margin,
        prefer_css_page_size=args.prefer_css_page_size,
    )


def run(args: argparse.Namespace) -> Path:
    settings = load_settings()
    if args.verbose:
        settings = settings.model_copy(update={"verbose": True})
    if settings.verbose:
        print(f"Parsed arguments: {vars(args)}")

    return convert(
        args.input,
        args.output,
        print_options_from_args(args),
        wait=args.wait,
        settings=settings,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except Html2PdfError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
