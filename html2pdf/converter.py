"""Convert a local HTML file to PDF using Playwright's headless Chromium."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright
from tenacity import (
    AsyncRetrying,
    after_nothing,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from html2pdf.config import Settings, load_settings
from html2pdf.durations import format_duration
from html2pdf.errors import BrowserError, Html2PdfIOError, InputNotFound
from html2pdf.models import PrintOptions

PathLike = Union[str, Path]

# Backoff between browser attempts
RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=10)


def log_retry(retry_state) -> None:
    """Log retry attempts."""
    exc = retry_state.outcome.exception()
    print(f"    [retry] Attempt {retry_state.attempt_number} failed: {exc}")


def resolve_output(input_path: PathLike, output_path: Optional[PathLike] = None) -> Path:
    """Explicit output wins, otherwise the input with a ``.pdf`` extension."""
    if output_path is not None:
        return Path(output_path)
    return Path(input_path).with_suffix(".pdf")


def resolve_input(input_path: PathLike) -> Path:
    """Absolute, symlink-free path to an existing HTML file."""
    path = Path(input_path)
    try:
        path = path.resolve(strict=True)
    except (OSError, RuntimeError):
        raise InputNotFound(input_path) from None
    if not path.is_file():
        raise InputNotFound(input_path)
    return path


async def print_to_pdf(
    url: str,
    pdf_kwargs: dict[str, Any],
    wait: Optional[float],
    settings: Settings,
) -> bytes:
    """Navigate a fresh headless browser to ``url`` and print it."""
    launch_kwargs: dict[str, Any] = {"headless": True}
    if settings.executable_path is not None:
        launch_kwargs["executable_path"] = str(settings.executable_path)

    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(**launch_kwargs)
            try:
                page = await browser.new_page()
                await page.goto(url, wait_until="load", timeout=settings.navigation_timeout)

                if wait:
                    print(f"Waiting {format_duration(wait)} before export to PDF")
                    await asyncio.sleep(wait)

                if settings.verbose:
                    print(f"Using PDF options: {pdf_kwargs}")
                return await page.pdf(**pdf_kwargs)
            finally:
                await browser.close()
    except PlaywrightError as e:
        raise BrowserError(str(e)) from e


async def html_to_pdf(
    html_path: PathLike,
    pdf_path: PathLike,
    pdf_options: Optional[PrintOptions] = None,
    wait: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """Render an HTML file to PDF with the headless browser.

    Args:
        html_path: Path to input HTML file
        pdf_path: Path to output PDF file
        pdf_options: Layout options, browser defaults when omitted
        wait: Seconds to wait after the page loaded, before printing
        settings: Runtime settings, read from the environment when omitted

    Returns:
        The path the PDF was written to.
    """
    settings = settings or load_settings()
    pdf_options = pdf_options or PrintOptions()
    pdf_path = Path(pdf_path)

    url = resolve_input(html_path).as_uri()
    print(f"Input file: {url}")

    pdf_kwargs = pdf_options.to_pdf_kwargs()
    pdf = b""
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(settings.retries),
        wait=RETRY_WAIT,
        retry=retry_if_exception_type(BrowserError),
        after=log_retry if settings.retries > 1 else after_nothing,
        reraise=True,
    ):
        with attempt:
            pdf = await print_to_pdf(url, pdf_kwargs, wait, settings)

    print(f"Output file: {pdf_path}")
    try:
        pdf_path.parent.mkdir(parents=True, exist_ok=True)
        pdf_path.write_bytes(pdf)
    except OSError as e:
        raise Html2PdfIOError(f"Cannot write {pdf_path}: {e}") from e

    print(f"✓ Rendered PDF → {pdf_path}")
    return pdf_path


def convert(
    html_path: PathLike,
    pdf_path: Optional[PathLike] = None,
    pdf_options: Optional[PrintOptions] = None,
    wait: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """Synchronous wrapper for :func:`html_to_pdf`."""
    output = resolve_output(html_path, pdf_path)
    return asyncio.run(html_to_pdf(html_path, output, pdf_options, wait, settings))
