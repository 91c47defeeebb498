from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
from tenacity import wait_none

from html2pdf.config import Settings

FAKE_PDF = b"%PDF-1.7\n% fake render\n%%EOF\n"

SETTING_VARS = [
    "HTML2PDF_EXECUTABLE_PATH",
    "HTML2PDF_NAVIGATION_TIMEOUT",
    "HTML2PDF_RETRIES",
    "HTML2PDF_VERBOSE",
]


@dataclass
class FakeBrowser:
    """Records every call the converter makes against Playwright."""

    pdf_bytes: bytes = FAKE_PDF
    fail_launch: Optional[Exception] = None
    fail_pdf: list[Exception] = field(default_factory=list)
    launches: list[dict[str, Any]] = field(default_factory=list)
    gotos: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    pdf_calls: list[dict[str, Any]] = field(default_factory=list)
    closed: int = 0

    # async_playwright() context manager
    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    @property
    def chromium(self):
        return self

    async def launch(self, **kwargs):
        self.launches.append(kwargs)
        if self.fail_launch is not None:
            raise self.fail_launch
        return self

    async def new_page(self):
        return self

    async def goto(self, url, **kwargs):
        self.gotos.append((url, kwargs))

    async def pdf(self, **kwargs):
        self.pdf_calls.append(kwargs)
        if self.fail_pdf:
            raise self.fail_pdf.pop(0)
        return self.pdf_bytes

    async def close(self):
        self.closed += 1


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No HTML2PDF_* variables and no stray .env; restored after the test."""
    for name in SETTING_VARS:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_browser(monkeypatch, clean_env):
    browser = FakeBrowser()
    monkeypatch.setattr("html2pdf.converter.async_playwright", browser)
    monkeypatch.setattr("html2pdf.converter.RETRY_WAIT", wait_none())
    return browser


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "report.html"
    path.write_text("<html><body><h1>Quarterly report</h1></body></html>", encoding="utf-8")
    return path
