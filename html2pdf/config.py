"""Runtime settings, read from the environment (and a local ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from html2pdf.errors import Html2PdfError

ENV_PREFIX = "HTML2PDF_"
_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    executable_path: Optional[Path] = Field(default=None, description="Chromium binary, default: Playwright's own")
    navigation_timeout: float = Field(default=30_000, ge=0, description="Navigation timeout in ms (0 disables it)")
    retries: int = Field(default=1, ge=1, description="Browser attempts before giving up")
    verbose: bool = Field(default=False, description="Print options sent to the browser")


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Build settings from ``HTML2PDF_*`` environment variables.

    Values from ``env_file`` (default: ``.env`` in the working directory)
    never override variables already set in the environment.
    """
    load_dotenv(env_file or Path.cwd() / ".env")

    raw: dict[str, object] = {}
    for name in Settings.model_fields:
        value = os.getenv(ENV_PREFIX + name.upper())
        if value is None or value == "":
            continue
        raw[name] = value.strip().lower() in _TRUTHY if name == "verbose" else value

    try:
        return Settings(**raw)
    except ValidationError as e:
        raise Html2PdfError(f"Invalid {ENV_PREFIX}* settings: {e}") from e
