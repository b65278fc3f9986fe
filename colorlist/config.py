"""Configuration objects and constants for the color extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VERSION = "0.1.0"

DEFAULT_SOURCE_URL = "https://en.wikipedia.org/wiki/List_of_colors_(alphabetical)"
DEFAULT_USER_AGENT = f"colorlist/{VERSION} (python-requests)"

# Paragraphs two levels below the main content container.
COLOR_SELECTOR = "div.mw-content-ltr > div > p"

# Bold sans-serif mathematical letter-forms used by the page to spell "RGB".
RGB_TOKEN = "\U0001D5E5\U0001D5DA\U0001D5D5"

OUTPUT_FORMATS = ("json", "xml", "csv")
DEFAULT_OUTPUT_FORMAT = "csv"


@dataclass
class ExtractConfig:
    """Top-level settings that control fetching and record assembly."""

    source_url: str = DEFAULT_SOURCE_URL
    timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT
    strict: bool = False
