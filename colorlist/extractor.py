"""High-level orchestration for fetching the page and producing colors."""

from __future__ import annotations

import logging
import time
from typing import List

from .assembly import assemble_colors
from .config import ExtractConfig
from .content import extract_components
from .fetch import fetch_html_async
from .models import Color

logger = logging.getLogger("colorlist")


def extract_colors(html: str, strict: bool = False) -> List[Color]:
    """Turn raw page markup into color records."""
    components = extract_components(html)
    colors = assemble_colors(components, strict=strict)
    logger.debug(
        "Assembled %d colors from %d components", len(colors), len(components)
    )
    return colors


async def run_extractor(config: ExtractConfig) -> List[Color]:
    """Fetch the configured page once and extract its colors."""
    start = time.perf_counter()
    logger.info("Fetching %s", config.source_url)
    html = await fetch_html_async(
        config.source_url,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )
    colors = extract_colors(html, strict=config.strict)
    logger.info(
        "Extracted %d colors in %.2fs", len(colors), time.perf_counter() - start
    )
    return colors
