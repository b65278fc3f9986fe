"""HTML node selection and color component extraction."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .config import COLOR_SELECTOR, RGB_TOKEN
from .errors import MissingAttributeError, PatternNotFoundError, SelectorError
from .models import Component, NameComponent, RgbComponent
from .utils import normalize_name, parse_channel

logger = logging.getLogger("colorlist")

RGB_ATTRIBUTE = "title"

RGB_PATTERN = re.compile(
    re.escape(RGB_TOKEN)
    + r"\s+\((?P<red>\d+)\s+(?P<green>\d+)\s+(?P<blue>\d+)\)"
)


def match_rgb(value: str) -> Optional[Tuple[str, str, str]]:
    """Return the captured red, green and blue digit runs, or ``None``."""
    match = RGB_PATTERN.search(value)
    if match is None:
        return None
    return match.group("red"), match.group("green"), match.group("blue")


def select_color_nodes(
    soup: BeautifulSoup, selector: str = COLOR_SELECTOR
) -> List[Tag]:
    """Return the candidate nodes in document order."""
    try:
        return soup.select(selector)
    except SelectorSyntaxError as exc:
        raise SelectorError(f"Invalid node selector {selector!r}: {exc}") from exc


def classify_node(node: Tag) -> Component:
    """Turn a node into a name component or an RGB component.

    Nodes with visible text carry a color name. Empty nodes are swatches whose
    ``title`` attribute spells out the channel values.
    """
    text = node.get_text().strip()
    if text:
        return NameComponent(normalize_name(text))

    attribute = node.get(RGB_ATTRIBUTE)
    if attribute is None:
        raise MissingAttributeError(
            f"RGB node <{node.name}> has no {RGB_ATTRIBUTE!r} attribute"
        )
    captures = match_rgb(attribute)
    if captures is None:
        raise PatternNotFoundError(f"No RGB triple found in {attribute!r}")
    red, green, blue = (parse_channel(value) for value in captures)
    return RgbComponent(red, green, blue)


def extract_components(
    html: str, selector: str = COLOR_SELECTOR
) -> List[Component]:
    """Parse the page and classify every candidate node in order."""
    soup = BeautifulSoup(html, "html.parser")
    nodes = select_color_nodes(soup, selector)
    logger.debug("Selected %d candidate nodes with %r", len(nodes), selector)
    return [classify_node(node) for node in nodes]
