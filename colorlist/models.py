"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NameComponent:
    """Normalized label taken from a node with visible text."""

    name: str


@dataclass(frozen=True)
class RgbComponent:
    """Channel values taken from a node's title attribute."""

    red: int
    green: int
    blue: int


Component = Union[NameComponent, RgbComponent]


@dataclass
class Color:
    """A named color ready for rendering."""

    name: str = ""
    red: int = 0
    green: int = 0
    blue: int = 0
