"""Pairing of extracted components into color records."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import MisalignedPairError
from .models import Color, Component, NameComponent, RgbComponent

logger = logging.getLogger("colorlist")

PAIR_SIZE = 2


def _merge_pair(pair: Sequence[Component]) -> Color:
    color = Color()
    for component in pair:
        if isinstance(component, NameComponent):
            color.name = component.name
        elif isinstance(component, RgbComponent):
            color.red = component.red
            color.green = component.green
            color.blue = component.blue
        else:
            raise TypeError(f"Unsupported component {component!r}")
    return color


def _is_aligned(pair: Sequence[Component]) -> bool:
    kinds = {type(component) for component in pair}
    return len(pair) == PAIR_SIZE and kinds == {NameComponent, RgbComponent}


def assemble_colors(
    components: Sequence[Component], strict: bool = False
) -> List[Color]:
    """Merge consecutive component pairs into colors, in source order.

    A trailing unpaired component is dropped. Pairs holding two components of
    the same kind keep the later one and leave the other fields at their
    defaults, unless ``strict`` is set, in which case any pair that is not
    one name plus one triple raises :class:`MisalignedPairError`.
    """
    colors: List[Color] = []
    for start in range(0, len(components), PAIR_SIZE):
        pair = components[start : start + PAIR_SIZE]
        index = start // PAIR_SIZE
        if strict and not _is_aligned(pair):
            raise MisalignedPairError(
                f"Component pair {index} is misaligned: {list(pair)!r}"
            )
        if len(pair) < PAIR_SIZE:
            logger.debug("Dropping unpaired trailing component %r", pair[0])
            continue
        colors.append(_merge_pair(pair))
    return colors
