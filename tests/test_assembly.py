"""Test pairing of components into colors."""

import pytest as pt

from colorlist.assembly import assemble_colors
from colorlist.errors import MisalignedPairError
from colorlist.models import Color, NameComponent, RgbComponent


def _alternating(count):
    components = []
    for index in range(count):
        components.append(NameComponent(f"color_{index}"))
        components.append(RgbComponent(index, index + 1, index + 2))
    return components


def test_assemble_single_pair():
    colors = assemble_colors([NameComponent("light_coral"), RgbComponent(240, 128, 128)])
    assert colors == [Color(name="light_coral", red=240, green=128, blue=128)]


def test_assemble_keeps_source_order():
    colors = assemble_colors(_alternating(3))
    assert [color.name for color in colors] == ["color_0", "color_1", "color_2"]
    assert colors[2] == Color("color_2", 2, 3, 4)


@pt.mark.parametrize("count", [0, 1, 5, 40])
def test_assemble_count_is_half_of_components(count):
    components = _alternating(count)
    assert len(assemble_colors(components)) == len(components) // 2


@pt.mark.parametrize("count", [0, 1, 4])
def test_assemble_drops_trailing_component(count):
    components = _alternating(count) + [NameComponent("orphan")]
    colors = assemble_colors(components)
    assert len(colors) == count
    assert all(color.name != "orphan" for color in colors)


def test_assemble_rgb_before_name():
    colors = assemble_colors([RgbComponent(1, 2, 3), NameComponent("reversed")])
    assert colors == [Color("reversed", 1, 2, 3)]


def test_assemble_two_names_later_wins():
    colors = assemble_colors([NameComponent("first"), NameComponent("second")])
    assert colors == [Color(name="second", red=0, green=0, blue=0)]


def test_assemble_two_triples_later_wins():
    colors = assemble_colors([RgbComponent(1, 2, 3), RgbComponent(4, 5, 6)])
    assert colors == [Color(name="", red=4, green=5, blue=6)]


def test_assemble_misaligned_pairs_silently():
    components = [
        NameComponent("a"),
        NameComponent("b"),
        RgbComponent(1, 1, 1),
        NameComponent("c"),
        RgbComponent(2, 2, 2),
    ]
    colors = assemble_colors(components)
    assert colors == [Color("b", 0, 0, 0), Color("c", 1, 1, 1)]


def test_assemble_strict_accepts_aligned_pairs():
    assert len(assemble_colors(_alternating(3), strict=True)) == 3


def test_assemble_strict_rejects_same_kind_pair():
    components = _alternating(1) + [NameComponent("a"), NameComponent("b")]
    with pt.raises(MisalignedPairError, match="pair 1"):
        assemble_colors(components, strict=True)


def test_assemble_strict_rejects_trailing_component():
    with pt.raises(MisalignedPairError):
        assemble_colors(_alternating(2) + [RgbComponent(0, 0, 0)], strict=True)
