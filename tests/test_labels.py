import pytest

from chartkit.labels import Anchor, Edge, RotatedLabel
from chartkit.padding import Padding
from chartkit.projection import Rect

BOUNDS = Rect.from_points(0.0, 0.0, 100.0, 20.0)


def test_edge_orientation():
    assert Edge.TOP.is_horizontal() and Edge.BOTTOM.is_horizontal()
    assert Edge.LEFT.is_vertical() and Edge.RIGHT.is_vertical()
    assert not Edge.TOP.is_vertical()
    assert not Edge.LEFT.is_horizontal()


def test_anchor_parse_and_display():
    assert Anchor.parse("START") is Anchor.START
    for anchor in Anchor:
        assert Anchor.parse(str(anchor)) is anchor
    assert str(Anchor.MIDDLE) == "middle"


def test_anchor_parse_unknown():
    with pytest.raises(ValueError, match="unknown anchor: `centre`"):
        Anchor.parse("centre")


def test_map_points():
    assert Anchor.START.map_points(1.0, 2.0, 3.0) == 1.0
    assert Anchor.MIDDLE.map_points(1.0, 2.0, 3.0) == 2.0
    assert Anchor.END.map_points(1.0, 2.0, 3.0) == 3.0


def test_css_justify_content():
    assert Anchor.START.css_justify_content() == "flex-start"
    assert Anchor.MIDDLE.css_justify_content() == "center"
    assert Anchor.END.css_justify_content() == "flex-end"


def test_constructors():
    assert RotatedLabel.start("a") == RotatedLabel("a", Anchor.START)
    assert RotatedLabel.middle("b").anchor is Anchor.MIDDLE
    assert RotatedLabel.end("c").anchor is Anchor.END


def test_size():
    padding = Padding.sides(1.0, 2.0, 3.0, 4.0)
    assert RotatedLabel.middle("").size(16.0, padding) == 0.0
    assert RotatedLabel.middle("Title").size(16.0, padding) == 16.0 + padding.height()


def test_position_horizontal():
    padding = Padding.zero()
    for edge in (Edge.TOP, Edge.BOTTOM):
        assert RotatedLabel.start("t").position(edge, BOUNDS, padding) == (
            0,
            0.0,
            BOUNDS.centre_y(),
        )
        assert RotatedLabel.end("t").position(edge, BOUNDS, padding) == (
            0,
            100.0,
            BOUNDS.centre_y(),
        )


def test_position_left_and_right_invert_anchor():
    padding = Padding.zero()
    label = RotatedLabel.start("t")
    assert label.position(Edge.LEFT, BOUNDS, padding) == (270, BOUNDS.centre_x(), 20.0)
    assert label.position(Edge.RIGHT, BOUNDS, padding) == (90, BOUNDS.centre_x(), 0.0)


def test_position_middle_is_centre_of_padded_bounds():
    padding = Padding.sides(1.0, 2.0, 3.0, 4.0)
    content = padding.apply(BOUNDS)
    label = RotatedLabel.middle("t")
    for edge in Edge:
        _, x, y = label.position(edge, BOUNDS, padding)
        assert (x, y) == (content.centre_x(), content.centre_y())


def test_position_respects_padding():
    padding = Padding.sides(1.0, 2.0, 3.0, 4.0)
    _, x, _ = RotatedLabel.start("t").position(Edge.TOP, BOUNDS, padding)
    assert x == padding.left
    _, x, _ = RotatedLabel.end("t").position(Edge.TOP, BOUNDS, padding)
    assert x == BOUNDS.right_x - padding.right