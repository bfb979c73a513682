from __future__ import annotations

import pytest

from fluxpoint.image.color import ColorObject


def test_rgb_and_rgba_render_without_spaces() -> None:
    assert ColorObject.from_rgb(0, 255, 0).color == "0,255,0"
    assert ColorObject.from_rgba(12, 34, 56, 78).color == "12,34,56,78"


def test_string_colors_pass_through_unchecked() -> None:
    assert ColorObject.from_string("#000000").color == "#000000"
    assert str(ColorObject.from_string("rebeccapurple")) == "rebeccapurple"


def test_platform_color_tuple_drops_alpha() -> None:
    assert ColorObject.from_color((255, 255, 0)).color == "255,255,0"
    assert ColorObject.from_color((1, 2, 3, 4)).color == "1,2,3"


@pytest.mark.parametrize(
    "channels",
    [(-1, 0, 0), (0, 256, 0), (0, 0, 300)],
)
def test_rgb_rejects_out_of_range_channels(channels) -> None:
    with pytest.raises(ValueError):
        ColorObject.from_rgb(*channels)


def test_rgba_rejects_out_of_range_alpha() -> None:
    with pytest.raises(ValueError, match="Alpha value"):
        ColorObject.from_rgba(0, 0, 0, 256)


def test_empty_or_missing_string_is_rejected() -> None:
    with pytest.raises(ValueError):
        ColorObject.from_string("")
    with pytest.raises(ValueError):
        ColorObject.from_string(None)  # type: ignore[arg-type]


def test_color_is_immutable_and_compares_by_value() -> None:
    color = ColorObject.from_rgb(1, 2, 3)
    assert color == ColorObject.from_string("1,2,3")
    assert hash(color) == hash(ColorObject.from_string("1,2,3"))
    with pytest.raises(ValueError):
        color.root = "4,5,6"


def test_color_serializes_as_plain_string() -> None:
    assert ColorObject.from_rgb(0, 0, 0).model_dump(mode="json") == "0,0,0"
