import pytest
from PIL import Image

from ttfart.utils import canvas_to_ascii, crop_range

PATTERN = (
    "..X.",
    ".XX.",
    "..X.",
    "XXXX",
)


@pytest.fixture
def canvas():
    img = Image.new("L", (len(PATTERN[0]), len(PATTERN)), color=0)
    for y, row in enumerate(PATTERN):
        for x, cell in enumerate(row):
            if cell == "X":
                img.putpixel((x, y), 255)
    yield img
    img.close()


def test_crop_range():
    assert crop_range(10, 0, 0) == range(0, 10)
    assert crop_range(10, 2, 3) == range(2, 7)
    assert len(crop_range(10, 5, 5)) == 0
    assert len(crop_range(10, 8, 7)) == 0


def test_full_canvas(canvas):
    assert canvas_to_ascii(canvas, "#") == "  # \n ## \n  # \n####"


def test_fill_substitution(canvas):
    hashes = canvas_to_ascii(canvas, "#")
    dots = canvas_to_ascii(canvas, "*")
    assert dots == hashes.replace("#", "*")
    assert [i for i, c in enumerate(dots) if c in " \n"] == [
        i for i, c in enumerate(hashes) if c in " \n"
    ]


def test_margins(canvas):
    assert canvas_to_ascii(canvas, "#", 1, 1, 1, 0) == "##\n #\n##"


@pytest.mark.parametrize("edge", range(4))
def test_margin_monotonicity(canvas, edge):
    full = canvas_to_ascii(canvas, "#").split("\n")
    for k in range(4):
        margins = [0, 0, 0, 0]
        margins[edge] = k
        lines = canvas_to_ascii(canvas, "#", *margins).split("\n")
        if edge == 0:
            assert lines == [line[k:] for line in full]
        elif edge == 1:
            assert lines == [line[:len(line) - k] for line in full]
        elif edge == 2:
            assert lines == full[k:]
        else:
            assert lines == full[:len(full) - k]


@pytest.mark.parametrize(
    "margins",
    [
        (4, 0, 0, 0),
        (2, 2, 0, 0),
        (3, 5, 0, 0),
        (0, 0, 4, 0),
        (0, 0, 1, 3),
        (0, 0, 1000, 1000),
    ],
)
def test_collapsed_axis_is_empty(canvas, margins):
    assert canvas_to_ascii(canvas, "#", *margins) == ""


def test_no_trailing_newline(canvas):
    assert not canvas_to_ascii(canvas, "#").endswith("\n")


def test_alpha_band():
    img = Image.new("RGBA", (3, 1), (255, 255, 255, 0))
    img.putpixel((1, 0), (0, 0, 0, 1))
    assert canvas_to_ascii(img, "@") == " @ "


def test_faint_pixels_are_ink():
    img = Image.new("L", (2, 1), color=0)
    img.putpixel((0, 0), 1)
    assert canvas_to_ascii(img, "@") == "@ "


def test_luminance_without_alpha():
    img = Image.new("RGB", (3, 1), (0, 0, 0))
    img.putpixel((2, 0), (255, 0, 0))
    assert canvas_to_ascii(img, "@") == "  @"
