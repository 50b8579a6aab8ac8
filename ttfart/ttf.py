import logging
from collections import namedtuple
from math import ceil

from PIL import Image, ImageDraw

from .fonts import Backend
from .model import FontStyle
from .utils import canvas_to_ascii

LOG = logging.getLogger(__name__)
INK = 255

Plan = namedtuple("Plan", ("width", "height", "cell_width", "x_offset"), defaults=(0,))


def measure(draw, font, text):
    """
    Returns (width, height, x_offset) of text drawn at the origin: the
    advance width or the ink's right edge, whichever is larger, by the line
    height or the ink's bottom edge, whichever is larger. Ink reaching left
    of the origin widens the run by x_offset, the shift needed to keep it.
    """
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    ascent, descent = font.getmetrics()
    x_offset = max(0, -left)
    return (
        max(int(ceil(font.getlength(text))), right) + x_offset,
        max(ascent + descent, bottom),
        x_offset,
    )


def plan(request, font):
    """
    Works out the canvas size before anything is drawn. Without kerning,
    every character gets a cell as wide as the reference character.
    """
    with Image.new("L", (1, 1)) as dummy_img:
        dummy_draw = ImageDraw.Draw(dummy_img)
        if request.kerning:
            width, height, x_offset = measure(dummy_draw, font, request.text)
            result = Plan(width, height, None, x_offset)
        else:
            # cells stay at fixed offsets, bearings left of a cell are clipped
            cell_width, height, _ = measure(dummy_draw, font, request.reference_char)
            result = Plan(cell_width * len(request.text), height, cell_width)
    LOG.debug("planned canvas %r for %r", result, request.text)
    return result


def _decorate(draw, font, style, x, width, height):
    ascent, descent = font.getmetrics()
    thickness = max(1, int(round(font.size / 16)))
    if style == FontStyle.Underline:
        y = ascent + max(1, descent // 2)
    else:
        y = ascent - int(ascent * 0.3)
    y = max(0, min(y, height - thickness))
    draw.rectangle((x, y, x + width - 1, y + thickness - 1), fill=INK)


def _draw_run(draw, font, style, x, text, width, height, x_offset=0):
    draw.text((x + x_offset, 0), text, font=font, fill=INK)
    if style.is_decoration and width > 0:
        _decorate(draw, font, style, x, width, height)


def rasterize(request, layout, font):
    """
    Returns a new opacity canvas ("L" image, 0 = transparent) with the text
    drawn on it. The caller owns the canvas and has to close it.
    """
    canvas = Image.new("L", (layout.width, layout.height), color=0)
    try:
        draw = ImageDraw.Draw(canvas)
        style = request.font_style
        if layout.cell_width is None:
            _draw_run(
                draw,
                font,
                style,
                0,
                request.text,
                layout.width,
                layout.height,
                layout.x_offset,
            )
        else:
            for index, char in enumerate(request.text):
                _draw_run(
                    draw,
                    font,
                    style,
                    index * layout.cell_width,
                    char,
                    layout.cell_width,
                    layout.height,
                )
    except BaseException:
        canvas.close()
        raise
    return canvas


def ttf_to_ascii(request, backend=None):
    if backend is None:
        backend = Backend.detect()
    font = backend.load_font(request.font_name, request.font_size, request.font_style)

    layout = plan(request, font)
    if layout.width == 0 or layout.height == 0:
        return ""

    with rasterize(request, layout, font) as canvas:
        return canvas_to_ascii(canvas, request.fill, *request.margins)
