def crop_range(length, start_margin, end_margin):
    """
    Returns the indices left over after cutting the given margins off both
    ends of an axis. Margins that meet or overlap leave nothing.
    """
    return range(start_margin, max(start_margin, length - end_margin))


def canvas_to_ascii(canvas, fill, margin_left=0, margin_right=0, margin_top=0, margin_bottom=0):
    """
    Turns an opacity canvas into text: fill for every pixel with non-zero
    opacity, a space for every transparent one. Single-band images are read
    directly, images with an alpha band through it, anything else through
    its luminance.
    """
    width, height = canvas.size
    columns = crop_range(width, margin_left, margin_right)
    rows = crop_range(height, margin_top, margin_bottom)
    if not columns or not rows:
        return ""

    bands = canvas.getbands()
    if len(bands) == 1:
        pixels = canvas.load()
    elif "A" in bands:
        pixels = canvas.getchannel("A").load()
    else:
        pixels = canvas.convert("L").load()

    lines = []
    for y in rows:
        line = []
        for x in columns:
            line.append(fill if pixels[x, y] else " ")
        lines.append("".join(line))

    return "\n".join(lines)
