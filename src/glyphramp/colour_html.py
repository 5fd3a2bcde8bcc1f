from html import escape

import numpy as np

from glyphramp.palette import Palette
from glyphramp.render import as_grid

PRE_OPEN = '<pre style="font-family: monospace; line-height: 1.0; font-size: 6px;">'
PRE_CLOSE = "</pre>"

CHANNEL_ORDERS = ("RGB", "BGR")


def _span(glyph: str, r: int, g: int, b: int) -> str:
    return f'<span style="color: rgb({r},{g},{b});">{glyph}</span>'


def render_html(luminance, colours, palette: Palette, channel_order: str = "RGB") -> str:
    """Render glyphs coloured with the matching pixel of ``colours``.

    ``colours`` is a (rows, cols, 3) array stored in ``channel_order``. The
    markup is always written as rgb(R,G,B), so BGR input is reversed here.
    """
    luminance = as_grid(luminance)
    colours = np.asarray(colours, dtype=np.uint8)
    if colours.ndim != 3 or colours.shape[2] != 3:
        raise ValueError(f"Colour grid must have shape (rows, cols, 3), got {colours.shape}")
    if colours.shape[:2] != luminance.shape:
        raise ValueError(f"Colour grid {colours.shape[:2]} does not match luminance grid {luminance.shape}")
    if channel_order not in CHANNEL_ORDERS:
        raise ValueError(f"Unknown channel order {channel_order!r}, expected one of {CHANNEL_ORDERS}")
    if channel_order == "BGR":
        colours = colours[:, :, ::-1]

    # Escaped once per glyph; the detailed palette contains <, >, & and quotes
    table = [escape(glyph) for glyph in palette.table]

    out = [PRE_OPEN]
    for lum_row, colour_row in zip(luminance, colours):
        parts = [_span(table[sample], *(int(c) for c in colour)) for sample, colour in zip(lum_row, colour_row)]
        parts.append("\n")
        out.append("".join(parts))
    out.append(PRE_CLOSE)
    return "".join(out)
