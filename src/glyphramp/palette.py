from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from glyphramp.charsets import charset
from glyphramp.errors import InvalidPalette

MAX_SAMPLE = 255


def glyph_index(sample: int, size: int) -> int:
    """Quantize an 8-bit sample into one of ``size`` buckets.

    Truncating integer division, so 0 always lands on the first glyph and 255
    on the last. Bucket widths are uneven and must stay that way.
    """
    return sample * (size - 1) // MAX_SAMPLE


@dataclass(frozen=True)
class Palette:
    """Glyphs ordered from lightest (index 0) to densest (last index)."""

    glyphs: str
    table: np.ndarray = field(init=False, repr=False, compare=False)

    def __init__(self, glyphs: str | Sequence[str]):
        if isinstance(glyphs, str):
            glyphs = list(glyphs)
        glyphs = list(glyphs)
        if not glyphs:
            raise InvalidPalette("Palette must contain at least one glyph")
        for glyph in glyphs:
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise InvalidPalette(f"Palette entries must be single characters, got {glyph!r}")

        # One glyph per possible sample; renderers index this with the grid directly.
        # Object dtype keeps NUL glyphs, which fixed-width unicode arrays strip
        table = np.array([glyphs[glyph_index(s, len(glyphs))] for s in range(MAX_SAMPLE + 1)], dtype=object)
        table.flags.writeable = False

        object.__setattr__(self, "glyphs", "".join(glyphs))
        object.__setattr__(self, "table", table)

    @classmethod
    def preset(cls, number: int) -> "Palette":
        return cls(charset(number))

    def __len__(self) -> int:
        return len(self.glyphs)

    def index(self, sample: int) -> int:
        if not 0 <= sample <= MAX_SAMPLE:
            raise ValueError(f"Sample out of range 0-{MAX_SAMPLE}: {sample}")
        return glyph_index(int(sample), len(self.glyphs))

    def glyph(self, sample: int) -> str:
        return self.glyphs[self.index(sample)]
