import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from glyphramp.charsets import DETAILED
from glyphramp.colour_html import render_html
from glyphramp.imaging import blur, decode, output_height, resize, to_grayscale, to_grid
from glyphramp.palette import Palette
from glyphramp.render import render, render_parallel

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 120
# Output heights above this many rows go to the parallel renderer
PARALLEL_THRESHOLD = 100


@dataclass
class ConverterOptions:
    palette: Palette = field(default_factory=lambda: Palette(DETAILED))
    width: int = DEFAULT_WIDTH
    preserve_aspect: bool = True
    use_parallel: bool = True
    parallel_threshold: int = PARALLEL_THRESHOLD
    workers: int | None = None

    def __post_init__(self):
        if not isinstance(self.palette, Palette):
            self.palette = Palette(self.palette)
        if self.width < 1:
            raise ValueError(f"Output width must be at least 1, got {self.width}")
        if self.parallel_threshold < 0:
            raise ValueError(f"Parallel threshold must not be negative, got {self.parallel_threshold}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")


@dataclass
class Conversion:
    text: str
    source_size: tuple[int, int]  # (width, height) of the decoded image
    output_size: tuple[int, int]  # (cols, rows) of the rendered grid
    elapsed: float  # seconds
    parallel: bool = False


class Converter:
    """Turns image files into glyph text or colour HTML."""

    def __init__(self, options: ConverterOptions | None = None):
        self.options = options or ConverterOptions()

    def use_parallel_for(self, rows: int) -> bool:
        return self.options.use_parallel and rows > self.options.parallel_threshold

    def convert(self, path: str | Path) -> Conversion:
        """Decode, grayscale, blur, area-resize and render ``path`` as text."""
        opts = self.options
        start = time.perf_counter()

        image = decode(path)
        gray = blur(to_grayscale(image))
        rows = output_height(image.width, image.height, opts.width, opts.preserve_aspect)
        grid = to_grid(resize(gray, (opts.width, rows)))

        parallel = self.use_parallel_for(rows)
        if parallel:
            logger.debug("Using parallel renderer for %d rows", rows)
            text = render_parallel(grid, opts.palette, opts.workers)
        else:
            logger.debug("Using sequential renderer for %d rows", rows)
            text = render(grid, opts.palette)

        elapsed = time.perf_counter() - start
        logger.info("Converted %s to %dx%d in %.1fms", path, opts.width, rows, elapsed * 1000)
        return Conversion(
            text=text,
            source_size=image.size,
            output_size=(opts.width, rows),
            elapsed=elapsed,
            parallel=parallel,
        )

    def convert_html(self, path: str | Path) -> Conversion:
        """Render ``path`` as HTML with each glyph in its pixel's colour.

        The colour and grayscale images are resized separately and not
        blurred. Aspect ratio is always preserved.
        """
        opts = self.options
        start = time.perf_counter()

        image = decode(path)
        rows = output_height(image.width, image.height, opts.width)
        size = (opts.width, rows)
        colours = to_grid(resize(image, size))
        luminance = to_grid(resize(to_grayscale(image), size))
        # Pillow decodes to RGB
        html = render_html(luminance, colours, opts.palette, channel_order="RGB")

        elapsed = time.perf_counter() - start
        logger.info("Rendered HTML for %s at %dx%d in %.1fms", path, opts.width, rows, elapsed * 1000)
        return Conversion(text=html, source_size=image.size, output_size=size, elapsed=elapsed)


def convert(
    path: str | Path,
    palette: Palette | str = DETAILED,
    target_width: int = DEFAULT_WIDTH,
    preserve_aspect: bool = True,
    use_parallel: bool = True,
) -> str:
    options = ConverterOptions(
        palette=palette,
        width=target_width,
        preserve_aspect=preserve_aspect,
        use_parallel=use_parallel,
    )
    return Converter(options).convert(path).text
