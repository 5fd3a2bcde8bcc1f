import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

import numpy as np

from glyphramp.palette import Palette

logger = logging.getLogger(__name__)


class Chunk(NamedTuple):
    """Half-open row range ``[start, end)`` rendered by one worker."""

    start: int
    end: int


def default_workers() -> int:
    """Available hardware parallelism, or 1 if it cannot be determined."""
    return os.cpu_count() or 1


def as_grid(grid) -> np.ndarray:
    """Return ``grid`` as a 2D uint8 array without copying when possible."""
    arr = np.asarray(grid)
    if arr.ndim != 2:
        raise ValueError(f"Luminance grid must be 2D, got shape {arr.shape}")
    if arr.dtype != np.uint8:
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("Luminance samples must be within 0-255")
        arr = arr.astype(np.uint8)
    return arr


def render_rows(grid: np.ndarray, palette: Palette, start: int, end: int) -> str:
    """Render rows ``start`` to ``end`` of the grid, one line per row."""
    table = palette.table
    return "".join("".join(table[row]) + "\n" for row in grid[start:end])


def render(grid, palette: Palette) -> str:
    grid = as_grid(grid)
    return render_rows(grid, palette, 0, grid.shape[0])


def partition_rows(rows: int, workers: int) -> list[Chunk]:
    """Split ``rows`` into one contiguous range per worker.

    Every worker gets ``rows // workers`` rows and the last one also takes the
    remainder. With more workers than rows all but the last range are empty.
    """
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1, got {workers}")
    per_worker = rows // workers
    chunks = [Chunk(i * per_worker, (i + 1) * per_worker) for i in range(workers - 1)]
    chunks.append(Chunk((workers - 1) * per_worker, rows))
    return chunks


def render_parallel(grid, palette: Palette, workers: int | None = None) -> str:
    """Render the grid with one thread per row chunk.

    Produces exactly the output of :func:`render`. The grid and palette are
    only read, and each task builds its own string, so nothing is locked.
    If any task raises, the exception propagates and no output is returned.
    """
    grid = as_grid(grid)
    if workers is None:
        workers = default_workers()
    chunks = partition_rows(grid.shape[0], workers)
    logger.debug("Rendering %d rows in %d chunks: %s", grid.shape[0], len(chunks), chunks)

    # One task per chunk, but never more threads than the hardware offers
    with ThreadPoolExecutor(max_workers=min(workers, default_workers())) as executor:
        futures = [executor.submit(render_rows, grid, palette, chunk.start, chunk.end) for chunk in chunks]
        # result() blocks until each chunk is done and re-raises its error
        parts = [future.result() for future in futures]
    return "".join(parts)
