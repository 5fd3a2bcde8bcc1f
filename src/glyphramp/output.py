import logging
from pathlib import Path

from glyphramp.errors import OutputWriteError

logger = logging.getLogger(__name__)

TEXT_FILENAME = "output_ascii.txt"
HTML_FILENAME = "output_colored.html"
CHUNK_SIZE = 8192


def save_text(text: str, path: str | Path) -> Path:
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Could not create output file: {path} ({e.strerror or e})") from e
    logger.debug("Wrote %d characters to %s", len(text), path)
    return path


def save_chunked(text: str, path: str | Path, chunk_size: int = CHUNK_SIZE) -> Path:
    """Write the UTF-8 encoding of ``text`` in ``chunk_size`` byte slices."""
    if chunk_size < 1:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")
    path = Path(path)
    data = text.encode("utf-8")
    try:
        with path.open("wb") as f:
            for offset in range(0, len(data), chunk_size):
                f.write(data[offset : offset + chunk_size])
    except OSError as e:
        raise OutputWriteError(f"Could not create output file: {path} ({e.strerror or e})") from e
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
