import pytest

from glyphramp.errors import OutputWriteError
from glyphramp.output import save_chunked, save_text


def test_save_text(tmp_path):
    path = save_text("ab\ncd\n", tmp_path / "out.txt")
    assert path.read_text(encoding="utf-8") == "ab\ncd\n"


def test_save_text_unicode(tmp_path):
    path = save_text(" ░▒▓█\n", tmp_path / "out.txt")
    assert path.read_bytes() == " ░▒▓█\n".encode("utf-8")


def test_save_chunked_matches_single_write(tmp_path):
    text = "".join(chr(32 + i % 90) for i in range(20000)) + "▓" * 5000
    path = save_chunked(text, tmp_path / "out.html")
    assert path.read_bytes() == text.encode("utf-8")


def test_save_chunked_small_chunks_split_multibyte(tmp_path):
    # Chunk boundaries fall inside multi-byte characters; bytes must still line up
    path = save_chunked("█" * 10, tmp_path / "out.html", chunk_size=2)
    assert path.read_text(encoding="utf-8") == "█" * 10


def test_save_chunked_empty(tmp_path):
    path = save_chunked("", tmp_path / "empty.html")
    assert path.read_bytes() == b""


def test_save_chunked_rejects_bad_chunk_size(tmp_path):
    with pytest.raises(ValueError):
        save_chunked("x", tmp_path / "out.html", chunk_size=0)


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OutputWriteError, match="Could not create output file"):
        save_text("x", tmp_path / "missing" / "out.txt")
    with pytest.raises(OutputWriteError, match="Could not create output file"):
        save_chunked("x", tmp_path / "missing" / "out.html")


def test_directory_as_target_raises(tmp_path):
    with pytest.raises(OutputWriteError):
        save_text("x", tmp_path)
