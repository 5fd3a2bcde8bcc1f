import argparse
import logging
import sys
from pathlib import Path

from glyphramp.charsets import CHARSETS
from glyphramp.converter import DEFAULT_WIDTH, PARALLEL_THRESHOLD, Converter, ConverterOptions
from glyphramp.errors import GlyphrampError
from glyphramp.output import HTML_FILENAME, TEXT_FILENAME, save_chunked, save_text
from glyphramp.palette import Palette

PREVIEW_LIMIT = 10_000
PREVIEW_CHARS = 1000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glyphramp", description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "width", nargs="?", type=int, default=DEFAULT_WIDTH, help=f"Output width in columns (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "charset",
        nargs="?",
        type=int,
        default=1,
        choices=range(len(CHARSETS)),
        help="Character set: 0=simple, 1=detailed, 2=blocks (default: 1)",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=Path("."), help="Directory for the output files (default: .)"
    )
    parser.add_argument("--no-parallel", action="store_true", help="Always render on a single thread")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads (default: CPU count)")
    parser.add_argument(
        "--threshold",
        type=int,
        default=PARALLEL_THRESHOLD,
        help=f"Render in parallel above this many rows (default: {PARALLEL_THRESHOLD})",
    )
    parser.add_argument("--no-aspect", action="store_true", help="Use half the width as the height")
    parser.add_argument("--no-html", action="store_true", help="Skip the coloured HTML output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    return parser


def _print_preview(text: str) -> None:
    if len(text) >= PREVIEW_LIMIT:
        return
    print("\nPreview:")
    print(text[:PREVIEW_CHARS], end="")
    if len(text) > PREVIEW_CHARS:
        print("\n... (truncated, see file for full output)")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    try:
        options = ConverterOptions(
            palette=Palette.preset(args.charset),
            width=args.width,
            preserve_aspect=not args.no_aspect,
            use_parallel=not args.no_parallel,
            parallel_threshold=args.threshold,
            workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    converter = Converter(options)
    try:
        result = converter.convert(args.image)
        print(f"Original image size: {result.source_size[0]}x{result.source_size[1]}")
        print(f"ASCII output size: {result.output_size[0]}x{result.output_size[1]}")
        print(f"Conversion completed in: {result.elapsed * 1000:.0f}ms")

        text_path = save_text(result.text, args.output_dir / TEXT_FILENAME)
        print(f"ASCII art saved to: {text_path}")
        _print_preview(result.text)

        if not args.no_html:
            html = converter.convert_html(args.image)
            html_path = save_chunked(html.text, args.output_dir / HTML_FILENAME)
            print(f"Colored HTML version saved to: {html_path}")
    except GlyphrampError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
