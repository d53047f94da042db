import argparse
import sys
import time
from pathlib import Path

from loguru import logger

from asciigrid.charsets import PRESETS
from asciigrid.config import ConversionOptions
from asciigrid.converter import image_to_art
from asciigrid.errors import AsciiGridError
from asciigrid.frames import frames_to_art, save_frames
from asciigrid.log import configure_logging
from asciigrid.terminal import CLEAR_HOME, get_terminal_size


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Path to the input image")
    parser.add_argument(
        "-W",
        "--width",
        type=int,
        default=None,
        help="Output width in characters. Inferred from the height when omitted; the source width if neither is given.",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=None,
        help="Output height in characters. Inferred from the width when omitted; the source height if neither is given.",
    )
    parser.add_argument("--fit", action="store_true", help="Use the terminal width when --width is not given")
    parser.add_argument("--invert", action="store_true", help="Dark areas become light and vice versa")
    parser.add_argument("-c", "--colour", action="store_true", help="Enable truecolor ANSI output")
    parser.add_argument(
        "-u", "--uniform", action="store_true", help="Draw every cell with the densest character (requires --colour)"
    )
    parser.add_argument(
        "-r", "--ramp", default="standard", choices=sorted(PRESETS), help="Density ramp to use (default: standard)"
    )
    parser.add_argument("--no-parallel", action="store_true", help="Convert on a single thread")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More diagnostics on stderr (-vv for debug)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciigrid", description="Render images as ASCII art")
    sub = parser.add_subparsers(dest="command", required=True)

    image = sub.add_parser("image", help="Convert a single image")
    _add_common(image)
    image.add_argument("-o", "--output", default=None, help="Write the art to this file instead of stdout")

    frames = sub.add_parser("frames", help="Convert every frame of an animated image")
    _add_common(frames)
    frames.add_argument("-n", "--number-frames", type=int, default=None, help="Number of frames to keep (default: all)")
    target = frames.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", default=None, help="Directory to write one text file per frame into")
    target.add_argument("--delay", type=int, default=100, help="Milliseconds between frames when playing (default: 100)")
    return parser


def _options(args: argparse.Namespace) -> ConversionOptions:
    width = args.width
    if width is None and args.fit:
        width = get_terminal_size()[0]
    return ConversionOptions(
        width=width,
        height=args.height,
        invert=args.invert,
        colour=args.colour,
        uniform=args.uniform,
        parallel=not args.no_parallel,
        ramp=args.ramp,
    )


def _run_image(args: argparse.Namespace, options: ConversionOptions) -> None:
    art = image_to_art(Path(args.path), options)
    if args.output:
        art.save(args.output)
        logger.info("Wrote {}x{} art to {}", art.width, art.height, args.output)
    else:
        print(art.render())


def _run_frames(args: argparse.Namespace, options: ConversionOptions) -> None:
    frames = frames_to_art(Path(args.path), options, count=args.number_frames)
    if args.output:
        written = save_frames(frames, args.output)
        logger.info("Wrote {} frames to {}", written, args.output)
        return
    for art in frames:
        print(CLEAR_HOME + art.render(), flush=True)
        time.sleep(args.delay / 1000)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.uniform and not args.colour:
        parser.error("--uniform requires --colour")
    configure_logging(args.verbose)

    image_path = Path(args.path)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        options = _options(args)
        if args.command == "image":
            _run_image(args, options)
        else:
            _run_frames(args, options)
    except (AsciiGridError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
