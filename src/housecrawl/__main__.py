from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .exceptions import InvalidDimension
from .room import RandomRoomGenerator, RoomDimensions, RoomTiling, TileTypes, render_ascii, style_offset
from .settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="housecrawl",
        description="housecrawl - room tiling preview",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--settings", type=Path, default=None, help="User settings YAML")
    sub = parser.add_subparsers(dest="command", required=True)

    room = sub.add_parser("room", help="Print a tiled room as ASCII")
    room.add_argument("--width", type=int)
    room.add_argument("--over-height", type=int)
    room.add_argument("--side-height", type=int, default=1)
    room.add_argument("--door", type=int, help="Leftmost doorway column")
    room.add_argument("--seed", type=int, default=None, help="Roll random dimensions with this seed")
    room.add_argument("--style", type=int, default=None, help="Wall style index; prints tile ids")
    return parser


def _run_room(args: argparse.Namespace, settings: Settings) -> int:
    if args.width is None or args.over_height is None or args.door is None:
        room = RandomRoomGenerator(seed=args.seed).generate()
    else:
        room = RoomDimensions(
            width=args.width,
            over_height=args.over_height,
            side_height=args.side_height,
            door_position=args.door,
        )

    base = settings.room.base_tile_id if args.style is None else style_offset(args.style)
    tiles = TileTypes.from_base(base)
    try:
        grid = RoomTiling(tiles).generate(room)
    except InvalidDimension as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(
        f"# width={room.width} over_height={room.over_height} "
        f"side_height={room.side_height} door_position={room.door_position}"
    )
    if args.style is None:
        print(render_ascii(grid, room.width, tiles))
    else:
        for y in range(room.total_height):
            print(" ".join(f"{t:4d}" for t in grid[y * room.width : (y + 1) * room.width]))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    settings = Settings.load(args.settings)
    if args.command == "room":
        return _run_room(args, settings)
    return 1


if __name__ == "__main__":
    sys.exit(main())
