import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from housecrawl.actor import KinematicBody, MovementController  # noqa: E402
from housecrawl.events import MovementEvent  # noqa: E402
from housecrawl.input import ManualInputSource  # noqa: E402
from housecrawl.room import TileTypes  # noqa: E402


# Ids that are easy to read when a test fails; glyphs follow DEFAULT_GLYPHS.
@pytest.fixture
def tiles():
    return TileTypes(
        over_top_left_corner=1,
        over_top_wall=2,
        over_top_right_corner=3,
        over_left_wall=4,
        floor=5,
        over_right_wall=6,
        over_bottom_left_corner=7,
        over_bottom_wall=8,
        over_bottom_right_corner=9,
        over_internal_right_corner=10,
        over_internal_left_corner=11,
        side_left_wall=12,
        side_mid_wall=13,
        side_right_wall=14,
        side_bottom_left_corner=15,
        side_bottom_wall=16,
        side_bottom_right_corner=17,
    )


@pytest.fixture
def source():
    return ManualInputSource()


@pytest.fixture
def body():
    # 30x40 box centred on (100, 100)
    return KinematicBody(x=100.0, y=100.0, width=30.0, height=40.0)


@pytest.fixture
def controller(source, body):
    ctrl = MovementController(source, body)
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def events(controller):
    """(kind, payload) pairs emitted by the controller, in order."""
    seen = []
    for kind in MovementEvent:
        controller.subscribe(kind, lambda e: seen.append((e.kind, e.payload)))
    return seen
