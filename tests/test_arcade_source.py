import pytest

arcade = pytest.importorskip("arcade")

from housecrawl.actor import KinematicBody, MovementController  # noqa: E402
from housecrawl.events import MovementEvent  # noqa: E402
from housecrawl.input import Direction, KeyEvent, PointerEvent  # noqa: E402
from housecrawl.input.arcade_source import ArcadeInputSource  # noqa: E402
from housecrawl.input.sources import KEY_DOWN, POINTER_DOWN  # noqa: E402


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_key_codes_become_logical_names():
    clock = FakeClock()
    src = ArcadeInputSource(window_height=600, clock=clock)
    seen = []
    src.add_listener(KEY_DOWN, seen.append)
    clock.now = 12.0
    src.on_key_press(arcade.key.UP, 0)
    src.on_key_press(arcade.key.SPACE, 0)
    # Unmapped keys are dropped
    src.on_key_press(arcade.key.F1, 0)
    assert seen == [KeyEvent("ArrowUp", True, 12.0), KeyEvent("Space", True, 12.0)]


def test_mouse_y_is_flipped_to_screen_coordinates():
    src = ArcadeInputSource(window_height=600, clock=FakeClock())
    seen = []
    src.add_listener(POINTER_DOWN, seen.append)
    src.on_mouse_press(100, 550, arcade.MOUSE_BUTTON_LEFT, 0)
    assert seen == [PointerEvent(100, 50, 0.0)]
    src.on_resize(800, 1000)
    src.on_mouse_press(100, 550, arcade.MOUSE_BUTTON_LEFT, 0)
    assert seen[-1] == PointerEvent(100, 450, 0.0)


def test_arcade_drag_drives_controller():
    clock = FakeClock()
    src = ArcadeInputSource(window_height=600, clock=clock)
    with MovementController(src, KinematicBody(0, 0)) as ctrl:
        seen = []
        ctrl.subscribe(MovementEvent.MOVE, lambda e: seen.append(e.payload["direction"]))
        src.on_mouse_press(100, 300, arcade.MOUSE_BUTTON_LEFT, 0)
        clock.now = 40.0
        # Arcade y grows upward, so dragging to a lower y is moving DOWN on screen
        src.on_mouse_drag(100, 260, 0, -40, arcade.MOUSE_BUTTON_LEFT, 0)
        src.on_mouse_release(100, 260, arcade.MOUSE_BUTTON_LEFT, 0)
        assert seen == [Direction.DOWN]
    assert src.listener_count() == 0
