from housecrawl.actor import BodyDriver, Bounds, KinematicBody, MovementController
from housecrawl.events import MovementEvent
from housecrawl.input import Direction, ManualInputSource


def test_move_sets_axis_aligned_velocity_and_walk_animation(controller, source, body):
    driver = BodyDriver(controller)
    assert driver.animation == "idle-up"

    source.press("ArrowLeft")
    assert body.velocity == (-175.0, 0.0)
    assert driver.animation == "walk-left"

    # Holding a second key never composes a diagonal
    source.press("ArrowUp")
    assert body.velocity == (-175.0, 0.0)

    source.release("ArrowLeft")
    assert body.velocity == (0.0, -175.0)
    assert driver.animation == "walk-up"


def test_stop_zeroes_velocity_and_shows_idle_pose(controller, source, body):
    driver = BodyDriver(controller)
    source.press("ArrowDown")
    source.release("ArrowDown")
    assert body.velocity == (0.0, 0.0)
    assert driver.animation == "idle-down"


def test_driver_moves_the_body_over_time():
    source = ManualInputSource()
    body = KinematicBody(x=0.0, y=0.0)
    with MovementController(source, body) as ctrl:
        BodyDriver(ctrl)
        source.press("ArrowRight")
        body.step(0.5)
        source.release("ArrowRight")
        body.step(0.5)
    assert (body.x, body.y) == (87.5, 0.0)


def test_detach_stops_reacting(controller, source, body):
    driver = BodyDriver(controller)
    driver.detach()
    source.press("ArrowRight")
    assert body.velocity == (0.0, 0.0)
    assert controller.history[-1].kind is MovementEvent.MOVE


def test_bounds_edge_point():
    b = Bounds(center_x=0.0, center_y=0.0, half_width=5.0, half_height=8.0)
    assert b.edge_point(Direction.UP) == (0.0, -8.0)
    assert b.edge_point(Direction.RIGHT, reach=4.0) == (9.0, 0.0)


def test_kinematic_body_bounds_are_centred():
    body = KinematicBody(x=10.0, y=20.0, width=30.0, height=40.0)
    assert body.bounds() == Bounds(10.0, 20.0, 15.0, 20.0)
    assert not body.is_moving
