import pytest

from housecrawl.exceptions import HousecrawlError, InvalidDimension
from housecrawl.room import RoomDimensions, RoomTiling


@pytest.mark.parametrize(
    "dims, field",
    [
        ((5, 4, 1, 2), "width"),
        ((6, 4, 1, 1), "door_position"),
        ((6, 4, 1, 3), "door_position"),
        ((10, 4, 1, 7), "door_position"),
        ((6, 4, 0, 2), "side_height"),
        ((6, 3, 1, 2), "over_height"),
        ((8, 5, 3, 2), "over_height"),
    ],
)
def test_each_violation_names_its_field(tiles, dims, field):
    room = RoomDimensions(*dims)
    with pytest.raises(InvalidDimension) as excinfo:
        RoomTiling(tiles).generate(room)
    assert excinfo.value.field == field


def test_validation_order_reports_first_violation(tiles):
    # Everything is wrong; width is checked first
    with pytest.raises(InvalidDimension) as excinfo:
        RoomTiling(tiles).generate(RoomDimensions(width=3, over_height=1, side_height=0, door_position=0))
    assert excinfo.value.field == "width"

    # Width fine, door and side height wrong -> door first
    with pytest.raises(InvalidDimension) as excinfo:
        RoomTiling(tiles).generate(RoomDimensions(width=8, over_height=1, side_height=0, door_position=9))
    assert excinfo.value.field == "door_position"

    # Side height before over height
    with pytest.raises(InvalidDimension) as excinfo:
        RoomTiling(tiles).generate(RoomDimensions(width=8, over_height=1, side_height=0, door_position=3))
    assert excinfo.value.field == "side_height"


def test_invalid_dimension_is_a_value_error():
    err = InvalidDimension("width")
    assert isinstance(err, ValueError)
    assert isinstance(err, HousecrawlError)
    assert "width" in str(err)


def test_boundary_values_are_accepted(tiles):
    grid = RoomTiling(tiles).generate(RoomDimensions(width=6, over_height=4, side_height=1, door_position=2))
    assert len(grid) == 30
    grid = RoomTiling(tiles).generate(RoomDimensions(width=12, over_height=5, side_height=2, door_position=8))
    assert len(grid) == 12 * 7


def test_error_docstring_maps_field_names():
    doc = InvalidDimension.__doc__
    for camel in ("doorPosition", "sideHeight", "overHeight"):
        assert camel in doc
