import pytest

from housecrawl.room import RoomDimensions, generate_tiles, split_layers


def test_layers_partition_the_grid(tiles):
    room = RoomDimensions(width=7, over_height=5, side_height=2, door_position=2)
    grid = generate_tiles(tiles, room)
    layers = split_layers(tiles, room, grid)

    for i, tile_id in enumerate(grid):
        owned = [layer[i] for layer in (layers.below, layers.world, layers.above) if layer[i] is not None]
        assert owned == [tile_id]


def test_floor_below_and_outline_in_world(tiles):
    room = RoomDimensions(width=6, over_height=4, side_height=1, door_position=2)
    layers = split_layers(tiles, room, generate_tiles(tiles, room))
    # Floor row
    assert layers.below[2 * 6 + 1] == tiles.floor
    # Top wall and banding sit in the world layer
    assert layers.world[0] == tiles.over_top_left_corner
    assert layers.world[1 * 6 + 2] == tiles.side_bottom_wall
    # Bottom outline row is drawn above the actor
    assert layers.above[3 * 6] == tiles.over_bottom_left_corner


def test_only_bottom_side_tiles_collide(tiles):
    room = RoomDimensions(width=6, over_height=4, side_height=1, door_position=2)
    layers = split_layers(tiles, room, generate_tiles(tiles, room))
    # Last row: └┘··└┘
    assert [layers.collides(x, 4) for x in range(6)] == [True, True, False, False, True, True]
    # Bottom outline row does not collide
    assert not any(layers.collides(x, 3) for x in range(6))
    # Banding row in the world layer is not marked either
    assert not layers.collides(2, 1)
    # Out of bounds counts as solid
    assert layers.collides(-1, 0)
    assert layers.collides(0, 5)


def test_grid_size_mismatch_is_rejected(tiles):
    room = RoomDimensions(width=6, over_height=4, side_height=1, door_position=2)
    with pytest.raises(ValueError):
        split_layers(tiles, room, [tiles.floor] * 10)
