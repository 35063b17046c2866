import pytest

from housecrawl.input import KeyEvent, ManualInputSource, PointerEvent
from housecrawl.input.sources import KEY_DOWN, KEY_UP, POINTER_DOWN, POINTER_MOVE, POINTER_UP


def test_manual_source_dispatches_each_kind():
    source = ManualInputSource()
    seen = []
    for kind in (KEY_DOWN, KEY_UP, POINTER_DOWN, POINTER_MOVE, POINTER_UP):
        source.add_listener(kind, lambda e, kind=kind: seen.append((kind, e)))

    source.press("ArrowUp", timestamp=1)
    source.release("ArrowUp", timestamp=2)
    source.pointer_down(1, 2, timestamp=3)
    source.pointer_move(4, 5, timestamp=4)
    source.pointer_up(6, 7, timestamp=5)

    assert seen == [
        (KEY_DOWN, KeyEvent("ArrowUp", True, 1)),
        (KEY_UP, KeyEvent("ArrowUp", False, 2)),
        (POINTER_DOWN, PointerEvent(1, 2, 3)),
        (POINTER_MOVE, PointerEvent(4, 5, 4)),
        (POINTER_UP, PointerEvent(6, 7, 5)),
    ]


def test_remove_listener_and_counts():
    source = ManualInputSource()
    calls = []
    listener = calls.append
    source.add_listener(KEY_DOWN, listener)
    assert source.listener_count() == 1
    assert source.listener_count(KEY_DOWN) == 1

    source.remove_listener(KEY_DOWN, listener)
    # Removing twice is harmless
    source.remove_listener(KEY_DOWN, listener)
    source.press("W")
    assert calls == []
    assert source.listener_count() == 0


def test_unknown_listener_kind_is_rejected():
    with pytest.raises(ValueError):
        ManualInputSource().add_listener("wheel", print)
