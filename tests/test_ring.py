import pytest

from mpixel.ring import Ring, RingError


def test_new_ring_is_empty():
    ring = Ring(16)
    assert ring.is_empty()
    assert not ring.is_full()
    assert ring.headroom() == 16
    assert ring.tailroom() == 0
    assert ring.peekroom() == 0
    assert ring.total_used() == 0


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        Ring(0)


def test_write_read_round_trip():
    ring = Ring(16)
    payload = b"hello"
    ring.write(payload)
    assert ring.total_used() == len(payload)
    assert len(ring) == len(payload)
    assert ring.tailroom() == len(payload)
    assert ring.read(len(payload)) == payload
    assert ring.is_empty()


def test_fill_completely():
    ring = Ring(8)
    ring.write(bytes(range(8)))
    assert ring.is_full()
    assert not ring.is_empty()
    assert ring.headroom() == 0
    assert ring.total_used() == 8
    assert ring.tailroom() == 8


def test_write_too_much_raises():
    ring = Ring(4)
    with pytest.raises(RingError):
        ring.write(b"abcde")
    assert ring.is_empty()


def test_read_too_much_raises():
    ring = Ring(8)
    ring.write(b"abc")
    with pytest.raises(RingError):
        ring.read(4)
    assert ring.read(3) == b"abc"


def test_empty_write_keeps_ring_empty():
    ring = Ring(8)
    ring.write(b"")
    assert ring.is_empty()
    assert not ring.is_full()


def test_wraparound_preserves_data():
    size = 8
    ring = Ring(size)
    ring.write(b"abcdef")
    assert ring.read(6) == b"abcdef"
    assert ring.is_empty()
    assert ring.headroom() == size - 6

    ring.write(b"gh")
    assert ring.head == 0
    assert ring.headroom() == 6
    ring.write(b"ijkl")
    assert ring.total_used() == 6
    assert ring.tailroom() == size - 6
    assert ring.read(2) == b"gh"
    assert ring.read(4) == b"ijkl"
    assert ring.is_empty()


def test_total_used_plus_free_is_size():
    size = 10
    ring = Ring(size)
    for chunk in (b"ab", b"cde", b"f"):
        ring.write(chunk)
        assert ring.total_used() + ring.headroom() == size
    ring.read(3)
    assert ring.total_used() == 3


def test_peek_does_not_consume():
    ring = Ring(16)
    ring.write(b"abcdef")
    assert ring.peek(2) == b"ab"
    assert ring.peek(2) == b"cd"
    assert ring.total_used() == 6
    assert ring.read(1) == b"a"
    assert ring.peek(2) == b"bc"


def test_peekroom_shrinks_with_peek():
    ring = Ring(16)
    ring.write(b"abcdef")
    before = ring.peekroom()
    assert before == ring.tailroom()
    ring.peek(4)
    assert ring.peekroom() == before - 4
    with pytest.raises(RingError):
        ring.peek(before)


def test_write_resets_peek():
    ring = Ring(16)
    ring.write(b"abc")
    ring.peek(3)
    ring.write(b"def")
    assert ring.peek(3) == b"abc"


def test_peek_full_ring():
    ring = Ring(4)
    ring.write(b"wxyz")
    assert ring.is_full()
    assert ring.peek(4) == b"wxyz"
    assert ring.read(4) == b"wxyz"