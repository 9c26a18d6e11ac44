import pytest

from core.rng import RAND_MAX, RandomStream, new_stream


def test_next_int_stays_in_rand_range(stream):
    values = [stream.next_int() for _ in range(500)]
    assert all(0 <= v <= RAND_MAX for v in values)


def test_next_in_range_is_inclusive(stream):
    values = {stream.next_in_range(2, 4) for _ in range(300)}
    assert values == {2, 3, 4}


def test_next_in_range_rejects_empty_range(stream):
    with pytest.raises(ValueError):
        stream.next_in_range(5, 4)


def test_with_seed_preserves_shared_sequence():
    reference = new_stream(7)
    expected = [reference.next_int() for _ in range(10)]

    stream = new_stream(7)
    got = [stream.next_int() for _ in range(5)]

    def noisy(local):
        for _ in range(50):
            local.next_int()
        # nested reseed, as recursive generation does
        local.with_seed(99, lambda inner: [inner.next_int() for _ in range(3)])
        return local.next_int()

    stream.with_seed(1234, noisy)
    got += [stream.next_int() for _ in range(5)]
    assert got == expected


def test_with_seed_is_reproducible(stream):
    first = stream.with_seed(5, lambda s: (s.next_int(), s.next_int()))
    second = stream.with_seed(5, lambda s: (s.next_int(), s.next_int()))
    assert first == second


def test_with_seed_restores_state_on_error(stream):
    state = stream.getstate()

    def boom(local):
        local.next_int()
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError):
        stream.with_seed(3, boom)
    assert stream.getstate() == state


def test_new_stream_seeds_deterministically():
    a = new_stream(11)
    b = new_stream(11)
    assert [a.next_int() for _ in range(5)] == [b.next_int() for _ in range(5)]
    assert isinstance(a, RandomStream)
