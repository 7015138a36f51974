import itertools

import pytest

from xvtools.prng import ParkMiller, do_rand


def test_first_value_from_seed_one():
    assert do_rand(1) == 33613


def test_zero_and_wrap_state_agree():
    assert do_rand(0x7FFFFFFE) == do_rand(0)


def test_state_is_reduced_modulo_range():
    assert do_rand(5 + 0x7FFFFFFE) == do_rand(5)


@pytest.mark.parametrize("seed", [0, 1, 31, 7177, 0x7FFFFFFD, (1 << 64) - 1])
def test_values_stay_in_range(seed):
    gen = ParkMiller(seed)
    for value in itertools.islice(gen, 500):
        assert 0 <= value <= 0x7FFFFFFD


def test_next_feeds_state_back():
    gen = ParkMiller(1)
    first = gen.next()
    assert first == do_rand(1)
    assert gen.next() == do_rand(first)
    assert gen.state == do_rand(first)


def test_same_seed_same_sequence():
    a = list(itertools.islice(ParkMiller(31), 50))
    b = list(itertools.islice(ParkMiller(31), 50))
    assert a == b


def test_different_seeds_diverge():
    a = list(itertools.islice(ParkMiller(31), 20))
    b = list(itertools.islice(ParkMiller(7177), 20))
    assert a != b
    assert len(set(a)) == 20


def test_default_seed_is_one():
    assert ParkMiller().next() == do_rand(1)