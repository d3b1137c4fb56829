import pytest

from taletree.core import rng as rng_module
from taletree.core.rng import RNG, wall_clock_seed


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    ranges_a = [rng_a.randrange(3) for _ in range(5)]
    ranges_b = [rng_b.randrange(3) for _ in range(5)]

    assert ints_a == ints_b
    assert ranges_a == ranges_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_reseed_with_same_source_value_repeats_draws() -> None:
    rng = RNG(1, seed_source=lambda: 77)

    rng.reseed()
    first = [rng.randint(1, 10) for _ in range(5)]
    rng.reseed()
    second = [rng.randint(1, 10) for _ in range(5)]

    assert first == second


def test_seed_source_used_when_no_seed_given() -> None:
    assert [RNG(seed_source=lambda: 9).randint(1, 1000) for _ in range(2)] == [RNG(9).randint(1, 1000)] * 2


def test_wall_clock_seed_truncates_time(monkeypatch) -> None:
    monkeypatch.setattr(rng_module.time, "time", lambda: 1234.9)

    assert wall_clock_seed() == 1234


def test_randrange_rejects_empty_range() -> None:
    with pytest.raises(ValueError):
        RNG(1).randrange(0)
