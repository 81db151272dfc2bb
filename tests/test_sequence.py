"""Choice, sampling and shuffling, sync and async."""

import asyncio
import threading
from collections import Counter

import pytest

import prngzoo as pz


def _gen(cls=pz.SplitMix64, *seed):
    return pz.Generator(cls(*seed))


def test_shuffle_is_a_permutation():
    gen = _gen(pz.RomuTrio)
    items = list(range(50))
    out = gen.shuffle(items)
    assert sorted(out) == items
    assert out != items
    assert items == list(range(50))


def test_shuffle_in_place_short_lists_untouched():
    gen = _gen()
    before = gen.engine.state
    for items in ([], [7]):
        copy = list(items)
        gen.shuffle_in_place(copy)
        assert copy == items
    assert gen.engine.state == before


def test_shuffle_reaches_every_permutation_of_three():
    gen = _gen(pz.PcgXslRr32)
    seen = Counter(tuple(gen.shuffle("abc")) for _ in range(3000))
    assert len(seen) == 6
    assert min(seen.values()) > 350


def test_shuffle_draw_sequence():
    gen = _gen(pz.SplitMix64, 4)
    ref = _gen(pz.SplitMix64, 4)
    items = list(range(6))
    expected = list(items)
    for i in range(5, 0, -1):
        j = ref.next_ulong(0, i + 1)
        expected[i], expected[j] = expected[j], expected[i]
    gen.shuffle_in_place(items)
    assert items == expected


def test_choice_single_and_with_replacement():
    gen = _gen(pz.SFC64)
    items = ["a", "b", "c", "d"]
    assert gen.choice(items) in items
    picks = gen.choice(items, 500)
    assert len(picks) == 500
    assert set(picks) == set(items)
    assert gen.choice(items, 0) == []
    assert len(gen.choice(items, 10)) == 10


def test_choice_without_replacement_is_distinct():
    gen = _gen(pz.GJrand64)
    items = list(range(20))
    for _ in range(50):
        picks = gen.choice(items, 8, replace=False)
        assert len(set(picks)) == 8
    assert sorted(gen.choice(items, 20, replace=False)) == items
    with pytest.raises(ValueError):
        gen.choice(items, 21, replace=False)


def test_choice_errors():
    gen = _gen()
    with pytest.raises(ValueError):
        gen.choice(None)
    with pytest.raises(ValueError):
        gen.choice([])
    with pytest.raises(ValueError):
        gen.choice([1, 2], -1)


def test_choice_accepts_iterables():
    gen = _gen()
    assert gen.choice(x for x in range(5)) in range(5)


def test_sample_distinct_and_edge_cases():
    gen = _gen(pz.Tyche)
    items = list(range(100))
    picked = gen.sample(items, 10)
    assert len(picked) == 10 and len(set(picked)) == 10
    assert gen.sample(items, 100) == items
    assert gen.sample(items, 500) == items
    with pytest.raises(ValueError):
        gen.sample(items, 0)
    with pytest.raises(ValueError):
        gen.sample([], 3)
    with pytest.raises(ValueError):
        gen.sample(None, 3)


def test_sample_from_a_generator_expression():
    gen = _gen(pz.Seiran)
    picked = gen.sample((x * x for x in range(1000)), 5)
    assert len(set(picked)) == 5
    assert all(int(p ** 0.5) ** 2 == p for p in picked)
    with pytest.raises(ValueError):
        gen.sample(iter(()), 2)


def test_sample_covers_the_tail():
    gen = _gen(pz.MiddleSquareWeylSequence64)
    counts = Counter()
    for _ in range(2000):
        counts.update(gen.sample(iter(range(10)), 2))
    assert set(counts) == set(range(10))
    assert min(counts.values()) > 250


def test_async_wrappers_match_sync():
    a, b = _gen(pz.JSF64, 9), _gen(pz.JSF64, 9)
    items = list(range(30))

    async def run():
        return (await a.shuffle_async(items),
                await a.choice_async(items, 5),
                await a.sample_async(items, 4))

    shuffled, chosen, sampled = asyncio.run(run())
    assert shuffled == b.shuffle(items)
    assert chosen == b.choice(items, 5)
    assert sampled == b.sample(items, 4)

    data = list(range(10))
    asyncio.run(a.shuffle_in_place_async(data))
    assert sorted(data) == list(range(10))


def test_async_honours_cancellation():
    gen = _gen()
    cancel = threading.Event()
    cancel.set()
    before = gen.engine.state
    with pytest.raises(asyncio.CancelledError):
        asyncio.run(gen.shuffle_async([1, 2, 3], cancel=cancel))
    with pytest.raises(asyncio.CancelledError):
        asyncio.run(gen.choice_async([1, 2, 3], cancel=cancel))
    assert gen.engine.state == before
    assert asyncio.run(gen.sample_async([1, 2, 3], 2, cancel=threading.Event()))
