from __future__ import annotations

from sortscope import DEFAULT_SIZES, Algorithm, select_algorithms
from sortscope.selector import ordered


def test_small_sizes_enable_everything():
    for n in (1000, 2000, 4000, 16000):
        assert select_algorithms(n) == frozenset(Algorithm)


def test_medium_sizes_drop_quadratic_sorts():
    expected = {
        Algorithm.QUICK, Algorithm.COUNTING, Algorithm.MERGE,
        Algorithm.MERGE_PARALLEL, Algorithm.HEAP, Algorithm.BASELINE,
    }
    assert select_algorithms(256000) == expected
    assert select_algorithms(1000000) == expected


def test_ten_million():
    assert select_algorithms(10000000) == {
        Algorithm.COUNTING, Algorithm.MERGE, Algorithm.MERGE_PARALLEL, Algorithm.HEAP, Algorithm.BASELINE,
    }


def test_hundred_million():
    assert select_algorithms(100000000) == {Algorithm.COUNTING, Algorithm.MERGE_PARALLEL}


def test_unlisted_size_is_empty():
    assert select_algorithms(7) == frozenset()
    assert select_algorithms(1000000000) == frozenset()


def test_policy_shrinks_with_size():
    sets = [select_algorithms(n) for n in DEFAULT_SIZES]
    for smaller, larger in zip(sets, sets[1:]):
        assert larger <= smaller


def test_ordered_follows_declaration():
    assert ordered({Algorithm.BASELINE, Algorithm.SELECTION, Algorithm.HEAP}) == [
        Algorithm.SELECTION, Algorithm.HEAP, Algorithm.BASELINE,
    ]
