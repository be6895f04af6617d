from collections import Counter

import pytest

from algodrills.combinations import combination_sum, combination_sum_unique


def test_combination_sum_example():
    assert combination_sum([2, 3, 5], 8) == [[2, 2, 2, 2], [2, 3, 3], [3, 5]]


def test_combination_sum_results_hit_target():
    result = combination_sum([2, 3, 6, 7], 7)
    assert result
    assert all(sum(combo) == 7 for combo in result)
    assert all(set(combo) <= {2, 3, 6, 7} for combo in result)


def test_combination_sum_results_are_distinct():
    result = combination_sum([2, 3, 5], 8)
    keys = [tuple(sorted(combo)) for combo in result]
    assert len(keys) == len(set(keys))


def test_combination_sum_no_solution():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_zero_target_gives_empty_combination():
    assert combination_sum([1, 2], 0) == [[]]


@pytest.mark.parametrize("candidates", [[0, 1], [2, -3]])
def test_combination_sum_rejects_non_positive(candidates):
    with pytest.raises(ValueError):
        combination_sum(candidates, 5)


def test_combination_sum_unique_example():
    candidates = [10, 1, 2, 7, 6, 1, 5]
    assert combination_sum_unique(candidates, 8) == [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]


def test_combination_sum_unique_does_not_mutate_input():
    candidates = [10, 1, 2, 7, 6, 1, 5]
    combination_sum_unique(candidates, 8)
    assert candidates == [10, 1, 2, 7, 6, 1, 5]


def test_combination_sum_unique_uses_each_candidate_once():
    candidates = [2, 5, 2, 1, 2]
    pool = Counter(candidates)
    result = combination_sum_unique(candidates, 5)
    assert result
    for combo in result:
        assert sum(combo) == 5
        assert not Counter(combo) - pool
        assert combo == sorted(combo)
    assert len(result) == len({tuple(c) for c in result})


def test_combination_sum_unique_no_solution():
    assert combination_sum_unique([3, 3], 5) == []