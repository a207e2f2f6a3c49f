import itertools
import random

import pytest

from pushswap.sorting import (
    index_values,
    max_bits,
    radix_sort,
    solve,
    sort_five,
    sort_stacks,
    sort_three,
    sort_two,
)
from pushswap.stacks import Operation, Stacks

_METHODS = {
    Operation.SA: Stacks.swap_a,
    Operation.SB: Stacks.swap_b,
    Operation.SS: Stacks.swap_both,
    Operation.PA: Stacks.push_a,
    Operation.PB: Stacks.push_b,
    Operation.RA: Stacks.rotate_a,
    Operation.RB: Stacks.rotate_b,
    Operation.RR: Stacks.rotate_both,
    Operation.RRA: Stacks.reverse_rotate_a,
    Operation.RRB: Stacks.reverse_rotate_b,
    Operation.RRR: Stacks.reverse_rotate_both,
}


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        _METHODS[operation](stacks)
    return stacks


def test_index_values_ranks():
    assert index_values([30, -5, 10]) == [2, 0, 1]


def test_index_values_is_permutation():
    values = random.Random(1).sample(range(-1000, 1000), 50)
    assert sorted(index_values(values)) == list(range(50))


def test_max_bits():
    assert max_bits([]) == 0
    assert max_bits([0]) == 0
    assert max_bits([0, 1, 2, 3]) == 2


def test_sort_two():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.operations == [Operation.SA]


def test_sort_two_already_sorted():
    stacks = Stacks([1, 2])
    sort_two(stacks)
    assert stacks.operations == []


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], []),
        ([2, 1, 3], [Operation.SA]),
        ([3, 2, 1], [Operation.SA, Operation.RRA]),
        ([3, 1, 2], [Operation.RA]),
        ([1, 3, 2], [Operation.SA, Operation.RA]),
        ([2, 3, 1], [Operation.RRA]),
    ],
)
def test_sort_three_cases(values, expected):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.operations == expected
    assert list(stacks.a) == [1, 2, 3]


@pytest.mark.parametrize("values", list(itertools.permutations([7, -3, 0, 12, 4])))
def test_sort_five_all_permutations(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_radix_sort_empty_does_nothing():
    stacks = Stacks([])
    radix_sort(stacks)
    assert stacks.operations == []


@pytest.mark.parametrize("values", list(itertools.permutations([4, 1, 3, 2])))
def test_radix_sort_four(values):
    stacks = Stacks(values)
    radix_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 6, 10, 100])
def test_sort_stacks_sorts_random(size):
    values = random.Random(size).sample(range(-(2**31), 2**31 - 1), size)
    stacks = Stacks(values)
    sort_stacks(stacks)
    assert list(stacks.a) == sorted(values)
    assert stacks.is_sorted()


def test_sorted_input_needs_no_moves():
    assert solve(range(20)) == []


def test_solve_replays_to_sorted():
    values = random.Random(7).sample(range(500), 60)
    operations = solve(values)
    stacks = _replay(values, operations)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b