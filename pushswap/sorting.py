"""Strategies that sort stack a using the puzzle's moves."""

from .stacks import Stacks, is_sorted


def index_values(values):
    """Give each value its rank: how many values are smaller than it."""
    values = list(values)
    return [sum(other < value for other in values) for value in values]


def max_bits(indexes):
    """Number of bits needed to write the largest index (0 when empty)."""
    indexes = list(indexes)
    if not indexes:
        return 0
    return max(indexes).bit_length()


def sort_two(stacks):
    """Sort a two-element stack a."""
    first, second = stacks.a[0], stacks.a[1]
    if first > second:
        stacks.swap_a()


def sort_three(stacks):
    """Sort a three-element stack a in at most two moves."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first < second < third:
        return
    if first > second and second < third and first < third:
        stacks.swap_a()
    elif first > second > third:
        stacks.swap_a()
        stacks.reverse_rotate_a()
    elif first > second and second < third and first > third:
        stacks.rotate_a()
    elif first < second and second > third and first < third:
        stacks.swap_a()
        stacks.rotate_a()
    elif first < second and second > third and first > third:
        stacks.reverse_rotate_a()


def sort_five(stacks):
    """Sort stack a by parking its smallest values on b down to three."""
    while len(stacks.a) > 3:
        smallest = min(stacks.a)
        while stacks.a[0] != smallest:
            stacks.rotate_a()
        stacks.push_b()
    sort_three(stacks)
    stacks.push_a()
    stacks.push_a()


def radix_sort(stacks):
    """Sort stack a by binary radix on the ranks of its values."""
    if not stacks.a:
        return
    rank = dict(zip(stacks.a, index_values(stacks.a)))
    size = len(stacks.a)
    for bit in range(max_bits(rank.values())):
        for _ in range(size):
            if (rank[stacks.a[0]] >> bit) & 1:
                stacks.rotate_a()
            else:
                stacks.push_b()
        while stacks.b:
            stacks.push_a()


def sort_stacks(stacks):
    """Pick the strategy that suits the size of stack a and run it."""
    length = len(stacks.a)
    if length <= 1 or is_sorted(stacks.a):
        return
    if length == 2:
        sort_two(stacks)
    elif length == 3:
        sort_three(stacks)
    elif length == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)


def solve(values):
    """Return the list of operations that sorts ``values``."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return list(stacks.operations)