# pushswap

Sort a list of integers using two stacks, **a** and **b**, and a fixed set of
operations. The program prints the sequence of operations that leaves every
number sorted in ascending order on stack **a** with stack **b** empty.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments or as a single space-separated string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same command is available as `python -m pushswap.cli`.

Each operation is printed on its own line:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the first two elements of a, b, or both |
| `pa` / `pb` | move the top of b onto a, or the top of a onto b |
| `ra` / `rb` / `rr` | rotate a, b, or both up by one |
| `rra` / `rrb` / `rrr` | rotate a, b, or both down by one |

Rules for the input:

- Each number is an optional `+` or `-` followed by ASCII digits only.
- Every number must fit in a signed 32-bit integer.
- No number may appear twice.
- A single argument is split on spaces only.

With no arguments, or a single argument holding only spaces, nothing is
printed and the exit status is 0. Input that is already sorted also prints
nothing. Invalid input prints `Error` on standard output and exits with
status 1; the word is followed by a newline when the numbers came in one
argument, and by no newline when they came as separate arguments.

Strategy by size: two and three elements are sorted directly (three in at
most two moves), five elements by pushing the smallest values to b until
three remain, and any other size by a binary radix sort on the rank of each
value.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Operation, Stacks

moves = solve([3, 2, 1])        # [Operation.SA, Operation.RRA]
print("\n".join(map(str, moves)))

stacks = Stacks([2, 1, 3])
stacks.swap_a()
assert stacks.is_sorted()       # a ascending and b empty
print(stacks.operations)        # [Operation.SA]
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, top first) and
  records every move in `operations`. A move on too few elements raises
  `IndexError`.
- `pushswap.sorting` offers `solve`, `sort_stacks` and the individual
  strategies `sort_two`, `sort_three`, `sort_five` and `radix_sort`, plus
  `index_values` and `max_bits`.
- `pushswap.parsing.parse_arguments` validates and converts command-line
  words, raising `pushswap.parsing.ParseError` on bad input;
  `split_words`, `parse_long`, `parse_int`, `is_number` and `has_errors`
  are the steps it is built from.
- `pushswap.cli.run(args, out)` runs the command on a list of arguments,
  writing to any text stream, and returns the exit status.

## Helper modules

The package also carries small general-purpose helpers:

- `pushswap.chars` — ASCII classes and case conversion (`is_alpha`,
  `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`), taking a
  character or a character code.
- `pushswap.strings` — string functions with C-library semantics:
  `find_char`, `rfind_char`, `join`, `bounded_copy`, `bounded_concat`,
  `map_chars`, `each_char`, `compare_prefix`, `find_within`, `trim`,
  `substring`, `int_to_str`.
- `pushswap.memory` — `bytearray` helpers: `fill`, `zero`, `zeroed`,
  `find_byte`, `compare`, `copy`, `move` (overlap-safe).
- `pushswap.output` — `put_char`, `put_str`, `put_endl`, `put_number`,
  writing to a given stream or standard output.
- `pushswap.printf` — `printf` and `format_string` with the conversions
  `%c %s %d %i %u %x %X %p %%`, plus `format_hex`, `format_unsigned` and
  `format_pointer`; a dangling `%` or a missing argument raises
  `FormatError`.
- `pushswap.lists` — `LinkedList` of `Node`s with `add_front`, `add_back`,
  `last`, `clear`, `each`, `map`, `len()` and iteration.
- `pushswap.lines` — `LineReader` and `read_lines`, reading a text or binary
  stream line by line in chunks of `buffer_size` (10 by default).

## Tests

```
pip install ".[test]"
pytest
```