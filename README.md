# pushswap

Building blocks for the two-stack integer sorting puzzle. The package reads a
list of integers from command-line style arguments and validates it. It also
provides helpers for ASCII characters, strings, byte buffers, a singly linked
list and printf-style formatting.

## Installation

```
pip install .
```

## Parsing input

`pushswap.parsing.parse_args(args)` takes the arguments with the program name
left out. It returns the integers they name. Several numbers may share one
argument, separated by spaces:

```python
from pushswap.parsing import ParseError, parse_args

parse_args(["5 1 4", "2", "3"])   # [5, 1, 4, 2, 3]

try:
    parse_args(["1", "1"])
except ParseError:
    ...
```

`ParseError` is a subclass of `ValueError`. It is raised in these cases:

- an argument is empty or consists only of whitespace;
- a word is not an optional `+` or `-` followed by one or more digits;
- a value lies outside the 32-bit signed range;
- a value appears more than once.

The pieces are also available on their own:

- `is_valid_element(text)` checks a single word.
- `has_duplicates(values)` reports whether any value is repeated.
- `split_words(text, separator)` splits on one character and drops empty pieces.
- `split_arguments(args)` splits every argument on spaces.

## Helpers

- `pushswap.chars` classifies and converts ASCII characters. It provides
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`. Each accepts a one-character string or an integer code point.
  The case conversions return a value of the same kind they were given.
- `pushswap.strings` provides string routines with C-style bounds:
  - `atoi`: parses like C and wraps the result to 32 bits.
  - `itoa`
  - `find_char` and `rfind_char`: return an index, or `None`.
  - `compare_n`
  - `find_substring`
  - `copy_bounded` and `concat_bounded`: return the text and a length.
  - `substring`
  - `join`
  - `trim`
  - `map_indexed` and `iter_indexed`
- `pushswap.memory` operates on `bytearray` buffers:
  - `fill` and `zero`
  - `allocate_zeroed`
  - `find_byte`
  - `compare_bytes`
  - `copy_bytes`
  - `move_bytes`: the regions may overlap.
- `pushswap.linkedlist` provides `LinkedList`, built from `Node` objects. It is
  iterable and has a length. Its methods are `push_front`, `push_back`, `last`,
  `clear(release)`, `for_each` and `map`.
- `pushswap.formatting` provides `format_printf(template, *args)`. It supports
  the conversions `%c %s %p %d %i %u %x %X` and treats `%%` as a literal.
  `printf(template, *args, stream=None)` writes the result to a stream and
  returns the number of characters written. `format_pointer` renders an address
  as `0x…`.
- `pushswap.output` writes to a given text stream. It provides `put_char`,
  `put_str`, `put_endl` and `put_number`.

```python
from pushswap.formatting import format_printf

format_printf("%d %x %s", -1, 255, None)   # '-1 ff (null)'
```

## What this package does not do

The package contains none of the following:

- the two stacks or their instructions (`sa`, `pb`, `rra` and the rest);
- a sorting algorithm that produces an instruction sequence;
- a checker that verifies one.

It installs no command-line programs.

## Running the tests

```
pip install ".[test]"
pytest
```