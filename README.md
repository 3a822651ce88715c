# primer

A collection of small, classic programming exercises as plain, importable
Python functions and classes. It covers number puzzles, array searching and
sorting, string handling, matrix arithmetic, simple file operations and a few
basic data structures. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents |
|---------------------|----------|
| `primer.numbers`    | `add`, `is_even`, `larger`, `sign_name`, `circle_area` (pi taken as 3.1416), `swap`, `arithmetic_swap`, `xor_swap`, `is_leap_year`, `sum_natural`, `factorial`, `multiplication_table`, `fibonacci`, `fibonacci_term`, `reverse_number`, `is_palindrome_number`, `is_armstrong`, `count_digits`, `digit_sum`, `is_prime`, `gcd`, `to_binary`, `primes_up_to` |
| `primer.calculator` | `calculate` for `+`, `-`, `*` and `/`, which raises `CalculatorError` for an unknown operator or a division by zero |
| `primer.arrays`     | `largest`, `smallest`, `sum_and_average`, `linear_search`, `binary_search`, `bubble_sort`, `merge_sort`, `recursive_sum`, `parse_integers`, `format_sequence` |
| `primer.matrices`   | `add_matrices`, `multiply_matrices`, `transpose`, `format_matrix` and `MatrixShapeError` |
| `primer.strings`    | `length`, `reverse`, `concatenate`, `copy`, `is_palindrome`, `count_vowels_consonants` |
| `primer.structures` | `DoublyLinkedList`, `LinkedStack`, `CircularQueue` and `QueueFullError` |
| `primer.students`   | the `Student` dataclass with `parse`, `details` and `row`, plus `format_roster` |
| `primer.files`      | `write_sample`, `read_text`, `count_characters`, `copy_file` |
| `primer.cli`        | `greeting`, `command_line_sum` and `main`, behind the `primer` command |

## Examples

```python
from primer.numbers import gcd, is_leap_year, primes_up_to, to_binary
from primer.arrays import merge_sort, binary_search
from primer.matrices import multiply_matrices, transpose
from primer.calculator import calculate

gcd(12, 18)                        # 6
is_leap_year(2024)                 # True
to_binary(10)                      # "1010"
primes_up_to(10)                   # [2, 3, 5, 7]
merge_sort([5, 3, 9, 1])           # [1, 3, 5, 9]
binary_search([1, 3, 5, 9], 5)     # True
transpose([[1, 2, 3], [4, 5, 6]])  # [[1, 4], [2, 5], [3, 6]]
calculate("/", 7, 2)               # 3.5
```

`largest`, `smallest` and `sum_and_average` raise `ValueError` for an empty
sequence. `to_binary` rejects negative numbers and `primes_up_to` requires
`n` of at least 2, both with `ValueError`. Matrices with ragged rows or
mismatched shapes raise `MatrixShapeError`.

The data structures behave like ordinary Python containers:

```python
from primer.structures import CircularQueue, DoublyLinkedList, LinkedStack

items = DoublyLinkedList()
for value in (10, 20, 30):
    items.push_front(value)
list(items)            # [30, 20, 10]
list(reversed(items))  # [10, 20, 30]

stack = LinkedStack()
stack.push(5)
stack.push(10)
stack.pop()            # 10

queue = CircularQueue(4)
for value in (1, 2, 3, 4):
    queue.push(value)
queue.pop()            # 1
queue.push(5)
list(queue.drain())    # [2, 3, 4, 5]
```

Pushing onto a full `CircularQueue` raises `QueueFullError`; popping an empty
`LinkedStack` or `CircularQueue` raises `IndexError`.

Student records are parsed from "roll name marks":

```python
from primer.students import Student, format_roster

student = Student.parse("1 Ravi 89.5")
student.details()  # "Roll: 1\nName: Ravi\nMarks: 89.50"
format_roster([student])  # "Student Details:\n1 Ravi 89.50\n"
```

The file helpers default to `output.txt` (and `copy.txt` as the copy target)
in the current directory; `write_sample` writes the sentence
"Hello, this is a test file.".

## Command line

Installing the package provides the `primer` command.

```
primer sum 3 4     # prints "Sum = 7"
primer hello       # prints "Hello, World!"
```

`primer sum` adds the integers at the start of its first two arguments; an
argument that does not begin with an integer counts as zero and further
arguments are ignored. With fewer than two numbers it prints a usage line and
exits with status 1. Run without a subcommand, `primer` prints the greeting.

## Limitations

The command line only offers the greeting and the sum. The other exercises
are available as Python functions and classes, not as interactive prompts or
commands.