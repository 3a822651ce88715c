"""Small integer and arithmetic routines: parity, digits, primes and sequences."""

from __future__ import annotations

from collections.abc import Iterator
from math import isqrt, prod

PI = 3.1416


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of ``abs(n)``, least significant first."""
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield digit


def _sign(n: int) -> int:
    return -1 if n < 0 else 1


def _truncated_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as in truncating division."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def is_even(n: int) -> bool:
    """Return True when ``n`` is divisible by two."""
    return n % 2 == 0


def larger(a: int, b: int) -> int:
    """Return the larger of two numbers; ``b`` when they are equal."""
    return a if a > b else b


def sign_name(n: float) -> str:
    """Name the sign of ``n``: "Positive", "Negative" or "Zero"."""
    if n > 0:
        return "Positive"
    if n < 0:
        return "Negative"
    return "Zero"


def circle_area(radius: float) -> float:
    """Area of a circle, using pi approximated as 3.1416."""
    return PI * radius * radius


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def arithmetic_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers using exclusive-or."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def sum_natural(n: int) -> int:
    """Sum of 1..n; zero when ``n`` is not positive."""
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """Product of 1..n; one when ``n`` is not positive."""
    return prod(range(1, n + 1))


def multiplication_table(n: int) -> list[str]:
    """Lines of the form "n x i = n*i" for i from 1 to 10."""
    return [f"{n} x {i} = {n * i}" for i in range(1, 11)]


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting at 0."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def fibonacci_term(n: int) -> int:
    """The ``n``-th Fibonacci number; values below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return _sign(n) * reversed_value


def is_palindrome_number(n: int) -> bool:
    """True when ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def is_armstrong(n: int) -> bool:
    """True when ``n`` equals the sum of its digits each raised to the digit count."""
    digits = list(_digits(n))
    power = len(digits)
    sign = _sign(n)
    return sum((sign * digit) ** power for digit in digits) == n


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``; zero has none."""
    return sum(1 for _ in _digits(n))


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``, carrying the sign of ``n``."""
    return _sign(n) * sum(_digits(n))


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, _truncated_mod(a, b)
    return a


def to_binary(n: int) -> str:
    """Binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("expected a non-negative integer")
    return format(n, "b")


def primes_up_to(n: int) -> list[int]:
    """All primes not above ``n`` by the sieve of Eratosthenes; ``n`` must be at least 2."""
    if n < 2:
        raise ValueError("n must be at least 2")
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [number for number, flag in enumerate(sieve) if flag]