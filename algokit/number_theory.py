"""Prime factorisation, divisor counting and other number-theory problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence


def divisible_queries(
    numbers: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Return the 1-based indices of the queries whose product divides the product of numbers."""
    if any(x <= 0 for x in numbers):
        raise ValueError("numbers must be positive")
    matching = []
    for position, query in enumerate(queries, start=1):
        divisors = list(query)
        if any(x <= 0 for x in divisors):
            raise ValueError("query values must be positive")
        remaining = list(numbers)
        # Cancel common factors as when reducing a fraction.
        for j, value in enumerate(remaining):
            for k, divisor in enumerate(divisors):
                common = math.gcd(value, divisor)
                value //= common
                divisors[k] = divisor // common
            remaining[j] = value
        if all(divisor == 1 for divisor in divisors):
            matching.append(position)
    return matching


def primes_up_to(limit: int) -> list[int]:
    """Return every prime not greater than limit, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(is_prime) if flag]


def factorize(n: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of n as (prime, exponent) pairs in ascending order."""
    if n < 1:
        raise ValueError("only positive integers can be factorised")
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            exponent = 0
            while n % divisor == 0:
                n //= divisor
                exponent += 1
            factors.append((divisor, exponent))
        divisor += 1 if divisor == 2 else 2
    if n > 1:
        factors.append((n, 1))
    return factors


def count_special_divisors(m: int) -> int:
    """For n = m(m+1)(m+2), count divisors of n squared that are below n and do not divide n."""
    if m < 1:
        raise ValueError("m must be positive")
    exponents: Counter[int] = Counter()
    for part in (m, m + 1, m + 2):
        for prime, exponent in factorize(part):
            exponents[prime] += exponent
    divisors_of_n = math.prod(e + 1 for e in exponents.values()) - 1
    divisors_of_square = math.prod(2 * e + 1 for e in exponents.values()) - 1
    # Divisors of n^2 other than n pair up as d < n < n^2 / d.
    return (divisors_of_square - 2 * divisors_of_n) // 2


def legendre(p: int, n: int) -> int:
    """Exponent of the prime p in n factorial."""
    if p < 2:
        raise ValueError("p must be a prime")
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    power = p
    while power <= n:
        total += n // power
        power *= p
    return total


def max_factorial_power(n: int, k: int) -> int:
    """Largest m such that k to the power m divides n factorial."""
    if k < 2:
        raise ValueError("k must be at least 2")
    return min(legendre(prime, n) // exponent for prime, exponent in factorize(k))


def mul_mod(a: int, b: int, mod: int) -> int:
    """Product of a and b modulo mod."""
    if mod <= 0:
        raise ValueError("mod must be positive")
    if b < 0:
        raise ValueError("b must not be negative")
    return (a % mod) * b % mod


_Matrix = tuple[tuple[int, int], tuple[int, int]]


def _mat_mul(x: _Matrix, y: _Matrix, mod: int) -> _Matrix:
    return (
        (
            (mul_mod(x[0][0], y[0][0], mod) + mul_mod(x[0][1], y[1][0], mod)) % mod,
            (mul_mod(x[0][0], y[0][1], mod) + mul_mod(x[0][1], y[1][1], mod)) % mod,
        ),
        (
            (mul_mod(x[1][0], y[0][0], mod) + mul_mod(x[1][1], y[1][0], mod)) % mod,
            (mul_mod(x[1][0], y[0][1], mod) + mul_mod(x[1][1], y[1][1], mod)) % mod,
        ),
    )


def fibonacci_mod(p: int, mod: int) -> int:
    """The (p+1)-th Fibonacci number modulo mod, with F(1) = F(2) = 1."""
    if p < 0:
        raise ValueError("p must not be negative")
    if mod <= 0:
        raise ValueError("mod must be positive")
    result: _Matrix = ((1 % mod, 0), (0, 1 % mod))
    base: _Matrix = ((1, 1), (1, 0))
    exponent = p + 1
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, base, mod)
        base = _mat_mul(base, base, mod)
        exponent >>= 1
    return result[1][0]


def can_equalize_bids(values: Sequence[int]) -> bool:
    """Tell whether doubling and tripling bids any number of times can make them all equal."""
    if not values:
        raise ValueError("there must be at least one bid")
    cores = set()
    for value in values:
        if value <= 0:
            raise ValueError("bids must be positive")
        while value % 2 == 0:
            value //= 2
        while value % 3 == 0:
            value //= 3
        cores.add(value)
    return len(cores) == 1


def max_gcd_after_reduction(values: Sequence[int], k: int) -> int:
    """Largest m such that every value can be lowered by at most k to a multiple of m."""
    if not values:
        raise ValueError("there must be at least one value")
    smallest = min(values)
    if smallest < 1:
        raise ValueError("values must be positive")
    for m in range(smallest, 0, -1):
        if all(value % m <= k for value in values):
            return m
    raise ValueError("k must not be negative")


def min_upload_time(n: int, k: int) -> int:
    """Seconds to upload n gigabytes when any k consecutive seconds carry at most one."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    return n + (k - 1) * (n - 1)