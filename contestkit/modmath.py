"""Modular arithmetic: fast powers, divisor sums and counting with a modulus."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

MOD = 1_000_000_007


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return base ** exponent modulo modulus; a zero exponent always gives 1."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def tower_power(a: int, b: int, c: int) -> int:
    """Return a ** (b ** c) modulo 1e9+7, reducing the inner power by Fermat."""
    return mod_pow(a, mod_pow(b, c, MOD - 1), MOD)


def _range_sum(start: int, end: int) -> int:
    return (end - start + 1) * (start + end) // 2 % MOD


def sum_of_divisor_sums(n: int) -> int:
    """Return sigma(1) + sigma(2) + ... + sigma(n) modulo 1e9+7."""
    total = 0
    i = 1
    while i <= n:
        quotient = n // i
        last = n // quotient
        total = (total + quotient * _range_sum(i, last)) % MOD
        i = last + 1
    return total


def _factorize(n: int) -> dict[int, int]:
    factors: Counter[int] = Counter()
    p = 2
    while p * p <= n:
        while n % p == 0:
            factors[p] += 1
            n //= p
        p += 1
    if n > 1:
        factors[n] += 1
    return dict(factors)


def divisor_sum_of_power(a: int, b: int) -> int:
    """Return the sum of the divisors of a ** b modulo 1e9+7."""
    result = 1
    for prime, exponent in _factorize(a).items():
        residue = prime % MOD
        if residue != 1:
            exponent = exponent * (b % (MOD - 1)) % (MOD - 1)
        else:
            exponent = exponent * (b % MOD) % MOD
        if residue > 1:
            numerator = (pow(prime, exponent + 1, MOD) - 1) % MOD
            term = numerator * pow(prime - 1, MOD - 2, MOD) % MOD
        elif residue == 0:
            term = 1
        else:
            term = (exponent + 1) % MOD
        result = result * term % MOD
    return result


def _primes_up_to(n: int) -> list[int]:
    is_prime = [True] * (n + 1)
    primes = []
    for i in range(2, n + 1):
        if is_prime[i]:
            primes.append(i)
            for j in range(i * i, n + 1, i):
                is_prime[j] = False
    return primes


def exercise_sum(n: int, modulus: int) -> int:
    """Return the sum of all distinct permutation orders for length n, modulo modulus.

    Each order is the lcm of cycle lengths; it is built from coprime prime powers.
    """
    dp = [0] * (n + 1)
    dp[0] = 1
    for prime in _primes_up_to(n):
        updated = dp[:]
        power = prime
        while power <= n:
            for total in range(power, n + 1):
                updated[total] = (updated[total] + dp[total - power] * power % modulus) % modulus
            power *= prime
        dp = updated
    return sum(dp) % modulus


def count_poems(words: Iterable[tuple[int, int]], scheme: Iterable[str], k: int) -> int:
    """Count poems whose lines have k syllables and whose rhymes follow scheme.

    words holds (syllables, rhyme_class) pairs; scheme holds one letter per line.
    """
    if k < 1:
        raise ValueError("k must be positive")
    words = list(words)
    ways = [0] * k
    ways[0] = 1
    for total in range(k):
        for syllables, _ in words:
            if total - syllables >= 0:
                ways[total] = (ways[total] + ways[total - syllables]) % MOD

    line_endings: Counter[int] = Counter()
    for syllables, rhyme in words:
        if k - syllables >= 0:
            line_endings[rhyme] = (line_endings[rhyme] + ways[k - syllables]) % MOD

    answer = 1
    for repeats in Counter(scheme).values():
        options = sum(mod_pow(count, repeats, MOD) for count in line_endings.values()) % MOD
        answer = answer * options % MOD
    return answer