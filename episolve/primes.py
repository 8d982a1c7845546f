"""Prime generation with a sieve over odd numbers."""

from __future__ import annotations


def generate_primes(n: int) -> list[int]:
    """Return the primes up to and including ``n``; empty when ``n`` <= 2."""
    if n <= 2:
        return []
    size = (n - 3) // 2 + 1
    # is_prime[i] stands for the odd number 2*i + 3.
    is_prime = [True] * size
    primes = [2]
    for i in range(size):
        if not is_prime[i]:
            continue
        p = 2 * i + 3
        primes.append(p)
        # i + p is the index of 3p, the first odd multiple above p.
        for j in range(i + p, size, p):
            is_prime[j] = False
    return primes