from math import isqrt, gcd

# Distinct primes are pairwise coprime, which is what the
# multi-base generators need to avoid correlated coordinates.

_primes = [2, 3]

def is_prime(a: int) -> bool:
    if a < 2:
        return False
    return all(a % p for p in range(2, isqrt(a) + 1))

def nth_prime(n: int) -> int:
    """ Returns the Nth prime (zero-indexed), extending the shared list as needed """
    i = _primes[-1]
    while len(_primes) <= n:
        i += 2 # skip even
        if all(i % p for p in _primes if p * p <= i):
            _primes.append(i)
    return _primes[n]

def get_primes(N: int):
    nth_prime(N - 1)
    return _primes[:N]

def correlated_pairs(own: int, others):
    """ Bases in `others` sharing a factor with `own` """
    return [(own, b) for b in others if gcd(own, b) > 1]
