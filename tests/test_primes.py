from lds import is_prime, nth_prime, get_primes
from lds.primes import correlated_pairs

def test_get_primes():
    assert get_primes(0) == []
    assert get_primes(10) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

def test_nth_prime():
    assert nth_prime(0) == 2
    assert nth_prime(99) == 541
    assert nth_prime(4) == 11

def test_is_prime():
    assert [a for a in range(-2, 30) if is_prime(a)] == get_primes(10)
    assert all(is_prime(p) for p in get_primes(200))

def test_correlated_pairs():
    assert correlated_pairs(6, [5, 9, 4, 7]) == [(6, 9), (6, 4)]
    assert correlated_pairs(2, get_primes(10)[1:]) == []
