import numpy as np
from tqdm import trange
from .primes import correlated_pairs

class DomainError(ArithmeticError):
    """ Raised when a value falls outside the range a table can invert """

def check_base(base: int):
    if base < 2:
        raise ValueError(f'Base must be at least 2, got {base}')
    return base

def check_bases(base, required: int, name: str):
    """ Validates the leading `required` bases; trailing extras are ignored """
    base = list(base)
    if len(base) < required:
        raise ValueError(f'{name} needs {required} bases, got {len(base)}')
    for b in base[:required]:
        check_base(b)
    return base[:required]

def warn_correlated(own: int, others):
    for a, b in correlated_pairs(own, others):
        print(f'Warning: bases {a} and {b} share a common factor, coordinates will be correlated')

def warn_correlated_all(base):
    for i, b in enumerate(base):
        warn_correlated(b, base[i+1:])

def sample(gen, N: int, seed: int = 0, progress: bool = False) -> np.ndarray:
    """
    Draw N consecutive points from a generator.

    The generator is reseeded first, so the result is reproducible
    and equals the first N points of a fresh instance when seed=0.
    Returns an array of shape (N, dims), or (N,) for VdCorput.
    """
    gen.reseed(seed)
    return np.array([gen.pop() for _ in trange(N, disable=not progress)], dtype=np.float64)
