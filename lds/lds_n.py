from math import sin, cos, sqrt
from functools import lru_cache
from typing import NamedTuple
import numpy as np
from .lds import VdCorput, Circle, Sphere
from .utils import DomainError, check_bases, warn_correlated

# Uniform points on S^(n-1) in R^n, built recursively from S^(n-2).
# Polar angle phi in [0, pi] has density proportional to sin(phi)^(n-2),
# whose CDF has no usable closed-form inverse for n >= 4. The CDF is
# tabulated on a fixed grid and inverted by linear interpolation.
#
# [1]: en.wikipedia.org/wiki/List_of_integrals_of_trigonometric_functions (reduction formula)

N_NODES = 300

def _frozen(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a

class Grid(NamedTuple):
    """ Read-only angle grid over [0, pi] with precomputed sin and -cos """
    x: np.ndarray
    sine: np.ndarray
    neg_cosine: np.ndarray # antiderivative of sine

    @classmethod
    def make(cls, n_nodes: int = N_NODES):
        if n_nodes < 2:
            raise ValueError(f'Grid needs at least 2 nodes, got {n_nodes}')
        x = np.linspace(0.0, np.pi, n_nodes)
        return cls(_frozen(x), _frozen(np.sin(x)), _frozen(-np.cos(x)))

GRID = Grid.make()

def reduce_table(prev: np.ndarray, n: int, grid: Grid = GRID) -> np.ndarray:
    """
    Table for n coordinates from the table for n-2 coordinates.

    Integral of sin^m in terms of the integral of sin^(m-2) [1], m = n-2:
        F_n = ((m-1) * F_(n-2) - cos(x) * sin(x)^(m-1)) / m
    """
    m = n - 2
    table = ((m - 1) * prev + grid.neg_cosine * grid.sine ** (m - 1)) / m
    # near 0 and pi the increments drop below rounding error for large n
    return _frozen(np.maximum.accumulate(table))

def build_table(n: int, grid: Grid = GRID) -> np.ndarray:
    """
    Cumulative measure of the polar angle of S^(n-1) on the grid,
    i.e. the integral of sin^(n-2) from 0 to x, up to a constant.
    """
    if n < 2:
        raise ValueError(f'Angle table needs n >= 2, got {n}')
    table = grid.x if n % 2 == 0 else grid.neg_cosine # n = 2, 3
    for k in range(n % 2 + 4, n + 1, 2):
        table = reduce_table(table, k, grid)
    return table

@lru_cache(maxsize=None)
def angle_table(n: int) -> np.ndarray:
    """ Shared, cached version of build_table() on the default grid """
    if n < 4:
        return build_table(n)
    return reduce_table(angle_table(n - 2), n)

def invert_table(table: np.ndarray, t: float, grid: Grid = GRID) -> float:
    """ Angle x on the grid with table(x) = t """
    if not table[0] <= t <= table[-1]:
        raise DomainError(f'{t} outside of table range [{table[0]}, {table[-1]}]')
    return float(np.interp(t, table, grid.x))

class SphereN:
    """
    Points on the (n-1)-sphere in R^n.

    Needs n-1 bases: the first drives this level's polar angle, the
    rest go to the nested generator for S^(n-2), which is a Sphere
    once n reaches 4. Extra trailing bases are ignored.
    """
    def __init__(self, base, n: int = None):
        base = list(base)
        n = len(base) + 1 if n is None else n
        if n < 4:
            raise ValueError(f'SphereN needs n >= 4, got {n} (use Sphere or Circle)')
        base = check_bases(base, n - 1, 'SphereN')
        warn_correlated(base[0], base[1:])
        self.n = n
        self.vdc = VdCorput(base[0])
        if n == 4:
            self.s_gen = Sphere(base[1:])
        else:
            self.s_gen = SphereN(base[1:], n - 1)
        self.tp = angle_table(n)

    def pop(self):
        vd = self.vdc.pop()
        t0, t1 = self.tp[0], self.tp[-1]
        ti = t0 + (t1 - t0) * vd # map to [t0, t1]
        xi = invert_table(self.tp, ti)
        sinphi = sin(xi)
        res = [sinphi * s for s in self.s_gen.pop()]
        res.append(cos(xi))
        return res

    def reseed(self, seed: int):
        self.vdc.reseed(seed)
        self.s_gen.reseed(seed)

class CylinN:
    """
    Points on the (n-1)-sphere in R^n by cylindrical projection.

    Every level draws cos(phi) uniformly on [-1, 1], without the
    sin^(n-2) weighting of SphereN. This is the equal-area measure
    only for n = 3; for larger n the points lie on the sphere but
    concentrate towards the poles of each level compared to SphereN.
    Needs n-1 bases, the last one drives a Circle.
    """
    def __init__(self, base, n: int = None):
        base = list(base)
        n = len(base) + 1 if n is None else n
        if n < 3:
            raise ValueError(f'CylinN needs n >= 3, got {n} (use Circle)')
        base = check_bases(base, n - 1, 'CylinN')
        warn_correlated(base[0], base[1:])
        self.n = n
        self.vdc = VdCorput(base[0])
        if n == 3:
            self.c_gen = Circle(base[1])
        else:
            self.c_gen = CylinN(base[1:], n - 1)

    def pop(self):
        cosphi = 2.0 * self.vdc.pop() - 1.0 # map to [-1, 1]
        sinphi = sqrt(1.0 - cosphi * cosphi)
        res = [sinphi * c for c in self.c_gen.pop()]
        res.append(cosphi)
        return res

    def reseed(self, seed: int):
        self.vdc.reseed(seed)
        self.c_gen.reseed(seed)
