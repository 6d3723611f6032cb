from .lds import TWO_PI, vdc, VdCorput, Halton, HaltonN, Circle, Sphere, Sphere3Hopf
from .lds_n import Grid, GRID, build_table, reduce_table, angle_table, invert_table, SphereN, CylinN
from .primes import is_prime, nth_prime, get_primes
from .utils import DomainError, sample

__version__ = '1.0.0'
