from math import pi, sin, cos, sqrt
from .utils import check_base, check_bases, warn_correlated_all

# [1]: pbr-book.org/3ed-2018/Sampling_and_Reconstruction/The_Halton_Sampler
# [2]: en.wikipedia.org/wiki/Van_der_Corput_sequence
# [3]: Yershova et al., Generating uniform incremental grids on SO(3) using the Hopf fibration (2010)

TWO_PI = 2.0 * pi

def vdc(k: int, base: int = 2) -> float:
    """ Van der Corput sequence: radical inverse of k in the given base [2] """
    check_base(base)
    res = 0.0
    denom = 1.0
    while k > 0:
        denom *= base
        k, remainder = divmod(k, base) # lsd
        res += remainder / denom
    return res

class VdCorput:
    """
    Van der Corput sequence generator.

    Each pop() advances the counter by one and returns its radical
    inverse, so the first value is vdc(1, base).
    """
    def __init__(self, base: int = 2):
        self.base = check_base(base)
        self.count = 0

    def pop(self) -> float:
        self.count += 1
        return vdc(self.count, self.base)

    def reseed(self, seed: int):
        if seed < 0:
            raise ValueError(f'Seed must be non-negative, got {seed}')
        self.count = seed

class Halton:
    """ 2D Halton sequence generator [1] """
    def __init__(self, base):
        b0, b1 = check_bases(base, 2, 'Halton')
        warn_correlated_all([b0, b1])
        self.vdc0 = VdCorput(b0)
        self.vdc1 = VdCorput(b1)

    def pop(self):
        return [self.vdc0.pop(), self.vdc1.pop()]

    def reseed(self, seed: int):
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)

class HaltonN:
    """ Halton sequence generator, one dimension per base """
    def __init__(self, base):
        base = list(base)
        base = check_bases(base, max(len(base), 1), 'HaltonN')
        warn_correlated_all(base)
        self.vdcs = [VdCorput(b) for b in base]

    def pop(self):
        return [v.pop() for v in self.vdcs]

    def reseed(self, seed: int):
        for v in self.vdcs:
            v.reseed(seed)

class Circle:
    """ Points on the unit circle """
    def __init__(self, base: int = 2):
        self.vdc = VdCorput(base)

    def pop(self):
        theta = self.vdc.pop() * TWO_PI # map to [0, 2*pi]
        return [sin(theta), cos(theta)]

    def reseed(self, seed: int):
        self.vdc.reseed(seed)

class Sphere:
    """
    Points on the unit 2-sphere.

    By Archimedes' hat-box theorem the height z = cos(phi) of a uniform
    point on the sphere is uniform on [-1, 1], so the polar coordinate
    needs no table lookup.
    """
    def __init__(self, base):
        b0, b1 = check_bases(base, 2, 'Sphere')
        warn_correlated_all([b0, b1])
        self.vdc = VdCorput(b0)
        self.cirgen = Circle(b1)

    def pop(self):
        cosphi = 2.0 * self.vdc.pop() - 1.0 # map to [-1, 1]
        sinphi = sqrt(1.0 - cosphi * cosphi)
        s, c = self.cirgen.pop()
        return [sinphi * s, sinphi * c, cosphi]

    def reseed(self, seed: int):
        self.cirgen.reseed(seed)
        self.vdc.reseed(seed)

class Sphere3Hopf:
    """ Points on the 3-sphere S^3 in R^4 via the Hopf fibration [3] """
    def __init__(self, base):
        b0, b1, b2 = check_bases(base, 3, 'Sphere3Hopf')
        warn_correlated_all([b0, b1, b2])
        self.vdc0 = VdCorput(b0)
        self.vdc1 = VdCorput(b1)
        self.vdc2 = VdCorput(b2)

    def pop(self):
        phi = self.vdc0.pop() * TWO_PI # map to [0, 2*pi]
        psy = self.vdc1.pop() * TWO_PI # map to [0, 2*pi]
        vd = self.vdc2.pop()
        cos_eta = sqrt(vd)
        sin_eta = sqrt(1.0 - vd)
        return [
            cos_eta * cos(psy),
            cos_eta * sin(psy),
            sin_eta * cos(phi + psy),
            sin_eta * sin(phi + psy),
        ]

    def reseed(self, seed: int):
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)
        self.vdc2.reseed(seed)
