"""Piecewise polynomial band dispersion and the derived distribution functions."""

from dataclasses import dataclass
from typing import Sequence

from ammcr.distribution import K_B, fermi_dirac
import math


def nearest_index(values, target):
    """Index of the first element of ``values`` closest to ``target``."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    return min(enumerate(values), key=lambda pair: abs(pair[1] - target))[0]


@dataclass(frozen=True)
class BandFit:
    """Band energy E(k) fitted by polynomial segments split at ``kindex``.

    ``coefficients[s]`` holds the coefficients of segment ``s`` from the
    highest power (``degree``) down to the constant term.
    """

    coefficients: Sequence[Sequence[float]]
    kindex: Sequence[float]
    degree: int

    def __post_init__(self):
        coefficients = tuple(tuple(float(c) for c in row) for row in self.coefficients)
        kindex = tuple(float(k) for k in self.kindex)
        if self.degree < 0:
            raise ValueError("degree must not be negative")
        if len(coefficients) < len(kindex) + 1:
            raise ValueError("need one coefficient row per segment")
        if any(len(row) < self.degree + 1 for row in coefficients):
            raise ValueError("coefficient rows are shorter than degree + 1")
        object.__setattr__(self, "coefficients", coefficients)
        object.__setattr__(self, "kindex", kindex)

    def _segment(self, k):
        return next((j for j, edge in enumerate(self.kindex) if k <= edge), len(self.kindex))

    def _powers(self):
        return range(self.degree, -1, -1)

    def energy(self, k):
        """Band energy (eV) at wave vector ``k`` (1/nm)."""
        row = self.coefficients[self._segment(k)]
        return sum(c * k ** p for c, p in zip(row, self._powers()))

    def slope(self, k):
        """Derivative dE/dk at ``k``."""
        row = self.coefficients[self._segment(k)]
        return sum(p * k ** (p - 1) * c for c, p in zip(row, self._powers()) if p > 0)


def df0dk(k, temperature, fermi_level, band):
    """Derivative of the equilibrium distribution with respect to k."""
    energy = band.energy(k)
    if fermi_dirac(energy, fermi_level, temperature) < 1e-300:
        return 0.0
    kt = K_B * temperature
    x = math.exp((energy - fermi_level) / kt)
    return -x / (kt * (x + 1) ** 2) * band.slope(k)


def df0dz(k, fermi_level, temperature, df0dz_integral, band, dTdz):
    """Thermal driving term of the distribution for a temperature gradient ``dTdz``."""
    energy = band.energy(k)
    f = fermi_dirac(energy, fermi_level, temperature)
    return f * (1 - f) * (energy / (K_B * temperature) - df0dz_integral) / temperature * dTdz


def perturbed_distribution(k, fermi_level, temperature, band, k_grid, g, h=None):
    """Equilibrium distribution plus perturbations ``g`` (and ``h``) at the grid point nearest ``k``."""
    energy = band.energy(k)
    n = nearest_index(k_grid, k)
    result = fermi_dirac(energy, fermi_level, temperature) + g[n]
    if h is not None:
        result += h[n]
    return result