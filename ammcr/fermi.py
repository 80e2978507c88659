"""Fermi level from the doping concentration by bisection on the net carrier density."""

import math
from dataclasses import dataclass
from itertools import pairwise
from typing import Optional, Sequence

from ammcr.distribution import PI, fermi_dirac

_MAX_DOPING = 5e20  # cm^-3
_TOLERANCE = 0.001
_BRACKET = 1.0  # eV beyond the band edges
_INITIAL_PREVIOUS = -20.0
_PER_CM3 = 1e21  # 1/nm^3 -> 1/cm^3
_ANGSTROM3_TO_NM3 = 1000


@dataclass(frozen=True)
class CarrierBands:
    """Conduction and valence band data sampled on a common k grid.

    With ``free_electron`` the densities of states are taken from the k grid;
    otherwise ``dos_n``, ``dos_p`` and the cell ``volume`` (cubic angstrom) are used.
    """

    k_grid: Sequence[float]
    energy_n: Sequence[float]
    energy_p: Sequence[float]
    dos_n: Optional[Sequence[float]] = None
    dos_p: Optional[Sequence[float]] = None
    volume: Optional[float] = None
    n_cb: float = 1.0
    n_vb: float = 1.0
    free_electron: bool = False

    def __post_init__(self):
        for name in ("k_grid", "energy_n", "energy_p", "dos_n", "dos_p"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, tuple(float(v) for v in value))
        size = len(self.k_grid)
        if len(self.energy_n) != size or len(self.energy_p) != size:
            raise ValueError("band energies must match the k grid in length")
        if not self.free_electron:
            if self.dos_n is None or self.dos_p is None or self.volume is None:
                raise ValueError("densities of states and volume are required")
            if len(self.dos_n) != size or len(self.dos_p) != size:
                raise ValueError("densities of states must match the k grid in length")
            if self.volume == 0:
                raise ValueError("volume must not be zero")


@dataclass(frozen=True)
class FermiResult:
    """Fermi level (eV), carrier densities and ionized impurity density (cm^-3)."""

    fermi_level: float
    n_e: float
    n_h: float
    ionized_impurities: float


def carrier_concentration(bands, fermi_level, temperature, band_gap, skip_first=False):
    """Electron and hole densities (cm^-3) for a Fermi level measured from the band edge.

    ``skip_first`` leaves out the first grid point of the free-electron integral.
    """
    hole_level = -(fermi_level + band_gap)
    electrons = 0.0
    holes = 0.0
    if bands.free_electron:
        start = 1 if skip_first else 0
        steps = zip(
            pairwise(bands.k_grid[start:]),
            bands.energy_n[start:],
            bands.energy_p[start:],
        )
        for (k, k_next), en, ep in steps:
            weight = (k_next - k) * (k / PI) ** 2
            electrons += weight * fermi_dirac(en, fermi_level, temperature) * bands.n_cb
            holes += weight * fermi_dirac(ep, hole_level, temperature) * bands.n_vb
    else:
        scale = _ANGSTROM3_TO_NM3 / bands.volume
        steps = zip(
            pairwise(bands.energy_n), pairwise(bands.energy_p), bands.dos_n, bands.dos_p
        )
        for (en, en_next), (ep, ep_next), dn, dp in steps:
            electrons += (
                (en_next - en) * dn * scale
                * fermi_dirac(en, fermi_level, temperature) * bands.n_cb
            )
            holes += (
                (ep_next - ep) * dp * scale
                * fermi_dirac(ep, hole_level, temperature) * bands.n_vb
            )
    return electrons * _PER_CM3, holes * _PER_CM3


def find_fermi(
    bands,
    doping,
    temperature,
    band_gap,
    donors=0.0,
    acceptors=0.0,
    deionization=False,
    dislocation_density=0.0,
    c_lattice=None,
):
    """Fermi level giving a net electron density equal to ``doping`` (cm^-3).

    The doping is capped at 5e20 cm^-3. Without ``deionization`` the carrier
    densities are raised to at least ``donors`` and ``acceptors``. A nonzero
    ``dislocation_density`` adds its charged line density, divided by ``c_lattice``,
    to the ionized impurities.
    """
    if doping <= 0:
        raise ValueError("doping must be positive")
    if dislocation_density and not c_lattice:
        raise ValueError("dislocations need a nonzero c lattice constant")
    target = min(doping, _MAX_DOPING)

    def net(level, skip_first=False):
        electrons, holes = carrier_concentration(
            bands, level, temperature, band_gap, skip_first
        )
        return electrons, holes

    upper = _BRACKET
    lower = -(band_gap + _BRACKET)
    n_upper = (lambda pair: pair[0] - pair[1])(net(upper))
    n_lower = (lambda pair: pair[0] - pair[1])(net(lower))
    middle = (upper + lower) / 2
    n_e, n_h = net(middle)
    n_mid = n_e - n_h

    previous = _INITIAL_PREVIOUS
    while abs(abs(n_mid) / target - 1) > _TOLERANCE:
        if n_upper > target and n_lower < target:
            if n_mid < target:
                lower = middle
                middle = (upper + lower) / 2
            elif n_mid > target:
                upper = middle
                middle = (upper + lower) / 2
        n_e, n_h = net(middle, skip_first=True)
        n_mid = n_e - n_h
        if upper == lower or previous == middle:
            break
        previous = middle

    if math.isnan(n_e):
        n_e = 0.0
    if math.isnan(n_h):
        n_h = 0.0
    if not deionization:
        n_e = max(n_e, donors)
        n_h = max(n_h, acceptors)

    dislocations = abs(dislocation_density / c_lattice * 1e7) if dislocation_density else 0.0
    return FermiResult(
        fermi_level=middle,
        n_e=n_e,
        n_h=n_h,
        ionized_impurities=n_e + n_h + dislocations,
    )