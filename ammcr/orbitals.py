"""Orbital character of a band as a function of distance from the band edge."""

import math
from pathlib import Path

from ammcr.procar import parse_procar

_TWO_PI = 2.0 * 3.14159265359
_ANGSTROM_TO_NM = 10.0
_SAME_DISTANCE = 0.0001
_NORMALIZATION_FLOOR = 0.0000000001


def _cartesian(fractional, lattice):
    """Cartesian wave vector (1/nm) of fractional reciprocal coordinates."""
    return tuple(
        sum(f * lattice[j][c] for j, f in enumerate(fractional)) * _ANGSTROM_TO_NM * _TWO_PI
        for c in range(3)
    )


def _normalized(row):
    distance, s, p, d = row
    scale = math.sqrt(1 / (s ** 2 + p ** 2 + _NORMALIZATION_FLOOR))
    return distance, s * scale, p * scale, d


def _average(rows):
    count = len(rows)
    return tuple(sum(column) / count for column in zip(*rows))


def _merge_equal_distances(rows):
    """Collapse runs of rows at (nearly) the same distance into their average."""
    merged = [rows[0]]
    start = 0
    for i in range(1, len(rows) - 1):
        gap_before = abs(rows[i][0] - rows[i - 1][0])
        gap_after = rows[i + 1][0] - rows[i][0]
        if gap_before < _SAME_DISTANCE:
            if start == 0:
                start = i - 1
            if gap_after > _SAME_DISTANCE:
                merged.append(_average(rows[start : i + 1]))
                start = 0
        if gap_before > _SAME_DISTANCE and gap_after > _SAME_DISTANCE:
            merged.append(rows[i])
    if rows[-1][0] > rows[-2][0]:
        merged.append(rows[-1])
    second = merged[1] if len(merged) > 1 else rows[1]
    if second[0] - merged[0][0] < _SAME_DISTANCE:
        merged = merged[1:]
    return merged


def orbital_table(data, band_number, lattice, reference):
    """Rows ``(distance, s, p, d)`` for the 1-based ``band_number`` of ``data``.

    ``lattice`` holds the three reciprocal lattice vectors (1/angstrom, without
    the factor 2 pi) as rows; ``reference`` is the band edge in fractional
    coordinates. Distances are in 1/nm, rows are sorted by distance, the s and
    p weights are normalised to unit length and rows at the same distance are
    averaged.
    """
    if not 1 <= band_number <= data.num_bands:
        raise ValueError(f"band {band_number} is not among the {data.num_bands} bands")
    if data.num_kpoints < 2:
        raise ValueError("at least two k-points are needed")
    if len(lattice) != 3 or any(len(row) < 3 for row in lattice):
        raise ValueError("lattice must hold three reciprocal vectors")
    if len(reference) != 3:
        raise ValueError("reference must hold three fractional coordinates")

    origin = _cartesian(reference, lattice)
    band = band_number - 1
    rows = [
        (
            math.dist(_cartesian(kpoint, lattice), origin),
            data.s_total[band][i],
            data.p_total[band][i],
            data.d_total[band][i],
        )
        for i, kpoint in enumerate(data.kpoints)
    ]
    rows.sort(key=lambda row: row[0])
    return _merge_equal_distances([_normalized(row) for row in rows])


def decompose_wave(directory, carrier, nbval, lattice, reference, spin_orbit_coupling=False):
    """Orbital table of the band edge read from PROCAR_n or PROCAR_p (or PROCAR).

    Carrier ``"n"`` uses band ``nbval + 1``, carrier ``"p"`` band ``nbval``.
    Returns an empty list when no PROCAR file is present, in which case the
    band is taken to be of pure s (conduction) or p (valence) character.
    """
    if carrier not in ("n", "p"):
        raise ValueError("carrier must be 'n' or 'p'")
    band_number = nbval + 1 if carrier == "n" else nbval
    directory = Path(directory)
    for name in (f"PROCAR_{carrier}", "PROCAR"):
        path = directory / name
        if path.is_file():
            data = parse_procar(path.read_text(), spin_orbit_coupling)
            return orbital_table(data, band_number, lattice, reference)
    return []