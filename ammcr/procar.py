"""Orbital-projected band data from a PROCAR file."""

import re
from dataclasses import dataclass

_NUMBER = r"[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?"
_FLOAT = re.compile(_NUMBER)
_COUNTS = re.compile(r"k-points:\s*(\d+).*?bands:\s*(\d+).*?ions:\s*(\d+)")
_ENERGY = re.compile(r"energy\s+(" + _NUMBER + ")")
_TOTAL_COLUMNS = 10  # s py pz px dxy dyz dz2 dxz dx2 tot


@dataclass(frozen=True)
class ProcarData:
    """Band energies and orbital character summed over ions.

    ``energies``, ``s_total``, ``p_total`` and ``d_total`` are indexed
    ``[band][kpoint]``; ``kpoints`` holds fractional reciprocal coordinates.
    """

    num_kpoints: int
    num_bands: int
    num_ions: int
    kpoints: tuple
    weights: tuple
    energies: tuple
    s_total: tuple
    p_total: tuple
    d_total: tuple


def _parse_kpoint(line):
    head, colon, rest = line.partition(":")
    if not colon or "k-point" not in head:
        raise ValueError(f"expected a k-point line, got {line.strip()!r}")
    coordinates, marker, weight_part = rest.partition("weight")
    values = [float(v) for v in _FLOAT.findall(coordinates)]
    if not marker or len(values) < 3:
        raise ValueError(f"malformed k-point line {line.strip()!r}")
    weight = _FLOAT.findall(weight_part.partition("=")[2])
    if not weight:
        raise ValueError(f"k-point line has no weight: {line.strip()!r}")
    return tuple(values[:3]), float(weight[0])


def _parse_energy(line):
    match = _ENERGY.search(line)
    if not line.lstrip().startswith("band") or match is None:
        raise ValueError(f"expected a band line, got {line.strip()!r}")
    return float(match.group(1))


def _parse_totals(line):
    stripped = line.strip()
    if not stripped.startswith("tot"):
        raise ValueError(f"expected a tot line, got {stripped!r}")
    values = [float(v) for v in _FLOAT.findall(stripped[3:])]
    if len(values) < _TOTAL_COLUMNS:
        raise ValueError(f"tot line holds fewer than {_TOTAL_COLUMNS} values")
    s, py, pz, px, *d_parts = values[:_TOTAL_COLUMNS - 1]
    return s, py + px + pz, sum(d_parts)


def parse_procar(text, spin_orbit_coupling=False):
    """Read an lm-decomposed PROCAR; the extra spin-orbit blocks are skipped."""
    lines = (line for line in text.splitlines() if line.strip())
    try:
        next(lines)
        counts = _COUNTS.search(next(lines))
        if counts is None:
            raise ValueError("PROCAR header holds no k-point, band and ion counts")
        num_kpoints, num_bands, num_ions = (int(v) for v in counts.groups())

        kpoints = []
        weights = []
        energies = [[] for _ in range(num_bands)]
        s_total = [[] for _ in range(num_bands)]
        p_total = [[] for _ in range(num_bands)]
        d_total = [[] for _ in range(num_bands)]

        for _ in range(num_kpoints):
            kpoint, weight = _parse_kpoint(next(lines))
            kpoints.append(kpoint)
            weights.append(weight)
            for band in range(num_bands):
                energies[band].append(_parse_energy(next(lines)))
                next(lines)  # column header
                for _ in range(num_ions):
                    next(lines)
                s, p, d = _parse_totals(next(lines))
                s_total[band].append(s)
                p_total[band].append(p)
                d_total[band].append(d)
                if spin_orbit_coupling:
                    for _ in range(3 * (num_ions + 1)):
                        next(lines)
    except StopIteration as exc:
        raise ValueError("PROCAR data ends early") from exc

    def freeze(rows):
        return tuple(tuple(row) for row in rows)

    return ProcarData(
        num_kpoints=num_kpoints,
        num_bands=num_bands,
        num_ions=num_ions,
        kpoints=tuple(kpoints),
        weights=tuple(weights),
        energies=freeze(energies),
        s_total=freeze(s_total),
        p_total=freeze(p_total),
        d_total=freeze(d_total),
    )