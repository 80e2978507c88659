"""Band edges from an EIGENVAL band-structure file."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BandEdges:
    """Conduction band minimum and valence band maximum with their k-points."""

    nkpts: int
    nbval: int
    nbtot: int
    ecbm: float
    evbm: float
    kcbm: tuple
    kvbm: tuple


def parse_eigenval(text, spin_orbit_coupling=False, spin_down=False):
    """Find the band edges in the contents of an EIGENVAL file."""
    lines = iter(text.splitlines())
    column = 2 if spin_down else 1
    try:
        for _ in range(6):
            header = next(lines)
        fields = header.split()
        nelect = int(float(fields[0]))
        nkpts = int(fields[1])
        nbtot = int(fields[2])
        nbval = nelect if spin_orbit_coupling else int(nelect / 2.0)
        kpoints = []
        energies = []
        for _ in range(nkpts):
            next(lines)
            kpoints.append(tuple(float(v) for v in next(lines).split()[:3]))
            energies.append([float(next(lines).split()[column]) for _ in range(nbtot)])
    except (StopIteration, IndexError, ValueError) as exc:
        raise ValueError("malformed EIGENVAL data") from exc
    if nkpts < 1:
        raise ValueError("EIGENVAL data holds no k-points")
    if not 0 < nbval < nbtot:
        raise ValueError(f"valence band {nbval} has no conduction band above it")

    vbm_bands, kvbm = max(zip(energies, kpoints), key=lambda pair: pair[0][nbval - 1])
    cbm_bands, kcbm = min(zip(energies, kpoints), key=lambda pair: pair[0][nbval])
    return BandEdges(
        nkpts=nkpts,
        nbval=nbval,
        nbtot=nbtot,
        ecbm=cbm_bands[nbval],
        evbm=vbm_bands[nbval - 1],
        kcbm=kcbm,
        kvbm=kvbm,
    )


def find_cbm_vbm(directory, carrier="n", spin_orbit_coupling=False, spin_down=False):
    """Read EIGENVAL_n or EIGENVAL_p (falling back to EIGENVAL) from ``directory``."""
    if carrier not in ("n", "p"):
        raise ValueError("carrier must be 'n' or 'p'")
    directory = Path(directory)
    for name in (f"EIGENVAL_{carrier}", "EIGENVAL"):
        path = directory / name
        if path.is_file():
            return parse_eigenval(path.read_text(), spin_orbit_coupling, spin_down)
    raise FileNotFoundError(f"EIGENVAL is not present in {directory}")