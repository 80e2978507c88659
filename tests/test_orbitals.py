import math

import pytest

from ammcr.orbitals import decompose_wave, orbital_table
from ammcr.procar import ProcarData

IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
ORIGIN = (0.0, 0.0, 0.0)


def make_data(kpoints, s, p, d, bands=1):
    n = len(kpoints)
    return ProcarData(
        num_kpoints=n,
        num_bands=bands,
        num_ions=1,
        kpoints=tuple(kpoints),
        weights=tuple(1.0 / n for _ in kpoints),
        energies=tuple(tuple(0.0 for _ in kpoints) for _ in range(bands)),
        s_total=tuple(tuple(s) for _ in range(bands)),
        p_total=tuple(tuple(p) for _ in range(bands)),
        d_total=tuple(tuple(d) for _ in range(bands)),
    )


def test_rows_sorted_and_normalized():
    data = make_data(
        [(0.2, 0, 0), (0.0, 0, 0), (0.1, 0, 0)],
        s=[3.0, 1.0, 0.5],
        p=[4.0, 1.0, 0.5],
        d=[0.2, 0.1, 0.3],
    )
    rows = orbital_table(data, 1, IDENTITY, ORIGIN)
    distances = [row[0] for row in rows]
    assert distances == sorted(distances)
    assert len(rows) == 3
    assert rows[0][0] == pytest.approx(0.0)
    for _, s, p, _ in rows:
        assert s ** 2 + p ** 2 == pytest.approx(1.0, rel=1e-6)
    last = rows[-1]
    assert last[1] == pytest.approx(0.6)
    assert last[2] == pytest.approx(0.8)
    assert last[3] == pytest.approx(0.2)


def test_equal_distances_are_averaged():
    data = make_data(
        [(0.0, 0, 0), (0.1, 0, 0), (0.0, 0.1, 0), (0.2, 0, 0)],
        s=[1.0, 1.0, 0.0, 1.0],
        p=[0.0, 0.0, 1.0, 0.0],
        d=[0.0, 0.2, 0.4, 0.0],
    )
    rows = orbital_table(data, 1, IDENTITY, ORIGIN)
    assert len(rows) == 3
    middle = rows[1]
    assert middle[0] == pytest.approx(0.1 * 2 * 3.14159265359 * 10)
    assert middle[1] == pytest.approx(0.5, rel=1e-6)
    assert middle[2] == pytest.approx(0.5, rel=1e-6)
    assert middle[3] == pytest.approx(0.3)


def test_duplicate_first_distance_replaced_by_average():
    data = make_data(
        [(0.0, 0, 0), (0.0, 0, 0), (0.1, 0, 0)],
        s=[1.0, 0.0, 1.0],
        p=[0.0, 1.0, 0.0],
        d=[0.0, 0.0, 0.0],
    )
    rows = orbital_table(data, 1, IDENTITY, ORIGIN)
    assert len(rows) == 2
    assert rows[0][0] == pytest.approx(0.0)
    assert rows[0][1] == pytest.approx(rows[0][2])
    assert rows[1][0] > rows[0][0]


def test_reference_shifts_distances():
    data = make_data(
        [(0.0, 0, 0), (0.1, 0, 0), (0.3, 0, 0)],
        s=[1.0, 1.0, 1.0],
        p=[0.0, 0.0, 0.0],
        d=[0.0, 0.0, 0.0],
    )
    rows = orbital_table(data, 1, IDENTITY, (0.1, 0.0, 0.0))
    assert rows[0][0] == pytest.approx(0.0, abs=1e-9)
    assert all(math.isfinite(row[0]) for row in rows)


def test_band_number_out_of_range():
    data = make_data([(0.0, 0, 0), (0.1, 0, 0)], s=[1, 1], p=[0, 0], d=[0, 0])
    with pytest.raises(ValueError):
        orbital_table(data, 2, IDENTITY, ORIGIN)
    with pytest.raises(ValueError):
        orbital_table(data, 0, IDENTITY, ORIGIN)


def test_single_kpoint_rejected():
    data = make_data([(0.0, 0, 0)], s=[1], p=[0], d=[0])
    with pytest.raises(ValueError):
        orbital_table(data, 1, IDENTITY, ORIGIN)


def procar_text(bands):
    """PROCAR with two bands at three k-points; ``bands[b][k]`` is (s, px, d)."""
    kpoints = [(0.0, 0.0, 0.0), (0.1, 0.0, 0.0), (0.2, 0.0, 0.0)]
    lines = [
        "PROCAR lm decomposed",
        "# of k-points:  3         # of bands:   2         # of ions:   1",
        "",
    ]
    for k, (x, y, z) in enumerate(kpoints):
        lines.append(
            f" k-point    {k + 1} :    {x:.8f} {y:.8f} {z:.8f}     weight = 0.33333333"
        )
        lines.append("")
        for b in range(2):
            s, px, d = bands[b][k]
            lines.append(f"band     {b + 1} # energy   {b - 1.0:.8f} # occ.  1.00000000")
            lines.append("")
            lines.append("ion      s     py     pz     px    dxy    dyz    dz2    dxz    dx2    tot")
            total = s + px + d
            row = f"{s} 0.0 0.0 {px} {d} 0.0 0.0 0.0 0.0 {total}"
            lines.append(f"    1 {row}")
            lines.append(f"tot   {row}")
            lines.append("")
    return "\n".join(lines) + "\n"


BANDS = [
    [(0.0, 1.0, 0.0), (0.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
    [(1.0, 0.0, 0.1), (1.0, 0.0, 0.1), (1.0, 0.0, 0.1)],
]


def test_decompose_wave_conduction_uses_band_above_valence(tmp_path):
    (tmp_path / "PROCAR").write_text(procar_text(BANDS))
    rows = decompose_wave(tmp_path, "n", 1, IDENTITY, ORIGIN)
    assert len(rows) == 3
    assert all(row[1] == pytest.approx(1.0) for row in rows)
    assert all(row[2] == pytest.approx(0.0) for row in rows)
    assert all(row[3] == pytest.approx(0.1) for row in rows)


def test_decompose_wave_valence_prefers_specific_file(tmp_path):
    (tmp_path / "PROCAR").write_text(procar_text(BANDS))
    swapped = [BANDS[1], BANDS[0]]
    (tmp_path / "PROCAR_p").write_text(procar_text(swapped))
    rows = decompose_wave(tmp_path, "p", 1, IDENTITY, ORIGIN)
    assert all(row[1] == pytest.approx(1.0) for row in rows)
    assert all(row[2] == pytest.approx(0.0) for row in rows)


def test_decompose_wave_without_procar(tmp_path):
    assert decompose_wave(tmp_path, "n", 1, IDENTITY, ORIGIN) == []


def test_decompose_wave_rejects_unknown_carrier(tmp_path):
    with pytest.raises(ValueError):
        decompose_wave(tmp_path, "x", 1, IDENTITY, ORIGIN)