# ammcr

Building blocks for computing electron and hole transport in semiconductors
with Rode's iterative solution of the Boltzmann transport equation. The
package reads first-principles band data (`EIGENVAL` and `PROCAR` files),
evaluates piecewise polynomial band dispersions, finds the Fermi level for a
given doping, and supplies the distribution functions and scattering
ingredients a transport calculation is built from.

It has no dependencies beyond the Python standard library (Python 3.10 or
later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `ammcr.distribution` | `fermi_dirac` and `bose_einstein` occupation functions, and the physical constants used throughout (`PI`, `E_CHARGE`, `H_BAR`, `K_B`, `EPSILON_0`, `M_E`) |
| `ammcr.dispersion` | `BandFit`, a piecewise polynomial band with `energy(k)` and `slope(k)`; `nearest_index`; the driving-force terms `df0dk` and `df0dz`; `perturbed_distribution` |
| `ammcr.lookup` | `dos_value`, linear interpolation in a density-of-states table; `admixture_value`, nearest-row lookup in an orbital table |
| `ammcr.screening` | `inverse_screening_length`, `current_density`, and the polar optical phonon terms `overlap_plus`, `overlap_minus`, `beta_plus`, `beta_minus` |
| `ammcr.eigenval` | `parse_eigenval` and `find_cbm_vbm`, returning `BandEdges` (band-edge energies and k-points) |
| `ammcr.fermi` | `CarrierBands`, `carrier_concentration` and `find_fermi`, which returns a `FermiResult` |
| `ammcr.outputs` | `output_headers` and `generate_output_files` for the `.dat` result files |
| `ammcr.procar` | `parse_procar`, giving `ProcarData` |
| `ammcr.orbitals` | `orbital_table` and `decompose_wave`, the s/p/d character of a band against distance from the band edge |

## Examples

Occupation functions:

```python
from ammcr.distribution import fermi_dirac, bose_einstein

print(fermi_dirac(0.1, 0.0, 300.0))    # state 0.1 eV above the Fermi level at 300 K
print(bose_einstein(5.0e13, 300.0))    # phonon of angular frequency 5e13 rad/s
```

Evaluating a band given by polynomial segments (coefficients from the
highest power down, segments split at `kindex`):

```python
from ammcr.dispersion import BandFit

band = BandFit(coefficients=[[0.05, 0.0, 0.0], [0.04, 0.01, 0.0]], kindex=[1.0], degree=2)
print(band.energy(0.5), band.slope(0.5))
```

Band edges from a directory holding `EIGENVAL_n` (or `EIGENVAL`):

```python
from ammcr.eigenval import find_cbm_vbm

edges = find_cbm_vbm("calc", carrier="n")
print(edges.ecbm, edges.evbm, edges.kcbm)
```

`find_cbm_vbm` raises `FileNotFoundError` when neither file is present;
`decompose_wave` instead returns an empty list when no PROCAR file is found.

Fermi level for a doping of 1e18 cm^-3, given band data on a common k grid:

```python
from ammcr.fermi import CarrierBands, find_fermi

bands = CarrierBands(k_grid=k, energy_n=e_n, energy_p=e_p, free_electron=True)
result = find_fermi(bands, doping=1e18, temperature=300.0, band_gap=1.1)
print(result.fermi_level, result.n_e, result.n_h)
```

Units are those of the transport calculation: energies in eV, wave vectors in
1/nm, temperatures in K and concentrations in cm^-3.

## What the package does not do

- It does not fit polynomial segments to sampled band data. A `BandFit` must
  be built from coefficients and segment boundaries obtained elsewhere.
- It does not compute scattering rates, solve the Boltzmann equation or
  produce mobilities, conductivities or thermopowers; it provides the pieces
  such a calculation uses. `generate_output_files` writes only the header line
  of each result file.
- It has no command-line program; everything is used from Python.