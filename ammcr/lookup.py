"""Table lookups for density of states and orbital admixture coefficients."""

from ammcr.dispersion import nearest_index


def dos_value(table, energy):
    """Density of states at ``energy``, linearly interpolated from (energy, dos) rows.

    Below the first row the DOS is taken to grow linearly from zero at zero energy.
    """
    energies = [row[0] for row in table]
    values = [row[1] for row in table]
    index = nearest_index(energies, energy)
    if energies[index] > energy:
        earlier, after = index - 1, index
    else:
        earlier, after = index, index + 1
    if after >= len(energies):
        raise ValueError(f"energy {energy} lies beyond the DOS table")
    if earlier == -1:
        slope = values[after] / energies[after]
        return slope * energy
    slope = (values[after] - values[earlier]) / (energies[after] - energies[earlier])
    return slope * (energy - energies[earlier]) + values[earlier]


def admixture_value(table, k, column):
    """Entry of 1-based ``column`` in the row whose first entry is nearest ``k``."""
    if column < 1:
        raise ValueError("column numbers start at 1")
    row = table[nearest_index([r[0] for r in table], k)]
    return row[column - 1]