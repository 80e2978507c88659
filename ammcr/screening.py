"""Screening length, thermal current and polar optical phonon coupling terms."""

import math
from itertools import pairwise, repeat

from ammcr.dispersion import nearest_index
from ammcr.distribution import E_CHARGE, EPSILON_0, H_BAR, K_B, PI, fermi_dirac

_BETA_UNITS = 6.241509324e27
_POP_UNITS = 3.895643846e28 * 1.60217657 / 1e8


def inverse_screening_length(
    k_grid, energies, dos, volume, fermi_level, temperature, epsilon_s, free_electron=False
):
    """Inverse screening length beta (1/nm)."""
    integral = 0.0
    dos_values = repeat(None) if free_electron else dos
    for (k, k_next), (en, en_next), ds in zip(pairwise(k_grid), pairwise(energies), dos_values):
        f = fermi_dirac(en, fermi_level, temperature)
        occupancy = f * (1 - f)
        if free_electron:
            integral += (k_next - k) * (k / PI) ** 2 * occupancy
        else:
            integral += (en_next - en) * (ds * 1000 / volume) * occupancy
    beta_squared = (
        E_CHARGE ** 2 / (epsilon_s * EPSILON_0 * K_B * temperature) * integral * _BETA_UNITS
    )
    return math.sqrt(beta_squared)


def current_density(k_grid, velocity, g_th):
    """Current density (A/cm^2) driven by the thermal perturbation ``g_th``."""
    integral = sum(
        (k_next - k) * (k / PI) ** 2 * v * g
        for (k, k_next), v, g in zip(pairwise(k_grid), velocity, g_th)
    )
    return E_CHARGE / 3 * integral * 1e21


def _overlap(counter, k_other, k_grid, a_n, c_n):
    other = nearest_index(k_grid, k_other)
    k = k_grid[counter]
    index = nearest_index(k_grid, k)
    return a_n[index] * a_n[other] + (k_other ** 2 + k ** 2) / (2 * k_other * k) * c_n[index] * c_n[other]


def overlap_minus(counter, k_minus, omega, k_grid, energies, a_n, c_n):
    """Wave-function overlap for phonon emission; zero below the phonon energy."""
    if energies[counter] < H_BAR * omega:
        return 0.0
    return _overlap(counter, k_minus, k_grid, a_n, c_n)


def overlap_plus(counter, k_plus, omega, k_grid, energies, a_n, c_n):
    """Wave-function overlap for phonon absorption; zero past the top of the band."""
    if max(energies) < energies[counter] + H_BAR * omega:
        return 0.0
    return _overlap(counter, k_plus, k_grid, a_n, c_n)


def _beta(counter, k_final, omega, epsilon_s, epsilon_inf, k_grid, velocity):
    index = nearest_index(k_grid, k_final)
    return (
        E_CHARGE ** 2 * omega * k_final
        / (4 * PI * H_BAR * k_grid[counter] * velocity[index])
        * (1 / (epsilon_inf * EPSILON_0) - 1 / (epsilon_s * EPSILON_0))
        * _POP_UNITS
    )


def beta_plus(counter, k_plus, omega, epsilon_s, epsilon_inf, k_grid, velocity):
    """Polar optical phonon absorption rate prefactor (1/s)."""
    return _beta(counter, k_plus, omega, epsilon_s, epsilon_inf, k_grid, velocity)


def beta_minus(counter, k_minus, omega, epsilon_s, epsilon_inf, k_grid, energies, velocity):
    """Polar optical phonon emission rate prefactor (1/s)."""
    if energies[counter] < H_BAR * omega:
        k_minus = k_grid[counter]
    return _beta(counter, k_minus, omega, epsilon_s, epsilon_inf, k_grid, velocity)