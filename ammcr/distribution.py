"""Equilibrium occupation functions and the physical constants used throughout."""

import math

PI = math.pi
E_CHARGE = 1.60217657e-19  # C
H_BAR = 6.58211899e-16  # eV s
K_B = 8.6173324e-5  # eV / K
EPSILON_0 = 8.854187817e-12  # F / m
M_E = 9.10938291e-31  # kg


def fermi_dirac(energy, fermi_level, temperature):
    """Fermi-Dirac occupation of a state at ``energy`` (eV)."""
    exponent = (energy - fermi_level) / (K_B * temperature)
    try:
        return 1.0 / (1.0 + math.exp(exponent))
    except OverflowError:
        return 0.0


def bose_einstein(omega, temperature):
    """Bose-Einstein occupation of a phonon mode of angular frequency ``omega`` (1/s)."""
    exponent = H_BAR * omega / (K_B * temperature)
    try:
        return 1.0 / math.expm1(exponent)
    except OverflowError:
        return 0.0