import math

import pytest

from ammcr.distribution import H_BAR, K_B, bose_einstein, fermi_dirac


def test_fermi_level_is_half_occupied():
    assert fermi_dirac(0.3, 0.3, 300.0) == pytest.approx(0.5)


@pytest.mark.parametrize("offset", [0.001, 0.02, 0.1, 0.5])
def test_fermi_dirac_symmetry(offset):
    above = fermi_dirac(1.0 + offset, 1.0, 250.0)
    below = fermi_dirac(1.0 - offset, 1.0, 250.0)
    assert above + below == pytest.approx(1.0)


def test_fermi_dirac_decreases_with_energy():
    values = [fermi_dirac(e / 100, 0.0, 300.0) for e in range(-10, 11)]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_fermi_dirac_far_above_is_zero_without_overflow():
    assert fermi_dirac(100.0, 0.0, 10.0) == 0.0


def test_fermi_dirac_far_below_is_one():
    assert fermi_dirac(-100.0, 0.0, 10.0) == pytest.approx(1.0)


def test_bose_einstein_high_temperature_limit():
    omega = 1e12
    temperature = 1e5
    x = H_BAR * omega / (K_B * temperature)
    assert bose_einstein(omega, temperature) == pytest.approx(1 / x - 0.5, rel=1e-4)


def test_bose_einstein_increases_with_temperature():
    omega = 5e13
    values = [bose_einstein(omega, t) for t in (50.0, 100.0, 300.0, 600.0)]
    assert all(a < b for a, b in zip(values, values[1:]))
    assert all(v > 0 for v in values)


def test_bose_einstein_huge_energy_is_zero():
    assert bose_einstein(1e20, 1.0) == 0.0


def test_bose_einstein_zero_frequency_raises():
    with pytest.raises(ZeroDivisionError):
        bose_einstein(0.0, 300.0)


def test_bose_einstein_detailed_balance():
    omega = 3e13
    temperature = 300.0
    n = bose_einstein(omega, temperature)
    assert (n + 1) / n == pytest.approx(math.exp(H_BAR * omega / (K_B * temperature)))