"""Result files and their column headers."""

from pathlib import Path

_MOBILITY_COLUMNS = (
    "Mobility(cm^2/V-s)    {rta}          Mobility_ii      Mobility_po     Mobility_de"
    "     Mobility_pe     Mobility_dis    Mobility_to     Mobility_alloy  Mobility_iv"
    "   Mobility_neutral \n"
)
_CONDUCTIVITY_COLUMNS = "Conductivity(S/cm)(Rode)  Conductivity(S/cm)(RTA)\n"
_THERMOPOWER_COLUMNS = "Thermopower(uV/K)\n"
_HALL_FACTOR_COLUMNS = "Hall_factor(Rode)  Hall_factor(RTA)\n"

_TEMPERATURE_LABELS = {
    "mobility": "#Temperature(K)  ",
    "conductivity": "# Temperature(K)      ",
    "thermopower": "# Temperature(K)     ",
    "hall_factor": "# Temperature(K)      ",
}
_DOPING_LABELS = {
    "mobility": "#Doping(cm^-3)   ",
    "conductivity": "# Doping(cm^-3)       ",
    "thermopower": "# Doping(cm^-3)      ",
    "hall_factor": "# Doping(cm^-3)      ",
}


def output_headers(variation, ispin, hall=False):
    """Map each result file name to its header line.

    ``variation`` 0 tabulates against temperature, anything else against doping;
    ``ispin`` is 1 for unpolarised and 2 for spin-polarised results; ``hall``
    adds the Hall mobility files.
    """
    if ispin not in (1, 2):
        raise ValueError("ispin must be 1 or 2")
    by_temperature = variation == 0
    labels = _TEMPERATURE_LABELS if by_temperature else _DOPING_LABELS

    def mobility(rta="Mobility_rta"):
        return labels["mobility"] + _MOBILITY_COLUMNS.format(rta=rta)

    conductivity = labels["conductivity"] + _CONDUCTIVITY_COLUMNS
    thermopower = labels["thermopower"] + _THERMOPOWER_COLUMNS
    hall_factor = labels["hall_factor"] + _HALL_FACTOR_COLUMNS

    headers = {}
    if ispin == 1:
        headers["mobility.dat"] = mobility()
        headers["conductivity.dat"] = conductivity
        headers["thermopower.dat"] = thermopower
        if hall:
            rta = "Mobility_hall_rta" if by_temperature else "Mobility_rta"
            headers["mobility_hall.dat"] = mobility(rta)
            headers["conductivity_hall.dat"] = conductivity
            headers["hall_factor.dat"] = hall_factor
        return headers

    for spin in ("up", "down"):
        headers[f"mobility_{spin}_spin.dat"] = mobility()
        headers[f"conductivity_{spin}_spin.dat"] = conductivity
        headers[f"thermopower_{spin}_spin.dat"] = thermopower
    if by_temperature:
        headers["mobility_hall_up_spin.dat"] = mobility()
    if hall:
        for spin in ("up", "down"):
            headers[f"mobility_hall_{spin}_spin.dat"] = mobility()
            headers[f"conductivity_hall_{spin}_spin.dat"] = conductivity
            headers[f"hall_factor_{spin}_spin.dat"] = hall_factor
    return headers


def generate_output_files(directory, variation, ispin, hall=False):
    """Create the result files in ``directory``, each holding only its header.

    Returns the paths written, sorted by name.
    """
    directory = Path(directory)
    written = []
    for name, header in sorted(output_headers(variation, ispin, hall).items()):
        path = directory / name
        path.write_text(header)
        written.append(path)
    return written