"""
Tidal constituent reference table.

Holds the 37 NOS standard tidal constituents and their angular speeds in
degrees per hour.  The table is built once at import time and exposed as
read-only mappings, so it can be shared by any number of concurrent readers.

Constituent speeds are from Schureman (1958) Special Publication No. 98.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# -- Semidiurnal (period ~ 12 h) --
_SEMIDIURNAL = (
    'M2', 'S2', 'N2', 'K2', '2N2', 'MU2', 'NU2', 'L2', 'T2', 'R2', 'LDA2',
)

# -- Diurnal (period ~ 24 h) --
_DIURNAL = (
    'K1', 'O1', 'P1', 'Q1', 'J1', 'M1', 'OO1', '2Q1', 'RHO1',
)

# -- Long-period (period > 1 day) --
_LONG_PERIOD = (
    'MF', 'MM', 'SSA', 'SA', 'MSM', 'MSF',
)

# -- Shallow-water / overtides --
_SHALLOW_WATER = (
    'M4', 'M6', 'M8', 'MS4', 'MN4', 'MK3', 'S4', 'S6', '2MK3', '2SM2', 'MO3',
)

NOS_37_CONSTITUENTS: tuple[str, ...] = (
    _SEMIDIURNAL + _DIURNAL + _LONG_PERIOD + _SHALLOW_WATER
)
"""The 37 NOS standard tidal constituents, grouped by type."""

CONSTITUENT_SPEEDS: Mapping[str, float] = MappingProxyType({
    # Semidiurnal
    'M2':   28.9841042,
    'S2':   30.0000000,
    'N2':   28.4397295,
    'K2':   30.0821373,
    '2N2':  27.8953548,
    'MU2':  27.9682084,
    'NU2':  28.5125831,
    'L2':   29.5284789,
    'T2':   29.9589333,
    'R2':   30.0410667,
    'LDA2': 29.4556253,
    # Diurnal
    'K1':   15.0410686,
    'O1':   13.9430356,
    'P1':   14.9589314,
    'Q1':   13.3986609,
    'J1':   15.5854433,
    'M1':   14.4966939,
    'OO1':  16.1391017,
    '2Q1':  12.8542862,
    'RHO1': 13.4715145,
    # Long-period
    'MF':    1.0980331,
    'MM':    0.5443747,
    'SSA':   0.0821373,
    'SA':    0.0410686,
    'MSM':   0.4715211,
    'MSF':   1.0158958,
    # Shallow-water / overtides
    'M4':   57.9682084,
    'M6':   86.9523127,
    'M8':  115.9364169,
    'MS4':  58.9841042,
    'MN4':  57.4238337,
    'MK3':  44.0251729,
    'S4':   60.0000000,
    'S6':   90.0000000,
    '2MK3': 42.9271398,
    '2SM2': 31.0158958,
    'MO3':  42.9271398,
})
"""Angular speeds (degrees/hour) keyed by constituent name."""

# Alternate spellings seen in station data (e.g. the CO-OPS harcon product).
NAME_ALIASES: Mapping[str, str] = MappingProxyType({
    'LAM2': 'LDA2',
    'RHO': 'RHO1',
})


@dataclass(frozen=True)
class Constituent:
    """A named tidal constituent and its angular speed."""

    name: str
    speed: float
    kind: str

    @property
    def period_hours(self) -> float:
        """Period of one full cycle in hours."""
        return 360.0 / self.speed


def _build_table() -> Mapping[str, Constituent]:
    groups = (
        ('semidiurnal', _SEMIDIURNAL),
        ('diurnal', _DIURNAL),
        ('long_period', _LONG_PERIOD),
        ('shallow_water', _SHALLOW_WATER),
    )
    table = {}
    for kind, names in groups:
        for name in names:
            table[name] = Constituent(name, CONSTITUENT_SPEEDS[name], kind)
    return MappingProxyType(table)


CONSTITUENTS: Mapping[str, Constituent] = _build_table()
"""Read-only table of :class:`Constituent` records keyed by name."""


def normalize_constituent_name(name: str) -> str:
    """
    Normalize a constituent name to the table's convention.

    Parameters
    ----------
    name : str
        Constituent name as found in station data.

    Returns
    -------
    str
        Stripped, upper-cased name with known aliases resolved.  Names that
        are not recognized are returned stripped and upper-cased.
    """
    cleaned = name.strip().upper()
    return NAME_ALIASES.get(cleaned, cleaned)


def constituent_speed(name: str) -> float | None:
    """
    Return the speed (degrees/hour) for *name*, or ``None`` if unknown.

    The lookup is exact; use :func:`normalize_constituent_name` first when
    the name may be spelled differently.
    """
    return CONSTITUENT_SPEEDS.get(name)
