"""
Station records consumed by the prediction core.

A :class:`Station` carries its identity, location, mean-level datum and the
per-station amplitude/phase of each harmonic constituent.  Stations are
immutable once built; the core only ever reads them.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .constituents import CONSTITUENT_SPEEDS, normalize_constituent_name


@dataclass(frozen=True)
class StationConstituent:
    """Amplitude (metres) and phase lag (degrees) of one constituent."""

    amplitude: float
    phase: float


@dataclass(frozen=True)
class Station:
    """
    A tide station with its harmonic constants.

    Attributes
    ----------
    id : str
        Station identifier.
    name : str
        Human-readable station name.
    latitude, longitude : float
        Location in decimal degrees.
    constituents : Mapping[str, StationConstituent]
        Harmonic constants keyed by constituent name.  Names the constituent
        table does not know are kept as-is.
    datum : float
        Mean-level offset in metres added to every prediction.
    """

    id: str
    name: str
    latitude: float
    longitude: float
    constituents: Mapping[str, StationConstituent] = field(
        default_factory=dict,
    )
    datum: float = 0.0

    def __post_init__(self):
        object.__setattr__(
            self, 'constituents', MappingProxyType(dict(self.constituents)),
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Station:
        """
        Build a station from a plain record.

        Parameters
        ----------
        record : Mapping
            ``{"id", "name", "latitude", "longitude", "datum"?,
            "constituents": {name: {"amplitude", "phase"}}}``.  A missing
            or ``None`` datum defaults to 0.  Constituent names are
            normalized (case, whitespace, aliases such as ``LAM2``) when
            they resolve to a known constituent.

        Returns
        -------
        Station

        Raises
        ------
        ValueError
            If a required field is missing, a value is not numeric, or two
            constituent names resolve to the same constituent.
        """
        missing = [
            key for key in ('id', 'name', 'latitude', 'longitude')
            if key not in record
        ]
        if missing:
            raise ValueError(
                f"Station record is missing required fields: {missing}."
            )

        raw = record.get('constituents') or {}
        if not isinstance(raw, Mapping):
            raise ValueError(
                f"Station '{record['id']}': constituents must be a mapping, "
                f"got {type(raw).__name__}."
            )

        constituents = {}
        for name, values in raw.items():
            key = _canonical_name(name)
            if key in constituents:
                raise ValueError(
                    f"Station '{record['id']}': constituent '{name}' "
                    f"duplicates '{key}'."
                )
            try:
                constituents[key] = StationConstituent(
                    amplitude=_as_float(values['amplitude']),
                    phase=_as_float(values['phase']),
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(
                    f"Invalid constituent '{name}' in station "
                    f"'{record['id']}': {exc!r}"
                ) from exc

        datum = record.get('datum')
        try:
            return cls(
                id=str(record['id']),
                name=str(record['name']),
                latitude=_as_float(record['latitude']),
                longitude=_as_float(record['longitude']),
                constituents=constituents,
                datum=0.0 if datum is None else _as_float(datum),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid station record '{record['id']}': {exc}"
            ) from exc


def _canonical_name(name: str) -> str:
    # Names the table does not know are kept exactly as given.
    normalized = normalize_constituent_name(str(name))
    return normalized if normalized in CONSTITUENT_SPEEDS else name


def _as_float(value: Any) -> float:
    result = float(value)
    if math.isnan(result):
        raise ValueError(f"value {value!r} is not a number")
    return result
