"""
Tidal height synthesis from harmonic constants.

Evaluates the harmonic prediction formula::

    h(t) = datum + sum{ A * cos(w*t - phi) }

where *t* is the number of hours elapsed since the reference epoch
2000-01-01T00:00:00 UTC, *w* is the constituent speed from the constituent
table and *A*, *phi* are the station's amplitude and phase lag.  No nodal
corrections or equilibrium arguments are applied; station phases are taken
to be referenced to the epoch directly.

Two entry points are provided:

* :func:`predict` — height at a single instant.
* :func:`predict_heights` — heights at many instants at once.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from .constituents import constituent_speed
from .stations import Station

logger = logging.getLogger(__name__)

EPOCH = pd.Timestamp('2000-01-01T00:00:00', tz='UTC')
"""Reference instant from which elapsed hours are measured."""

_ONE_HOUR = pd.Timedelta(hours=1)


def to_utc_timestamp(instant: Any) -> pd.Timestamp:
    """Coerce *instant* to a tz-aware UTC timestamp (naive means UTC)."""
    ts = pd.Timestamp(instant)
    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def to_utc_index(times: Any) -> pd.DatetimeIndex:
    """Coerce a sequence of instants to a UTC :class:`pd.DatetimeIndex`."""
    index = pd.DatetimeIndex(times)
    if index.tz is None:
        return index.tz_localize('UTC')
    return index.tz_convert('UTC')


def hours_since_epoch(times: Any) -> np.ndarray:
    """
    Elapsed fractional hours between :data:`EPOCH` and each of *times*.

    Parameters
    ----------
    times : sequence of datetime-like
        Instants to convert.  Naive values are interpreted as UTC.

    Returns
    -------
    np.ndarray
        Float hours; negative for instants before the epoch.
    """
    elapsed = to_utc_index(times).as_unit('ns') - EPOCH
    return np.asarray(elapsed / _ONE_HOUR, dtype=float)


def predict_heights(
    station: Station,
    times: Any,
    logger: logging.Logger | None = None,
) -> np.ndarray:
    """
    Predict water levels for *station* at each of *times*.

    Constituents whose names are not in the constituent table are skipped
    (they contribute nothing) so that station data may carry constituents
    this predictor does not know about yet.

    Parameters
    ----------
    station : Station
        Station holding datum and harmonic constants.
    times : sequence of datetime-like
        Prediction instants.  Naive values are interpreted as UTC.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    np.ndarray
        Predicted heights in metres, one per instant.
    """
    _log = logger or logging.getLogger(__name__)

    hours = hours_since_epoch(times)
    heights = np.full(hours.shape, float(station.datum))

    skipped = []
    for name, constituent in station.constituents.items():
        speed = constituent_speed(name)
        if speed is None:
            skipped.append(name)
            continue
        heights += constituent.amplitude * np.cos(
            np.radians(speed) * hours - np.radians(constituent.phase)
        )

    if skipped:
        _log.warning(
            'Station %s: skipped unknown constituents %s.',
            station.id, ', '.join(skipped),
        )
    return heights


def predict(
    station: Station,
    instant: Any,
    logger: logging.Logger | None = None,
) -> float:
    """
    Predict the water level for *station* at a single instant.

    Parameters
    ----------
    station : Station
        Station holding datum and harmonic constants.
    instant : datetime-like
        Prediction instant.  Naive values are interpreted as UTC.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    float
        Predicted height in metres.
    """
    return float(predict_heights(station, [instant], logger=logger)[0])
