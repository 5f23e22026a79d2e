"""
Fixed-cadence sampling of the predicted tide.

Builds an ordered series of ``(time, height)`` samples covering a closed
window ``[start, start + duration]``.
"""
from __future__ import annotations

import logging
from typing import Any, NamedTuple, Sequence

import pandas as pd

from .harmonic import predict_heights, to_utc_timestamp
from .stations import Station

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    """Predicted height (metres) at a UTC instant."""

    time: pd.Timestamp
    height: float


def sample(
    station: Station,
    start: Any,
    duration_hours: float,
    step_minutes: float = 60,
    logger: logging.Logger | None = None,
) -> list[Sample]:
    """
    Sample the predicted tide at a fixed cadence.

    Samples are taken at *start* and every *step_minutes* after it, up to
    and including ``start + duration_hours`` when the step lands on it.

    Parameters
    ----------
    station : Station
        Station to predict for.
    start : datetime-like
        First sample instant.  Naive values are interpreted as UTC.
    duration_hours : float
        Length of the window in hours.  Must be positive.
    step_minutes : float, optional
        Spacing between samples in minutes (default 60).  Must be positive.
        A step longer than the window yields only the start sample.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of Sample
        Samples in ascending time order.

    Raises
    ------
    ValueError
        If *duration_hours* or *step_minutes* is not positive.
    """
    _log = logger or logging.getLogger(__name__)

    if not duration_hours > 0:
        raise ValueError(
            f"duration_hours must be positive, got {duration_hours!r}."
        )
    if not step_minutes > 0:
        raise ValueError(
            f"step_minutes must be positive, got {step_minutes!r}."
        )

    start = to_utc_timestamp(start)
    end = start + pd.Timedelta(hours=duration_hours)
    times = pd.date_range(
        start=start, end=end, freq=pd.Timedelta(minutes=step_minutes),
    )

    _log.debug(
        'Sampling station %s: %d samples from %s (step=%s min).',
        station.id, len(times), start.isoformat(), step_minutes,
    )

    heights = predict_heights(station, times, logger=_log)
    return [Sample(t, float(h)) for t, h in zip(times, heights)]


def samples_to_frame(samples: Sequence[Sample]) -> pd.DataFrame:
    """
    Convert samples to a DataFrame with ``time`` and ``height`` columns.

    Parameters
    ----------
    samples : sequence of Sample or TideEvent
        Time-ordered samples.

    Returns
    -------
    pd.DataFrame
    """
    return pd.DataFrame(
        {
            'time': pd.DatetimeIndex([s.time for s in samples], tz='UTC'),
            'height': [float(s.height) for s in samples],
        },
        columns=['time', 'height'],
    )
