"""
High/low water extraction from a sampled tide series.

A sample is a high (low) water when its height is strictly greater (less)
than both immediate neighbours.  Ties disqualify a sample, and the first and
last samples are never candidates, so callers wanting events near the edges
of a window should pad the window.  Timing accuracy is limited to the
sampling cadence.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

import numpy as np
import pandas as pd
from scipy.signal import argrelextrema

from .sampling import Sample

logger = logging.getLogger(__name__)


class TideEvent(NamedTuple):
    """A high or low water at a sampled instant."""

    time: pd.Timestamp
    height: float


def find_extrema(
    samples: Sequence[Sample],
    logger: logging.Logger | None = None,
) -> tuple[list[TideEvent], list[TideEvent]]:
    """
    Extract high-water and low-water events from a sampled series.

    Uses :func:`scipy.signal.argrelextrema` with ``order=1``: each interior
    sample is compared against its two immediate neighbours only.

    Parameters
    ----------
    samples : sequence of Sample
        Samples in strictly increasing time order.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    highs : list of TideEvent
        High waters in time order.
    lows : list of TideEvent
        Low waters in time order.

    Raises
    ------
    ValueError
        If sample times are not strictly increasing.
    """
    _log = logger or logging.getLogger(__name__)

    if len(samples) < 3:
        _log.debug('Fewer than 3 samples (%d); no extrema.', len(samples))
        return [], []

    times = pd.DatetimeIndex([s.time for s in samples])
    if not (times[1:] > times[:-1]).all():
        raise ValueError('Sample times must be strictly increasing.')

    heights = np.array([s.height for s in samples], dtype=float)

    hw_idx = argrelextrema(heights, np.greater, order=1)[0]
    lw_idx = argrelextrema(heights, np.less, order=1)[0]

    _log.debug(
        'Extrema extraction: %d HW, %d LW from %d samples.',
        len(hw_idx), len(lw_idx), len(samples),
    )

    highs = [TideEvent(samples[i].time, float(heights[i])) for i in hw_idx]
    lows = [TideEvent(samples[i].time, float(heights[i])) for i in lw_idx]
    return highs, lows
