"""
Current tide state and upcoming high/low water for a station.

Composes the predictor, sampler and extrema detector to answer "what is the
tide doing now and what comes next".  Event detection always samples at
:data:`FINE_STEP_MINUTES` regardless of how the result is later displayed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

import pandas as pd

from .extremes import TideEvent, find_extrema
from .harmonic import predict, to_utc_timestamp
from .sampling import Sample, sample
from .stations import Station

logger = logging.getLogger(__name__)

FINE_STEP_MINUTES = 10
"""Sampling cadence (minutes) used internally for event detection."""

DEFAULT_FORECAST_HOURS = 48


class TideState(str, Enum):
    """Direction the water is moving."""

    INCOMING = 'incoming'
    OUTGOING = 'outgoing'
    STILL = 'still'


@dataclass(frozen=True)
class TideInfo:
    """Snapshot of the tide at an instant plus the events that follow it."""

    current: Sample
    next_high: TideEvent | None
    next_low: TideEvent | None
    all_highs: list[TideEvent]
    all_lows: list[TideEvent]


def current_info(
    station: Station,
    now: Any = None,
    forecast_hours: float = DEFAULT_FORECAST_HOURS,
    logger: logging.Logger | None = None,
) -> TideInfo:
    """
    Current height and next high/low water for *station*.

    Parameters
    ----------
    station : Station
        Station to predict for.
    now : datetime-like, optional
        Reference instant.  Defaults to the current UTC time.
    forecast_hours : float, optional
        How far ahead to look for events (default 48).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    TideInfo
        ``next_high``/``next_low`` are ``None`` when no such event falls
        inside the forecast window; widen *forecast_hours* to find one.

    Raises
    ------
    ValueError
        If *forecast_hours* is not positive.
    """
    _log = logger or logging.getLogger(__name__)

    now = pd.Timestamp.now(tz='UTC') if now is None else to_utc_timestamp(now)

    current = Sample(now, predict(station, now, logger=_log))
    series = sample(
        station, now, forecast_hours, FINE_STEP_MINUTES, logger=_log,
    )
    highs, lows = find_extrema(series, logger=_log)

    next_high = _first_after(highs, now)
    next_low = _first_after(lows, now)

    _log.info(
        'Station %s at %s: %.3f m; next HW %s, next LW %s.',
        station.id, now.isoformat(), current.height,
        next_high.time.isoformat() if next_high else 'none',
        next_low.time.isoformat() if next_low else 'none',
    )

    return TideInfo(
        current=current,
        next_high=next_high,
        next_low=next_low,
        all_highs=highs,
        all_lows=lows,
    )


def _first_after(
    events: Sequence[TideEvent], instant: pd.Timestamp,
) -> TideEvent | None:
    return next((e for e in events if e.time > instant), None)


def tide_movement(
    station: Station,
    instant: Any,
    window_minutes: float = 60,
    logger: logging.Logger | None = None,
) -> float:
    """
    Height change (metres) from *instant* to *window_minutes* later.

    Positive values mean the water is rising.
    """
    start = to_utc_timestamp(instant)
    end = start + pd.Timedelta(minutes=window_minutes)
    return (
        predict(station, end, logger=logger)
        - predict(station, start, logger=logger)
    )


def tide_state(movement: float, threshold: float = 0.01) -> TideState:
    """Classify a height change as incoming, outgoing or still water."""
    if movement > threshold:
        return TideState.INCOMING
    if movement < -threshold:
        return TideState.OUTGOING
    return TideState.STILL


def height_percent(info: TideInfo) -> float:
    """
    Position of the current height between the next low and next high.

    Returns 0 at low water and 100 at high water, clamped to that range.
    Falls back to 50 when either event is missing or both share a height.
    """
    if info.next_high is None or info.next_low is None:
        return 50.0
    span = info.next_high.height - info.next_low.height
    if span == 0:
        return 50.0
    percent = 100.0 * (info.current.height - info.next_low.height) / span
    return min(100.0, max(0.0, percent))


def is_near_tide_change(info: TideInfo, window_minutes: float = 60) -> bool:
    """
    True when the next high or low water is within *window_minutes*.

    Both the next high and the next low must be known; otherwise the tide
    is not considered near a change.
    """
    if info.next_high is None or info.next_low is None:
        return False
    window = pd.Timedelta(minutes=window_minutes)
    return any(
        abs(event.time - info.current.time) < window
        for event in (info.next_high, info.next_low)
    )
