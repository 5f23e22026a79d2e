"""
Tidal Prediction Subpackage

Provides functionality for:
- NOS standard 37 tidal constituent definitions
- Station records with harmonic constants
- Tidal height synthesis from harmonic constants
- Fixed-cadence sampling of the predicted tide
- Extrema extraction (high/low water)
- Current tide state and next high/low water
"""

from tidecast.tidal_prediction.constituents import (
    CONSTITUENT_SPEEDS,
    CONSTITUENTS,
    NOS_37_CONSTITUENTS,
    Constituent,
    constituent_speed,
    normalize_constituent_name,
)
from tidecast.tidal_prediction.extremes import TideEvent, find_extrema
from tidecast.tidal_prediction.harmonic import (
    EPOCH,
    hours_since_epoch,
    predict,
    predict_heights,
)
from tidecast.tidal_prediction.sampling import Sample, sample, samples_to_frame
from tidecast.tidal_prediction.stations import Station, StationConstituent
from tidecast.tidal_prediction.tide_info import (
    FINE_STEP_MINUTES,
    TideInfo,
    TideState,
    current_info,
    height_percent,
    is_near_tide_change,
    tide_movement,
    tide_state,
)

__all__ = [
    # Constituent definitions
    'NOS_37_CONSTITUENTS',
    'CONSTITUENT_SPEEDS',
    'CONSTITUENTS',
    'Constituent',
    'constituent_speed',
    'normalize_constituent_name',
    # Stations
    'Station',
    'StationConstituent',
    # Harmonic prediction
    'EPOCH',
    'hours_since_epoch',
    'predict',
    'predict_heights',
    # Sampling
    'Sample',
    'sample',
    'samples_to_frame',
    # Extrema extraction
    'TideEvent',
    'find_extrema',
    # Tide info
    'FINE_STEP_MINUTES',
    'TideInfo',
    'TideState',
    'current_info',
    'tide_movement',
    'tide_state',
    'height_percent',
    'is_near_tide_change',
]
