"""
Print the current tide and the next high/low water for one station.

The station is read from a JSON file holding a single station record::

    {"id": "...", "name": "...", "latitude": ..., "longitude": ...,
     "datum": ..., "constituents": {"M2": {"amplitude": ..., "phase": ...}}}

Defaults for the forecast window, tide-state thresholds and the optional
``--series`` listing come from the tidecast configuration file.
"""
from __future__ import annotations

import argparse
import json
import sys

from tidecast.tidal_prediction import (
    Station,
    current_info,
    height_percent,
    sample,
    tide_movement,
    tide_state,
)
from tidecast.utils import Utils, setup_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.split('\n')[1])
    parser.add_argument('station_file', help='JSON file with one station record')
    parser.add_argument(
        '--now', default=None,
        help='Reference instant (ISO 8601, UTC if no offset). Default: now',
    )
    parser.add_argument(
        '--forecast-hours', type=float, default=None,
        help='Hours ahead to search for high/low water',
    )
    parser.add_argument(
        '--series', action='store_true',
        help='Also print the predicted series using the [sampling] settings',
    )
    parser.add_argument('--config', default=None, help='Path to tidecast.conf')
    return parser.parse_args(argv)


def _format_event(label, event):
    if event is None:
        return f'{label}: none in forecast window'
    return f'{label}: {event.height:.2f} m at {event.time:%Y-%m-%d %H:%M} UTC'


def main(argv=None):
    args = parse_args(argv)
    logger = setup_logger()

    utils = Utils(args.config)
    forecast_hours = args.forecast_hours
    if forecast_hours is None:
        forecast_hours = float(
            utils.read_config_section('forecast', logger)['forecast_hours']
        )
    state_params = utils.read_config_section('tide_state', logger)

    with open(args.station_file) as f:
        station = Station.from_record(json.load(f))
    logger.info('Loaded station %s (%s).', station.id, station.name)

    info = current_info(
        station, now=args.now, forecast_hours=forecast_hours, logger=logger,
    )
    movement = tide_movement(
        station, info.current.time,
        window_minutes=float(state_params['window_minutes']),
        logger=logger,
    )
    state = tide_state(movement, threshold=float(state_params['threshold']))

    print(f'{station.name} ({station.id})')
    print(
        f'Current: {info.current.height:.2f} m at '
        f'{info.current.time:%Y-%m-%d %H:%M} UTC, {state.value} '
        f'({height_percent(info):.0f}% of range)'
    )
    print(_format_event('Next high', info.next_high))
    print(_format_event('Next low', info.next_low))

    if args.series:
        sampling = utils.read_config_section('sampling', logger)
        for s in sample(
            station, info.current.time,
            float(sampling['duration_hours']),
            float(sampling['step_minutes']),
            logger=logger,
        ):
            print(f'{s.time:%Y-%m-%d %H:%M}  {s.height:7.3f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
