"""
Day retrieval for one vessel.

Every parameter stream of the day is requested at once and awaited jointly;
a single failed request fails the whole batch and nothing partial is returned.
Longitude and latitude are paired into positions by an ordered merge on exact
timestamps.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import List, Sequence, Union

from src.pontos.api_abstract import VesselDataAPI
from src.pontos.models import (
    NON_POSITIONAL_PARAMETERS,
    POSITIONAL_PARAMETERS,
    Parameter,
    ParameterStream,
    Position,
    Sample,
)
from src.pontos.support_functions.support_functions import day_window
from src.utils.pontos_logger import get_logger

log = get_logger("pipeline")


async def fetch_stream(
                    api: VesselDataAPI,
                    vessel_id: str,
                    day: Union[str, date],
                    parameter: Parameter,
                    ) -> ParameterStream:
    """Fetch one parameter for the day, sorted by time (stable for equal instants)."""
    log.debug(f"Fetching {parameter.short_name} for {vessel_id} on {day}")
    samples = await api.fetch(vessel_id, parameter, day_window(day))
    samples = sorted(samples, key=lambda s: s.time)
    log.debug(f"{parameter.short_name}: {len(samples)} samples")
    return parameter, samples


async def fetch_streams(
                    api: VesselDataAPI,
                    vessel_id: str,
                    day: Union[str, date],
                    parameters: Sequence[Parameter],
                    ) -> List[ParameterStream]:
    """Fan out one fetch per parameter and join; results follow `parameters` order."""
    return list(await asyncio.gather(
        *(fetch_stream(api, vessel_id, day, p) for p in parameters)
    ))


async def fetch_non_positional_streams(
                    api: VesselDataAPI,
                    vessel_id: str,
                    day: Union[str, date],
                    ) -> List[ParameterStream]:
    """Every parameter except longitude/latitude; streams without samples are reported and left out."""
    streams = await fetch_streams(api, vessel_id, day, NON_POSITIONAL_PARAMETERS)

    non_empty = []
    for parameter, samples in streams:
        if samples:
            non_empty.append((parameter, samples))
        else:
            log.info(f"{parameter.short_name} was empty!")
    return non_empty


async def fetch_position_stream(
                    api: VesselDataAPI,
                    vessel_id: str,
                    day: Union[str, date],
                    ) -> List[Position]:
    (_, longitude), (_, latitude) = await fetch_streams(
        api, vessel_id, day, POSITIONAL_PARAMETERS
    )
    positions = pair_longitude_latitude(longitude, latitude)
    log.debug(f"Paired {len(positions)} positions from {len(longitude)} longitudes "
              f"and {len(latitude)} latitudes")
    return positions


def pair_longitude_latitude(longitude: Sequence[Sample], latitude: Sequence[Sample]) -> List[Position]:
    """
    Merge two time-sorted streams into positions on equal timestamps.

    Both inputs must already be ascending by time. A sample without a partner at
    the same instant is dropped, as is whatever remains of the longer stream.
    Repeated instants pair off one-to-one in arrival order.
    """
    positions: List[Position] = []
    i = j = 0
    while i < len(longitude) and j < len(latitude):
        lng, lat = longitude[i], latitude[j]
        if lng.time < lat.time:
            i += 1
        elif lng.time > lat.time:
            j += 1
        else:
            positions.append(Position(lng.time, lng.value, lat.value))
            i += 1
            j += 1
    return positions
