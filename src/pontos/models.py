"""Record types for vessel telemetry."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

import numpy as np

from src.pontos.errors import DecodeError


class Parameter(enum.Enum):
    """Measured quantities available on the data hub."""
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    SPEED = "speed"
    STEERING_ORDER = "steering_order"
    STEERING_ANGLE = "steering_angle"
    HEADING = "heading"
    COURSE = "course"
    FUEL_CONSUMPTION = "fuel_consumption"
    RUDDER_ORDER = "rudder_order"
    RUDDER_ANGLE = "rudder_angle"

    @property
    def wire_id(self) -> str:
        """Identifier used in the `parameter_id` column of the data hub."""
        return _PARAMETER_NAMES[self][0]

    @property
    def short_name(self) -> str:
        """Name used for output files and log messages."""
        return _PARAMETER_NAMES[self][1]

    @classmethod
    def from_wire_id(cls, wire_id: str) -> "Parameter":
        try:
            return _BY_WIRE_ID[wire_id]
        except KeyError:
            raise DecodeError(f"Unknown parameter_id {wire_id!r}") from None


# (wire identifier, short name)
_PARAMETER_NAMES = {
    Parameter.LATITUDE: ("positioningsystem_latitude_deg_1", "latitude"),
    Parameter.LONGITUDE: ("positioningsystem_longitude_deg_1", "longitude"),
    Parameter.SPEED: ("positioningsystem_sog_kn_1", "sog"),
    Parameter.STEERING_ORDER: ("steering_order_deg_1", "steering_order"),
    Parameter.STEERING_ANGLE: ("steering_angle_deg_1", "steering_angle"),
    Parameter.HEADING: ("positioningsystem_heading_deg_1", "heading"),
    Parameter.COURSE: ("positioningsystem_cog_deg_1", "cog"),
    Parameter.FUEL_CONSUMPTION: ("enginemain_fuelcons_lph_1", "enginemain_fuelcons"),
    Parameter.RUDDER_ORDER: ("rudder_order_deg_1", "rudder_order"),
    Parameter.RUDDER_ANGLE: ("rudder_angle_deg_1", "rudder_angle"),
}
_missing = set(Parameter) - set(_PARAMETER_NAMES)
if _missing:
    raise TypeError(f"Parameters without wire id and short name: {sorted(p.name for p in _missing)}")

_BY_WIRE_ID = {wire: p for p, (wire, _) in _PARAMETER_NAMES.items()}

POSITIONAL_PARAMETERS = (Parameter.LONGITUDE, Parameter.LATITUDE)

NON_POSITIONAL_PARAMETERS = (
    Parameter.SPEED,
    Parameter.STEERING_ORDER,
    Parameter.STEERING_ANGLE,
    Parameter.HEADING,
    Parameter.COURSE,
    Parameter.FUEL_CONSUMPTION,
    Parameter.RUDDER_ORDER,
    Parameter.RUDDER_ANGLE,
)


@dataclass(frozen=True)
class Sample:
    """One timestamped reading of a single parameter."""
    time: datetime
    value: np.float32


@dataclass(frozen=True)
class Position:
    """Longitude and latitude recorded at the same instant."""
    time: datetime
    longitude: np.float32
    latitude: np.float32


@dataclass(frozen=True)
class Vessel:
    vessel_id: str

    def __str__(self) -> str:
        return self.vessel_id


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval [start, end)."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Empty time range: {self.start} -> {self.end}")

    def __contains__(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


ParameterStream = Tuple[Parameter, List[Sample]]
