"""Stub data source and sample builders shared by the tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import numpy as np

from src.pontos.api_abstract import VesselDataAPI
from src.pontos.errors import TransportError
from src.pontos.models import Parameter, Sample, TimeRange, Vessel

DAY_START = datetime(2023, 11, 7, tzinfo=timezone.utc)


def ts(seconds: float) -> datetime:
    """Instant `seconds` after 2023-11-07 00:00 UTC."""
    return DAY_START + timedelta(seconds=seconds)


def samples(*pairs) -> List[Sample]:
    return [Sample(ts(s), np.float32(v)) for s, v in pairs]


class StubVesselAPI(VesselDataAPI):
    """In-memory source with optional per-parameter latency and failures."""

    def __init__(
                self,
                data: Optional[Dict[Parameter, List[Sample]]] = None,
                delays: Optional[Dict[Parameter, float]] = None,
                failures: Optional[Dict[Parameter, Exception]] = None,
                vessels: Optional[List[str]] = None,
                ):
        super().__init__(name="stub")
        self.data = data or {}
        self.delays = delays or {}
        self.failures = failures or {}
        self.vessels = vessels or []
        self.calls: List[tuple] = []
        self.completed: List[Parameter] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, vessel_id: str, parameter: Parameter, time_range: TimeRange) -> List[Sample]:
        self.calls.append((vessel_id, parameter, time_range))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(parameter, 0.001))
            if parameter in self.failures:
                raise self.failures[parameter]
            self.completed.append(parameter)
            return list(self.data.get(parameter, []))
        finally:
            self.in_flight -= 1

    async def list_vessels(self) -> List[Vessel]:
        if "list" in self.failures:
            raise self.failures["list"]
        return [Vessel(v) for v in self.vessels]


def failing(message: str = "connection reset") -> TransportError:
    return TransportError(message)
