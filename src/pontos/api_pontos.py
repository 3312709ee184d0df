"""PostgREST client for the PONTOS data hub."""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
import pandas as pd
import requests

from src.pontos.api_abstract import VesselDataAPI
from src.pontos.errors import DecodeError
from src.pontos.models import Parameter, Sample, TimeRange, Vessel
from src.pontos.support_functions.support_functions import isoformat_utc
from src.utils.config import Config, load_config
from src.utils.pontos_logger import get_logger

log = get_logger("api")


class PontosAPI(VesselDataAPI):
    """
    Vessel telemetry from https://pontos.ri.se/api.
    - `vessel_data` rows: time, parameter_id, value (value is a decimal string)
    - `vessel_ids` rows: vessel_id
    Every request carries the bearer token; the token is read once, before any request.
    """
    DATA_TABLE = "vessel_data"
    VESSELS_TABLE = "vessel_ids"
    SELECT = "time,parameter_id,value"

    def __init__(
                    self,
                    config: Optional[Config] = None,
                    session: Optional[requests.Session] = None,
                ):
        config = config if config is not None else load_config()
        super().__init__(name="pontos", timeout=config.request_timeout, session=session)
        self.base_url = config.pontos_url.rstrip("/")
        self.session.headers.update(config.auth_header)

    # --------------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------------
    async def fetch(self, vessel_id: str, parameter: Parameter, time_range: TimeRange) -> List[Sample]:
        rows = await self._get_json(
            f"{self.base_url}/{self.DATA_TABLE}",
            params=self.query_params(vessel_id, parameter, time_range),
        )
        samples = self.decode_samples(rows, parameter)
        inside = [s for s in samples if s.time in time_range]
        if len(inside) != len(samples):
            log.warning(f"{parameter.short_name}: dropped {len(samples) - len(inside)} "
                        f"samples outside {time_range.start} -> {time_range.end}")
        return inside

    async def list_vessels(self) -> List[Vessel]:
        rows = await self._get_json(f"{self.base_url}/{self.VESSELS_TABLE}")
        return self.decode_vessels(rows)

    # --------------------------------------------------------------------
    # Query building & decoding
    # --------------------------------------------------------------------
    @classmethod
    def query_params(cls, vessel_id: str, parameter: Parameter, time_range: TimeRange) -> list:
        """PostgREST filters; `time` appears twice so this is a list of pairs."""
        return [
            ("vessel_id", f"eq.{vessel_id}"),
            ("parameter_id", f"eq.{parameter.wire_id}"),
            ("time", f"gte.{isoformat_utc(time_range.start)}"),
            ("time", f"lt.{isoformat_utc(time_range.end)}"),
            ("select", cls.SELECT),
        ]

    @staticmethod
    def decode_samples(rows: Any, parameter: Parameter) -> List[Sample]:
        """Turn PostgREST rows into samples, in the order received."""
        _require_row_list(rows, "vessel_data")
        if not rows:
            return []

        df = pd.DataFrame(rows)
        missing = {"time", "value"} - set(df.columns)
        if missing:
            raise DecodeError(f"vessel_data rows lack {sorted(missing)}")

        if "parameter_id" in df.columns:
            received = {Parameter.from_wire_id(w) for w in df["parameter_id"].astype(str).unique()}
            if received != {parameter}:
                raise DecodeError(f"Asked for {parameter.wire_id}, got rows for "
                                  f"{sorted(p.wire_id for p in received)}")

        try:
            times = pd.to_datetime(df["time"], utc=True, format="ISO8601")
        except (ValueError, TypeError) as e:
            raise DecodeError(f"Malformed {parameter.wire_id} rows: {e}") from e
        if times.isna().any():
            raise DecodeError(f"Null time in {parameter.wire_id} rows")
        values = np.array([_parse_value(row.get("value"), parameter) for row in rows], dtype=np.float32)

        return [Sample(t.to_pydatetime(), v) for t, v in zip(times, values)]

    @staticmethod
    def decode_vessels(rows: Any) -> List[Vessel]:
        _require_row_list(rows, "vessel_ids")
        try:
            return [Vessel(vessel_id=str(row["vessel_id"])) for row in rows]
        except KeyError as e:
            raise DecodeError("vessel_ids rows lack vessel_id") from e


def _require_row_list(rows: Any, table: str):
    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        raise DecodeError(f"{table}: expected a JSON array of objects, got {type(rows).__name__}")


def _parse_value(raw: Any, parameter: Parameter) -> float:
    # numeric columns arrive as decimal text, "NaN" and "Infinity" included
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise DecodeError(f"{parameter.wire_id}: value {raw!r} is not a number")
    try:
        return float(raw)
    except ValueError as e:
        raise DecodeError(f"{parameter.wire_id}: value {raw!r} is not a number") from e
