"""Write a vessel's day to CSV files."""

from __future__ import annotations

import asyncio
import os
from datetime import date
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from src.pontos.api_abstract import VesselDataAPI
from src.pontos.models import Position, Sample, Vessel
from src.pontos.pipeline import fetch_non_positional_streams, fetch_position_stream
from src.pontos.support_functions.support_functions import CSV_TIME_FORMAT, to_iso
from src.utils.pontos_logger import get_logger

log = get_logger("export")

POSITION_NAME = "position"


def samples_to_frame(samples: Sequence[Sample]) -> pd.DataFrame:
    return pd.DataFrame({
        "time": pd.to_datetime([s.time for s in samples], utc=True),
        "value": np.array([s.value for s in samples], dtype=np.float32),
    })


def positions_to_frame(positions: Sequence[Position]) -> pd.DataFrame:
    return pd.DataFrame({
        "time": pd.to_datetime([p.time for p in positions], utc=True),
        "longitude": np.array([p.longitude for p in positions], dtype=np.float32),
        "latitude": np.array([p.latitude for p in positions], dtype=np.float32),
    })


def output_csv(frame: pd.DataFrame, folder: Union[str, Path], name: str, day: Union[str, date]) -> Path:
    """Write `<name>_<YYYY-MM-DD>.csv` into `folder`."""
    path = Path(folder) / f"{name}_{to_iso(day)}.csv"
    frame.to_csv(path, index=False, date_format=CSV_TIME_FORMAT)
    log.debug(f"Wrote {len(frame)} rows to {path}")
    return path


def day_folder(output_folder: Union[str, Path], vessel_id: str, day: Union[str, date], nest: bool = True) -> Path:
    folder = Path(output_folder)
    if nest:
        folder = folder / f"{vessel_id}_{to_iso(day)}"
    os.makedirs(folder, exist_ok=True)
    return folder


async def day_to_csv(
                    api: VesselDataAPI,
                    vessel_id: str,
                    day: Union[str, date],
                    output_folder: Union[str, Path] = ".",
                    nest: bool = True,
                    ) -> List[Path]:
    """
    Save all available data of a vessel for one day in separate CSV files.
    Positions always get a file (header only when nothing paired); other
    parameters only when they recorded something.
    """
    positions, streams = await asyncio.gather(
        fetch_position_stream(api, vessel_id, day),
        fetch_non_positional_streams(api, vessel_id, day),
    )

    folder = day_folder(output_folder, vessel_id, day, nest)
    written = [output_csv(positions_to_frame(positions), folder, POSITION_NAME, day)]
    for parameter, samples in streams:
        written.append(output_csv(samples_to_frame(samples), folder, parameter.short_name, day))

    log.info(f"{vessel_id} {to_iso(day)}: {len(written)} files in {folder}")
    return written


async def list_vessels(api: VesselDataAPI) -> List[Vessel]:
    """Print the vessel ids available on the data hub, one per line."""
    vessels = await api.list_vessels()
    for vessel in vessels:
        print(vessel)
    return vessels
