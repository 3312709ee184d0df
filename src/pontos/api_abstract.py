"""Abstract class"""


from __future__ import annotations

import abc
import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional

import requests

from src.pontos.errors import DecodeError, TransportError
from src.pontos.models import Parameter, Sample, TimeRange, Vessel
from src.pontos.support_functions.support_functions import POOL_SIZE, make_session
from src.utils.pontos_logger import get_logger

log = get_logger("api")


class VesselDataAPI(abc.ABC):
    """Fetch and listing capabilities the pipeline depends on"""
    def __init__(
                self,
                name: str,
                timeout: float = 60.0,
                session: Optional[requests.Session] = None,
                pool_size: int = POOL_SIZE,
                ):
        self.name = name
        self.timeout = timeout
        self.session = session if session is not None else make_session(pool_size=pool_size)
        # one worker per pooled connection, independent of the CPU count
        self._executor = ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix=f"{name}-http")

    @abc.abstractmethod
    async def fetch(self, vessel_id: str, parameter: Parameter, time_range: TimeRange) -> List[Sample]:
        """Return the samples of one parameter inside `time_range`, in any order."""

    @abc.abstractmethod
    async def list_vessels(self) -> List[Vessel]:
        """Return every vessel known to the source."""

    def close(self):
        """Stop the request workers and release pooled connections."""
        self._executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    async def _get_json(self, url: str, **kwargs) -> Any:
        # requests blocks; run it on a worker so concurrent fetches overlap
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, functools.partial(self._get_json_blocking, url, **kwargs)
        )

    def _get_json_blocking(self, url: str, **kwargs) -> Any:
        try:
            r = self.session.get(url, timeout=self.timeout, **kwargs)
            r.raise_for_status()
        except requests.RequestException as e:
            log.error(f"{self.name}: GET {url} failed: {e}")
            raise TransportError(f"GET {url} failed: {e}") from e
        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"GET {url} did not return JSON") from e
