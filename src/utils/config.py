"""Config for whole project"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.pontos.errors import ConfigError
from src.utils.pontos_logger import pontosLogger


# -----------------------------------------------------------------------------
# Load .env from project root
# -----------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent.parent
env_path = ROOT / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_PONTOS_URL = "https://pontos.ri.se/api"


# -----------------------------------------------------------------------------
# Helpers for parsing & validation
# -----------------------------------------------------------------------------
def _fail(msg: str) -> ConfigError:
    pontosLogger.error(msg)
    return ConfigError(msg)

def _clean(raw: str) -> str:
    return raw.strip().strip("'").strip('"')

def _get_str(name: str, default: Optional[str] = None) -> str:
    raw = os.getenv(name)
    if raw is None or _clean(raw) == "":
        if default is None:
            raise _fail(f"Missing required env var: {name}")
        return default
    return _clean(raw)

def _get_float(name: str, default: Optional[float] = None) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        if default is None:
            raise _fail(f"Missing required float env var: {name}")
        return default
    try:
        return float(_clean(raw))
    except ValueError as e:
        raise _fail(f"Invalid float for {name}: {raw!r}") from e

def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    s = _clean(raw).lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise _fail(f"Invalid boolean for {name}: {raw!r}")

def _log_level_to_std(*names: str) -> str:
    # Accept things like DEBUG, Info, "warning", etc.; the first name that is set wins
    lvl = "INFO"
    for name in reversed(names):
        lvl = _get_str(name, lvl)
    lvl = lvl.upper()
    valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
    if lvl not in valid:
        raise _fail(f"Invalid LOG_LEVEL {lvl!r}. Choose one of {sorted(valid)}.")
    return lvl

# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Config:
    """Config for whole project"""
    # System
    log_level: str

    # PONTOS data hub
    pontos_token: str = field(repr=False)
    pontos_url: str = DEFAULT_PONTOS_URL
    request_timeout: float = 60.0

    # Export
    output_folder: str = "."
    nest_output: bool = True

    @property
    def auth_header(self) -> dict:
        """Authorization header for PostgREST."""
        return {"Authorization": f"Bearer {self.pontos_token}"}

def load_config() -> Config:
    """Load config from the environment; fails before any request when the token is missing."""
    log_level = _log_level_to_std("PONTOS_LOG_LEVEL", "LOG_LEVEL")

    pontos_token = _get_str("PONTOS_TOKEN")
    pontos_url = _get_str("PONTOS_URL", DEFAULT_PONTOS_URL).rstrip("/")
    request_timeout = _get_float("PONTOS_TIMEOUT", 60.0)
    if request_timeout <= 0:
        raise _fail(f"PONTOS_TIMEOUT must be positive, got {request_timeout}")

    output_folder = _get_str("PONTOS_OUTPUT_FOLDER", ".")
    nest_output = _get_bool("PONTOS_NEST_OUTPUT", True)

    config = Config(
        log_level=log_level,
        pontos_token=pontos_token,
        pontos_url=pontos_url,
        request_timeout=request_timeout,
        output_folder=output_folder,
        nest_output=nest_output,
    )

    pontosLogger.debug("LOG_LEVEL: " + config.log_level)
    pontosLogger.debug("PONTOS_URL: " + config.pontos_url)
    pontosLogger.debug("Request timeout (s): " + str(config.request_timeout))
    pontosLogger.debug("Output folder: " + config.output_folder + (" (nested)" if config.nest_output else ""))
    return config
