"""Errors raised while talking to the PONTOS data hub"""


class PontosError(Exception):
    """Base class for every failure the exporter reports."""


class ConfigError(PontosError, RuntimeError):
    """Missing or malformed configuration, raised before any request is sent."""


class TransportError(PontosError):
    """Network or HTTP failure of a single request (auth rejections included)."""


class DecodeError(PontosError):
    """Response body does not match the expected row schema."""
