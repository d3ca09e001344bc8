"""Exception types raised by the scanner."""

from __future__ import annotations


class TalosGuardError(Exception):
    """Base class for errors surfaced to the command line."""


class AcquisitionError(TalosGuardError):
    """The target could not be fetched or read."""


class ConfigError(TalosGuardError, ValueError):
    """The configuration file is missing or malformed."""
