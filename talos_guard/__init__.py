"""Talos Guard heuristic threat-signature scanner package."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("talos-guard")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "1.0.0-alpha"

__all__ = ["__version__"]
