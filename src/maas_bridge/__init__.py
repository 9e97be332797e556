"""MAAS bridge.

Exposes MAAS infrastructure data (machines, subnets, zones, tags, devices,
domains) through validated, cached resource handlers.
"""

from .__version__ import __version__

__all__ = ["__version__"]
