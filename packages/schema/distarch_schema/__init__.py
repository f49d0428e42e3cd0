"""
distarch Schema Package

Pydantic models for the distribution metadata consumed by the SDK.

Usage:
    from distarch_schema import DistMeta

    meta = DistMeta.from_meta({"name": "Moose", "version": "2.2011"})
"""

from .distmeta_v1 import DistMeta, INSTALLER_ALIASES, Requirements

__version__ = "0.1.0"

__all__ = [
    "DistMeta",
    "INSTALLER_ALIASES",
    "Requirements",
]
