"""Core SDK functionality (META loading)."""

from .loader import load_distmeta_string

__all__ = ["load_distmeta_string"]
