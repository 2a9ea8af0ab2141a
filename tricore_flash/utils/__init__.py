"""Utility helpers."""

from .xdg import get_xdg_config_dir


__all__ = ["get_xdg_config_dir"]
