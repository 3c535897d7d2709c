"""
Domain Configuration Package

Layout modes and force-simulation parameters.
"""

from .layouts import LayoutType, ForceLayoutConfig, list_layouts

__all__ = ["LayoutType", "ForceLayoutConfig", "list_layouts"]
