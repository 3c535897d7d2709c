"""
Export Adapters
"""

from .json_exporter import JsonResultExporter

__all__ = ["JsonResultExporter"]
