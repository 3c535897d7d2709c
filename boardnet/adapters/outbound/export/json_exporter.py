"""
JSON Result Exporter Adapter

Implements IResultExporter for JSON export.
"""

import json
from pathlib import Path
from typing import Any

from boardnet.application.ports import IResultExporter


class JsonResultExporter(IResultExporter):
    """
    JSON adapter implementing IResultExporter.
    """

    def export_json(self, data: Any, output_path: str) -> str:
        """Export data to JSON format, creating parent directories as needed."""
        # Convert to dict if has to_dict method
        if hasattr(data, "to_dict"):
            data = data.to_dict()

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2, default=str)

        return str(path)
