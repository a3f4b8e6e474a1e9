"""JSON export for classification results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taste_analyzer.models.core import ClassificationResult


def result_to_json(result: ClassificationResult, indent: int | None = 2) -> str:
    """Serialize a classification result to JSON.

    Args:
        result: Result to serialize.
        indent: JSON indentation (None for compact output).

    Returns:
        JSON text.
    """
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def export_result(result: ClassificationResult, output_path: Path | str) -> Path:
    """Write a classification result to a JSON file.

    Args:
        result: Result to export.
        output_path: Destination path.

    Returns:
        Path to the created file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
    return output_path


__all__ = [
    "export_result",
    "result_to_json",
]
