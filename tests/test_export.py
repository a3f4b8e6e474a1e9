"""Tests for result export."""

import json
from pathlib import Path

from taste_analyzer.analysis import classify_genres
from taste_analyzer.export import export_result, result_to_json


class TestResultToJson:
    """Tests for result_to_json function."""

    def test_round_trips_dict(self):
        """Test JSON text decodes to the result dictionary."""
        result = classify_genres(["ambient", "classical"])
        assert json.loads(result_to_json(result)) == result.to_dict()

    def test_compact(self):
        """Test compact output has no newlines."""
        result = classify_genres(["ambient"])
        assert "\n" not in result_to_json(result, indent=None)


class TestExportResult:
    """Tests for export_result function."""

    def test_writes_file(self, tmp_path: Path):
        """Test exporting creates parent directories."""
        result = classify_genres(["folk"])
        output = tmp_path / "nested" / "result.json"

        path = export_result(result, output)

        assert path == output
        data = json.loads(output.read_text())
        assert data["determined_category"] == result.determined_category
        assert len(data["score_breakdown"]) == 10
