"""Tests for freeseo.ingestion.loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from freeseo.errors import InvalidAuditError
from freeseo.ingestion.loader import load_raw_audit, parse_raw_audit
from tests.factories import audit_data


class TestParseRawAudit:
    def test_valid_dict(self):
        audit = parse_raw_audit(audit_data())
        assert audit.h1.count == 1

    def test_missing_field_raises_invalid_audit(self):
        data = audit_data()
        del data["speed"]
        with pytest.raises(InvalidAuditError, match="speed"):
            parse_raw_audit(data)

    def test_invariant_violation_raises_invalid_audit(self):
        with pytest.raises(InvalidAuditError, match="broken"):
            parse_raw_audit(audit_data(links={"total": 1, "broken": 4}))

    def test_non_object_raises(self):
        with pytest.raises(InvalidAuditError, match="JSON object"):
            parse_raw_audit([1, 2, 3])

    def test_invalid_audit_is_value_error(self):
        with pytest.raises(ValueError):
            parse_raw_audit({})


class TestLoadRawAudit:
    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text(json.dumps(audit_data(url="https://file.example")), encoding="utf-8")
        assert load_raw_audit(path).url == "https://file.example"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_raw_audit(tmp_path / "nope.json")

    def test_bad_json_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidAuditError, match="not valid JSON"):
            load_raw_audit(path)

    @pytest.mark.parametrize("grade", [float("inf"), float("nan")])
    def test_non_finite_grade_in_file_raises(self, tmp_path: Path, grade):
        path = tmp_path / "audit.json"
        path.write_text(json.dumps(audit_data(readability={"score": grade})), encoding="utf-8")
        with pytest.raises(InvalidAuditError, match="readability"):
            load_raw_audit(path)

    def test_huge_timing_in_file_raises(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text(json.dumps(audit_data(speed={"timing": 10**400})), encoding="utf-8")
        with pytest.raises(InvalidAuditError, match="speed.timing"):
            load_raw_audit(path)

    def test_bundled_example_is_valid(self):
        example = Path(__file__).resolve().parents[2] / "examples" / "audit.json"
        audit = load_raw_audit(example)
        assert audit.url == "https://example.com"
        assert audit.images.total == 0
