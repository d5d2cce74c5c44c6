"""Tests for JSON export and exam loading."""

import json

from exam_seating.allocator.engine import allocate
from exam_seating.allocator.exporter import (
    export_batch_json,
    export_result_json,
    load_exam_data,
    parse_exam,
)
from exam_seating.models import ConstraintMode, FillDirection, SeatingPlan, StudentSet


class TestExportResultJson:
    """Tests for export_result_json."""

    def test_writes_plan_and_warnings(self, tmp_path, gapped_hall):
        result = allocate([gapped_hall], [StudentSet(id="s", label="9", student_count=2)])
        output = tmp_path / "nested" / "plan.json"

        export_result_json(result, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["success"] is True
        assert data["error"] is None
        grid = data["plan"]["gap"]
        assert grid[0][1] is None
        assert grid[0][0]["student"]["id"] == "9001"
        assert grid[1][1]["type"] == "faculty"
        assert data["statistics"]["total_assigned"] == 2

    def test_plan_round_trips_through_json(self, tmp_path, gapped_hall):
        result = allocate([gapped_hall], [StudentSet(id="s", label="9", student_count=1)])
        output = tmp_path / "plan.json"
        export_result_json(result, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        plan = SeatingPlan.from_dict(data["plan"])

        assert plan.to_dict() == result.plan.to_dict()
        assert plan.find_student("9001").id == "a"

    def test_failure_has_null_plan(self, tmp_path, hall_factory):
        result = allocate([hall_factory("A", 1)], [StudentSet(id="s", label="1", student_count=2)])
        output = tmp_path / "plan.json"
        export_result_json(result, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["plan"] is None
        assert data["success"] is False
        assert "Not enough seats" in data["error"]


class TestExportBatchJson:
    """Tests for export_batch_json."""

    def test_keys_by_exam_id(self, tmp_path, hall_factory):
        ok = allocate([hall_factory("A", 2)], [StudentSet(id="s", label="1", student_count=1)])
        output = tmp_path / "batch.json"
        export_batch_json({"e1": ok}, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert list(data["exams"]) == ["e1"]


class TestLoadExamData:
    """Tests for load_exam_data and parse_exam."""

    def test_single_exam_object(self, tmp_path, exam_record):
        path = tmp_path / "exam.json"
        path.write_text(json.dumps(exam_record), encoding="utf-8")

        exams = load_exam_data(path)
        assert len(exams) == 1
        assert exams[0]["id"] == "exam02"

    def test_exams_wrapper(self, tmp_path, exam_record):
        path = tmp_path / "exams.json"
        path.write_text(json.dumps({"exams": [exam_record, exam_record]}), encoding="utf-8")

        assert len(load_exam_data(path)) == 2

    def test_parse_exam_with_older_keys(self, exam_record):
        halls, student_sets = parse_exam(exam_record)

        assert [h.id for h in halls] == ["hallC", "hallD"]
        assert halls[0].constraint.mode is ConstraintMode.RESTRICTED
        assert halls[0].constraint.allowed_set_ids == ["set201"]
        assert halls[0].constraint.fill_direction is FillDirection.COLUMN_MAJOR
        assert halls[1].assignable_count == 20
        assert halls[1].dimensions == (4, 5)
        assert [s.label for s in student_sets] == ["201", "202"]
        assert student_sets[0].student_count == 12
