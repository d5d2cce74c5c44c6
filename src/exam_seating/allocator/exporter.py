"""Export and load functions for allocation results and exam files."""

import json
from pathlib import Path
from typing import Any

from ..models import AllocationResult, Hall, StudentSet


def export_result_json(result: AllocationResult, output_path: Path | str) -> None:
    """Export one allocation result to a JSON file.

    Args:
        result: AllocationResult to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)


def export_batch_json(results: dict[str, AllocationResult], output_path: Path | str) -> None:
    """Export allocation results of several exams to one JSON file.

    Args:
        results: Mapping of exam id to AllocationResult
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(
            {"exams": {exam_id: r.to_dict() for exam_id, r in results.items()}},
            f,
            ensure_ascii=False,
            indent=2,
        )


def load_exam_data(input_path: Path | str) -> list[dict[str, Any]]:
    """Load exam records from a JSON file.

    The file holds either a single exam object or ``{"exams": [...]}``.

    Args:
        input_path: Path to exam JSON file

    Returns:
        List of exam dictionaries
    """
    with open(input_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "exams" in data:
        return list(data["exams"])
    if isinstance(data, list):
        return data
    return [data]


def parse_exam(exam: dict[str, Any]) -> tuple[list[Hall], list[StudentSet]]:
    """Build halls and student sets from an exam record.

    Accepts ``student_sets`` or the older ``studentSets`` key.

    Args:
        exam: Exam dictionary

    Returns:
        Tuple of (halls, student_sets)
    """
    halls = [Hall.from_dict(h) for h in exam.get("halls", [])]
    student_sets = [
        StudentSet.from_dict(s) for s in exam.get("student_sets", exam.get("studentSets", []))
    ]
    return halls, student_sets
