"""Tests for the assignment decision logger."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from acmgassign.utils.logging_config import AssignmentDecisionLogger, get_logger, reset_logger


@pytest.fixture(autouse=True)
def clean_global_logger():
    reset_logger()
    yield
    reset_logger()


class TestAssignmentDecisionLogger:
    """Tests for AssignmentDecisionLogger."""

    def test_log_file_created(self, tmp_path):
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path / "logs")
        assert decision_logger.log_file.parent == tmp_path / "logs"
        assert decision_logger.log_file.name.startswith("acmg_decisions_")
        assert decision_logger.log_file.suffix == ".jsonl"
        decision_logger.file_handler.close()

    def test_error_entry(self, tmp_path):
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path)
        decision_logger.log_assignment_error("PTEN", ValueError("bad genotype"))
        decision_logger.file_handler.close()

        [line] = decision_logger.log_file.read_text().splitlines()
        entry = json.loads(line)
        assert entry["event_type"] == "acmg_error"
        assert entry["input"] == {"gene_symbol": "PTEN"}
        assert entry["error"] == {"type": "ValueError", "message": "bad genotype"}

    def test_console_only(self, tmp_path):
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path, enable_file_logging=False)
        assert decision_logger.log_file is None
        decision_logger.log_assignment_error("PTEN", ValueError("bad genotype"))
        assert list(tmp_path.iterdir()) == []

    def test_concurrent_writes(self, tmp_path):
        """Test that entries written from worker threads stay one per line."""
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path, enable_file_logging=True)
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: decision_logger.log_assignment_error(f"GENE{i}", RuntimeError("x" * 500)), range(200)))
        decision_logger.file_handler.close()

        lines = decision_logger.log_file.read_text().splitlines()
        assert len(lines) == 200
        assert {json.loads(line)["input"]["gene_symbol"] for line in lines} == {f"GENE{i}" for i in range(200)}


class TestGlobalLogger:
    """Tests for get_logger and reset_logger."""

    def test_singleton(self, tmp_path):
        assert get_logger(log_dir=tmp_path) is get_logger(log_dir=tmp_path)

    def test_reset(self, tmp_path):
        first = get_logger(log_dir=tmp_path)
        reset_logger()
        assert get_logger(log_dir=tmp_path) is not first
