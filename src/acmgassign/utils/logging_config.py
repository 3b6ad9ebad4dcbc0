"""Logging configuration for ACMG assignment decisions.

Provides an audit trail of every variant classification: a one-line
console summary plus a JSON line per decision in a dated JSONL file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from acmgassign.models.assignment import Assignment


class AssignmentDecisionLogger:
    """Logger for ACMG assignment decisions with structured output."""

    def __init__(self, log_dir: Path | None = None, enable_file_logging: bool = True):
        """Initialize the assignment decision logger.

        Args:
            log_dir: Directory for log files. Defaults to ./logs
            enable_file_logging: Whether to write JSONL decision records
        """
        self.logger = logging.getLogger("acmgassign.decisions")
        self.logger.setLevel(logging.INFO)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(console_handler)

        self.file_handler = None
        self.log_file = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            self.log_file = log_dir / f"acmg_decisions_{timestamp}.jsonl"

            # JSON records are written straight to the stream, never via the console formatter
            self.file_handler = logging.FileHandler(self.log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.logger.addHandler(self.file_handler)
            self.logger.info(f"ACMG decision logging enabled: {self.log_file}")

    def _write(self, log_entry: dict) -> None:
        if self.file_handler:
            # Worker threads in batch_calculate share the handler stream
            self.file_handler.acquire()
            try:
                self.file_handler.stream.write(json.dumps(log_entry) + '\n')
                self.file_handler.flush()
            finally:
                self.file_handler.release()

    def log_assignment(self, assignment: Assignment) -> None:
        """Log a finalised assignment."""
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "acmg_assignment",
            "output": assignment.to_dict(),
            "evidence": assignment.evidence.to_dict(),
        }
        self.logger.info(
            f"ACMG Decision: {assignment.gene_symbol} {assignment.to_dict()['variant']} "
            f"({assignment.mode_of_inheritance.value}) → {assignment.classification.value} {assignment.evidence}"
        )
        self._write(log_entry)

    def log_assignment_error(self, gene_symbol: str, error: BaseException) -> None:
        """Log a failure to assign evidence for a gene."""
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "acmg_error",
            "input": {"gene_symbol": gene_symbol},
            "error": {
                "type": type(error).__name__,
                "message": str(error),
            },
        }
        self.logger.error(f"ACMG Error: {gene_symbol} - {error}")
        self._write(log_entry)


# Global logger instance
_global_logger: AssignmentDecisionLogger | None = None


def get_logger(log_dir: Path | None = None, enable_file_logging: bool = True) -> AssignmentDecisionLogger:
    """Get or create the global assignment decision logger."""
    global _global_logger

    if _global_logger is None:
        _global_logger = AssignmentDecisionLogger(log_dir=log_dir, enable_file_logging=enable_file_logging)

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    if _global_logger is not None and _global_logger.file_handler is not None:
        _global_logger.file_handler.close()
    _global_logger = None
