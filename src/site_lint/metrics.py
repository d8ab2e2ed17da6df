"""Metrics collected during a lint run."""
import time
from dataclasses import dataclass, field


@dataclass
class LintMetrics:
    """Counters and timing for one run."""

    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    files_checked: dict[str, int] = field(default_factory=dict)
    syntax_checks_run: int = 0

    def finish(self) -> None:
        """Mark the run as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    @property
    def total_files(self) -> int:
        return sum(self.files_checked.values())

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "files_checked": dict(self.files_checked),
            "total_files": self.total_files,
            "syntax_checks_run": self.syntax_checks_run,
        }
