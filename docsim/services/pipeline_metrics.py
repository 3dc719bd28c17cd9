"""Pipeline metrics collection for performance monitoring."""
from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional


@dataclass
class StageMetrics:
    """Metrics for a single pipeline stage."""
    name: str
    execution_time: float = 0.0
    items: int = 0


@dataclass
class PipelineMetrics:
    """Aggregated metrics for one detection run."""
    pipeline_id: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: Optional[float] = None
    stages: Dict[str, StageMetrics] = field(default_factory=dict)

    @contextmanager
    def stage(self, name: str, items: int = 0) -> Iterator[StageMetrics]:
        """Time the enclosed block; the yielded stage's ``items`` may be updated inside."""
        metrics = StageMetrics(name=name, items=items)
        started = time.perf_counter()
        try:
            yield metrics
        finally:
            metrics.execution_time = time.perf_counter() - started
            self.stages[name] = metrics

    def finish(self) -> None:
        self.end_time = time.perf_counter()

    @property
    def total_execution_time(self) -> float:
        """Calculate total execution time."""
        if self.end_time is None:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary for reporting."""
        return {
            "pipeline_id": self.pipeline_id,
            "total_execution_time": round(self.total_execution_time, 3),
            "stages": {
                name: {
                    "execution_time": round(stage.execution_time, 3),
                    "items": stage.items,
                }
                for name, stage in self.stages.items()
            },
        }
