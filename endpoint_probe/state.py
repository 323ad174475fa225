from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List

from endpoint_probe.checks.results import ProbeResult


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class IterationSnapshot:
    iteration: int = 0
    finished_at: str | None = None
    duration_ms: int | None = None
    results: List[ProbeResult] = field(default_factory=list)
    push_error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "iteration": self.iteration,
            "finished_at": self.finished_at,
            "duration_ms": self.duration_ms,
            "results": [r.to_dict() for r in self.results],
            "push_error": self.push_error,
        }


class LatestResults:
    """Holds only the most recent iteration; older ones are dropped."""

    def __init__(self) -> None:
        self._latest = IterationSnapshot()
        self._lock = threading.Lock()

    def save(
        self,
        results: List[ProbeResult],
        duration_ms: int,
        push_error: str | None = None,
    ) -> None:
        with self._lock:
            self._latest = IterationSnapshot(
                iteration=self._latest.iteration + 1,
                finished_at=now_iso(),
                duration_ms=duration_ms,
                results=list(results),
                push_error=push_error,
            )

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return self._latest.to_dict()
