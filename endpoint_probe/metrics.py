from __future__ import annotations

import socket
from typing import Iterable

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    push_to_gateway,
)

from endpoint_probe.checks.results import ProbeResult
from endpoint_probe.errors import PushError

LATENCY_BUCKETS = (0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class ProbeMetrics:
    """Counters and latency histogram for probe results.

    Each instance owns its own CollectorRegistry, so nothing is registered
    on the prometheus_client default registry.
    """

    def __init__(
        self,
        gateway_url: str | None = None,
        job: str = "endpoint_probe",
        timeout_s: float = 5,
        instance: str | None = None,
    ) -> None:
        self.gateway_url = gateway_url
        self.job = job
        self.timeout_s = timeout_s
        self.instance = instance or socket.gethostname()
        self.registry = CollectorRegistry()
        self.responses = Counter(
            "endpoint_probe_responses",
            "Probe results by address and HTTP status (0 when unreachable)",
            ["address", "status_code"],
            registry=self.registry,
        )
        self.latency = Histogram(
            "endpoint_probe_response_seconds",
            "Time until response headers arrived, reachable probes only",
            ["address"],
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )

    def record(self, result: ProbeResult) -> None:
        self.responses.labels(
            address=result.target, status_code=str(result.status_code)
        ).inc()
        if result.ok:
            self.latency.labels(address=result.target).observe(result.latency_ms / 1000)

    def record_all(self, results: Iterable[ProbeResult]) -> None:
        for result in results:
            self.record(result)

    def response_count(self, address: str, status_code: int) -> float:
        value = self.registry.get_sample_value(
            "endpoint_probe_responses_total",
            {"address": address, "status_code": str(status_code)},
        )
        return value or 0.0

    def latency_observations(self, address: str) -> float:
        value = self.registry.get_sample_value(
            "endpoint_probe_response_seconds_count", {"address": address}
        )
        return value or 0.0

    def exposition(self) -> bytes:
        return generate_latest(self.registry)

    def push(self) -> None:
        if not self.gateway_url:
            return
        try:
            push_to_gateway(
                self.gateway_url,
                job=self.job,
                registry=self.registry,
                grouping_key={"instance": self.instance},
                timeout=self.timeout_s,
            )
        except Exception as exc:
            # urllib can raise http.client errors that are not OSError
            raise PushError(
                f"push to {self.gateway_url} failed: {exc.__class__.__name__}: {exc}"
            ) from exc
