from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    interval_s: float = Field(gt=0)
    timeout_s: float = Field(gt=0)
    connect_timeout_s: float | None = Field(default=None)
    resolve_dns: bool
    workers: int = Field(ge=1)
    pushgateway_url: str | None = Field(default=None)
    push_job: str


class TargetsResponse(BaseModel):
    targets: list[str]
    count: int


class ProbeResultResponse(BaseModel):
    target: str
    ok: bool
    status_code: int = Field(description="HTTP status, 0 when unreachable")
    latency_ms: int = Field(description="Time to response headers, 0 when unreachable")
    error: str | None = None


class IterationResponse(BaseModel):
    iteration: int = Field(description="Completed iterations, 0 before the first one")
    finished_at: str | None = None
    duration_ms: int | None = None
    results: list[ProbeResultResponse]
    push_error: str | None = None
