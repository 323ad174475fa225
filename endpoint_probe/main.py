import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST

from endpoint_probe.api_schemas import (
    ConfigResponse,
    HealthResponse,
    IterationResponse,
    TargetsResponse,
)
from endpoint_probe.metrics import ProbeMetrics
from endpoint_probe.registry import build_config
from endpoint_probe.runner import loop_forever
from endpoint_probe.state import LatestResults

logger = logging.getLogger(__name__)

probe_config = build_config()
metrics = ProbeMetrics(
    gateway_url=probe_config.pushgateway_url,
    job=probe_config.push_job,
    timeout_s=probe_config.push_timeout_s,
)
store = LatestResults()
stop_event = threading.Event()


@asynccontextmanager
async def lifespan(_: FastAPI):
    t = threading.Thread(
        target=loop_forever,
        args=(probe_config,),
        kwargs={"metrics": metrics, "stop_event": stop_event, "store": store},
        name="probe-loop",
        daemon=True,
    )
    t.start()
    logger.info("probe loop started targets=%d", len(probe_config.targets))
    yield
    stop_event.set()


app = FastAPI(
    title="Endpoint Probe",
    version="1.0.0",
    description=(
        "Probes a fixed list of HTTP(S) addresses on an interval, "
        "prints status and latency, and exposes the latest iteration and metrics."
    ),
    lifespan=lifespan,
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns the probe settings the loop was started with.",
)
def config():
    return probe_config.model_dump(exclude={"targets", "push_timeout_s"})


@app.get(
    "/api/targets",
    response_model=TargetsResponse,
    tags=["targets"],
    summary="Configured Targets",
    description="Addresses probed each iteration, in probe order.",
)
def targets():
    return {"targets": list(probe_config.targets), "count": len(probe_config.targets)}


@app.get(
    "/api/results",
    response_model=IterationResponse,
    tags=["results"],
    summary="Latest Iteration",
    description="Results of the most recent completed iteration, in target order.",
)
def results():
    return store.snapshot()


@app.get(
    "/metrics",
    tags=["system"],
    summary="Prometheus Metrics",
    description="Current counter and histogram values in Prometheus text format.",
)
def metrics_text():
    return Response(content=metrics.exposition(), media_type=CONTENT_TYPE_LATEST)
