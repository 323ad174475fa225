from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List

from endpoint_probe.checks.http_check import probe
from endpoint_probe.checks.results import ProbeResult
from endpoint_probe.errors import PushError
from endpoint_probe.formatting import format_interval, format_iteration
from endpoint_probe.metrics import ProbeMetrics
from endpoint_probe.models import ProbeConfig
from endpoint_probe.state import LatestResults

logger = logging.getLogger(__name__)


def _probe_one(config: ProbeConfig, target: str) -> ProbeResult:
    return probe(
        target,
        timeout_s=config.timeout_s,
        connect_timeout_s=config.connect_timeout_s,
        resolve=config.resolve_dns,
    )


def probe_all(config: ProbeConfig) -> List[ProbeResult]:
    """One result per target, in configured order."""
    if config.workers <= 1 or len(config.targets) <= 1:
        return [_probe_one(config, target) for target in config.targets]

    workers = min(config.workers, len(config.targets))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="probe") as pool:
        return list(pool.map(lambda t: _probe_one(config, t), config.targets))


def report(results: List[ProbeResult]) -> None:
    print(format_iteration(results), flush=True)


def _push_metrics(metrics: ProbeMetrics, results: List[ProbeResult]) -> str | None:
    metrics.record_all(results)
    try:
        metrics.push()
    except PushError as exc:
        # Push errors should never stop the probe loop.
        logger.warning("metrics push failed job=%s error=%s", metrics.job, exc)
        return str(exc)
    return None


def run_once(
    config: ProbeConfig,
    metrics: ProbeMetrics | None = None,
    store: LatestResults | None = None,
) -> List[ProbeResult]:
    start = time.perf_counter()
    results = probe_all(config)
    report(results)

    push_error = None
    if metrics is not None:
        push_error = _push_metrics(metrics, results)

    duration_ms = int((time.perf_counter() - start) * 1000)
    logger.debug("iteration finished targets=%d duration_ms=%d", len(results), duration_ms)
    if store is not None:
        store.save(results, duration_ms=duration_ms, push_error=push_error)
    return results


def loop_forever(
    config: ProbeConfig,
    metrics: ProbeMetrics | None = None,
    stop_event: threading.Event | None = None,
    store: LatestResults | None = None,
) -> None:
    """Probe, report, then sleep the full interval; repeat until stopped."""
    stop = stop_event or threading.Event()
    while not stop.is_set():
        run_once(config, metrics=metrics, store=store)
        print(f"Sleeping {format_interval(config.interval_s)}", flush=True)
        if stop.wait(config.interval_s):
            break
    logger.info("probe loop stopped")
