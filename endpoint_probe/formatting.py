from __future__ import annotations

from typing import Iterable, List

from endpoint_probe.checks.results import ProbeResult


def format_result(result: ProbeResult) -> List[str]:
    lines = [
        f"Address: {result.target}",
        f"Response Code: {result.status_code}",
        f"Response Time: {result.latency_ms}ms",
    ]
    if result.error:
        lines.append(f"Response Error: {result.error}")
    return lines


def format_interval(interval_s: float) -> str:
    # 0.5 -> "500ms", 30 -> "30s", 90 -> "1m30s", 3600 -> "1h0m0s"
    if interval_s < 1:
        return f"{interval_s * 1000:g}ms"
    hours, rest = divmod(interval_s, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{int(hours)}h{int(minutes)}m{seconds:g}s"
    if minutes:
        return f"{int(minutes)}m{seconds:g}s"
    return f"{seconds:g}s"


def format_iteration(results: Iterable[ProbeResult]) -> str:
    lines: List[str] = []
    for result in results:
        lines.extend(format_result(result))
    return "\n".join(lines)
