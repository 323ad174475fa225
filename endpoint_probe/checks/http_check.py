from __future__ import annotations

import logging
import socket
import time
from urllib.parse import urlparse

import requests

from endpoint_probe.checks.results import ProbeResult
from endpoint_probe.errors import ResolutionError, TransportError

logger = logging.getLogger(__name__)


def resolve_host(target: str) -> None:
    host = urlparse(target).hostname
    if not host:
        raise ResolutionError(target, f"no hostname in address {target!r}")
    try:
        socket.getaddrinfo(host, None)
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolutionError(target, f"unable to resolve {host}: {exc}") from exc


def _get(target: str, timeout_s: float, connect_timeout_s: float | None) -> ProbeResult:
    connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
    start = time.perf_counter()
    try:
        # stream=True: the clock stops once headers arrive, the body is never read
        r = requests.get(target, timeout=(connect_timeout, timeout_s), stream=True)
    except requests.RequestException as exc:
        raise TransportError(target, f"{exc.__class__.__name__}: {exc}") from exc
    latency_ms = int((time.perf_counter() - start) * 1000)
    r.close()
    return ProbeResult(target=target, status_code=r.status_code, latency_ms=latency_ms)


def probe(
    target: str,
    timeout_s: float,
    connect_timeout_s: float | None = None,
    resolve: bool = True,
) -> ProbeResult:
    """Check one address once.

    Any HTTP status counts as a successful probe. Resolution and transport
    failures come back as a result with status_code 0, latency 0 and the
    error text; they are never raised.
    """
    try:
        if resolve:
            resolve_host(target)
        return _get(target, timeout_s, connect_timeout_s)
    except ResolutionError as exc:
        logger.error("unable to resolve dns name url=%s error=%s", target, exc)
        return ProbeResult(target=target, error=str(exc))
    except TransportError as exc:
        logger.error("unable to connect to endpoint url=%s error=%s", target, exc)
        return ProbeResult(target=target, error=str(exc))
