from __future__ import annotations

import logging
import signal
import threading

from endpoint_probe.config import settings
from endpoint_probe.metrics import ProbeMetrics
from endpoint_probe.registry import build_config
from endpoint_probe.runner import loop_forever

logger = logging.getLogger("endpoint_probe")


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    config = build_config()

    metrics = None
    if config.pushgateway_url:
        metrics = ProbeMetrics(
            gateway_url=config.pushgateway_url,
            job=config.push_job,
            timeout_s=config.push_timeout_s,
        )

    stop_event = threading.Event()

    def _stop(signum, _frame) -> None:
        logger.info("received signal %s, stopping after current iteration", signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)

    logger.info(
        "probing %d targets every %ss workers=%d push=%s",
        len(config.targets),
        config.interval_s,
        config.workers,
        config.pushgateway_url or "off",
    )
    loop_forever(config, metrics=metrics, stop_event=stop_event)


if __name__ == "__main__":
    main()
