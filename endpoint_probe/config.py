import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings:
    PROBE_TARGETS: tuple[str, ...] = tuple(
        target.strip()
        for target in os.getenv("PROBE_TARGETS", "").split(",")
        if target.strip()
    )
    PROBE_TARGETS_FILE: str | None = os.getenv("PROBE_TARGETS_FILE")
    PROBE_INTERVAL: float | None = _env_float("PROBE_INTERVAL")
    PROBE_TIMEOUT_SECONDS: float | None = _env_float("PROBE_TIMEOUT_SECONDS")
    PROBE_CONNECT_TIMEOUT_SECONDS: float | None = _env_float(
        "PROBE_CONNECT_TIMEOUT_SECONDS"
    )
    PROBE_RESOLVE_DNS: bool | None = _env_bool("PROBE_RESOLVE_DNS")
    PROBE_WORKERS: int | None = (
        int(os.environ["PROBE_WORKERS"]) if os.getenv("PROBE_WORKERS") else None
    )
    PUSHGATEWAY_URL: str | None = os.getenv("PUSHGATEWAY_URL") or None
    PUSHGATEWAY_JOB: str = os.getenv("PUSHGATEWAY_JOB", "endpoint_probe")
    PUSHGATEWAY_TIMEOUT_SECONDS: float = float(
        os.getenv("PUSHGATEWAY_TIMEOUT_SECONDS", "5")
    )
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
