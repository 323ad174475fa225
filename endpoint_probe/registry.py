from __future__ import annotations

from pathlib import Path

import yaml

from endpoint_probe.config import Settings, settings
from endpoint_probe.models import DEFAULT_TARGETS, ProbeConfig, TargetsFile

TARGETS_PATH = Path(__file__).resolve().parents[1] / "targets.yml"


def load_targets_file(path: Path = TARGETS_PATH) -> TargetsFile:
    if not path.exists():
        raise FileNotFoundError(f"Missing targets file at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    return TargetsFile.model_validate(data)


def _resolve_targets_file(s: Settings) -> TargetsFile:
    if s.PROBE_TARGETS_FILE:
        # an explicitly named file has to exist
        return load_targets_file(Path(s.PROBE_TARGETS_FILE))
    if TARGETS_PATH.exists():
        return load_targets_file(TARGETS_PATH)
    return TargetsFile()


def build_config(s: Settings = settings) -> ProbeConfig:
    """
    Merge environment settings over the targets file over built-in defaults.
    Raises on an invalid result; the caller treats that as fatal at startup.
    """
    tf = _resolve_targets_file(s)
    d = tf.defaults

    targets = s.PROBE_TARGETS or tuple(tf.targets) or DEFAULT_TARGETS

    def pick(env_value, file_value):
        return file_value if env_value is None else env_value

    return ProbeConfig(
        targets=targets,
        interval_s=pick(s.PROBE_INTERVAL, d.interval_s),
        timeout_s=pick(s.PROBE_TIMEOUT_SECONDS, d.timeout_s),
        connect_timeout_s=pick(s.PROBE_CONNECT_TIMEOUT_SECONDS, d.connect_timeout_s),
        resolve_dns=pick(s.PROBE_RESOLVE_DNS, d.resolve_dns),
        workers=pick(s.PROBE_WORKERS, d.workers),
        pushgateway_url=s.PUSHGATEWAY_URL,
        push_job=s.PUSHGATEWAY_JOB,
        push_timeout_s=s.PUSHGATEWAY_TIMEOUT_SECONDS,
    )
