from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TARGETS: Tuple[str, ...] = (
    "https://www.google.com",
    "https://www.cloudflare.com",
    "https://www.amazonfdad.com",
    "https://www.github.com",
    "https://www.stackoverflow.com",
)


def _check_address(value: str) -> str:
    value = value.strip()
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"not an http(s) address: {value!r}")
    return value


class Defaults(BaseModel):
    interval_s: float = Field(default=30, gt=0)
    timeout_s: float = Field(default=10, gt=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    resolve_dns: bool = True
    workers: int = Field(default=1, ge=1)


class TargetsFile(BaseModel):
    defaults: Defaults = Defaults()
    targets: List[str] = Field(default_factory=list)

    @field_validator("targets")
    @classmethod
    def _valid_addresses(cls, v: List[str]) -> List[str]:
        return [_check_address(t) for t in v]


class ProbeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    targets: Tuple[str, ...] = Field(..., min_length=1)
    interval_s: float = Field(default=30, gt=0)
    timeout_s: float = Field(default=10, gt=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    resolve_dns: bool = True
    workers: int = Field(default=1, ge=1)
    pushgateway_url: Optional[str] = None
    push_job: str = Field(default="endpoint_probe", min_length=1)
    push_timeout_s: float = Field(default=5, gt=0)

    @field_validator("targets")
    @classmethod
    def _valid_targets(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        v = tuple(_check_address(t) for t in v)
        seen = set()
        for t in v:
            if t in seen:
                raise ValueError(f"Duplicate target: {t}")
            seen.add(t)
        return v
