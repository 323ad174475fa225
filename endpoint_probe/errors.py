from __future__ import annotations


class ProbeError(RuntimeError):
    def __init__(self, target: str, message: str) -> None:
        super().__init__(message)
        self.target = target


class ResolutionError(ProbeError):
    """Hostname lookup failed; no request was sent."""


class TransportError(ProbeError):
    """Connection, timeout or TLS failure during the GET."""


class PushError(RuntimeError):
    pass
