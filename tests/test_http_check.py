import socket
import unittest
from unittest.mock import Mock, patch

import requests

from endpoint_probe.checks.http_check import probe, resolve_host
from endpoint_probe.errors import ResolutionError


class ProbeTests(unittest.TestCase):
    def test_reachable_target_returns_status_and_latency(self) -> None:
        response = Mock(status_code=200)
        with patch("endpoint_probe.checks.http_check.socket.getaddrinfo"), patch(
            "endpoint_probe.checks.http_check.requests.get", return_value=response
        ), patch(
            "endpoint_probe.checks.http_check.time.perf_counter",
            side_effect=[0.0, 0.010],
        ):
            res = probe("https://example.com", timeout_s=5)

        self.assertEqual(res.target, "https://example.com")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.latency_ms, 10)
        self.assertIsNone(res.error)
        self.assertTrue(res.ok)
        response.close.assert_called_once()

    def test_error_statuses_are_not_probe_errors(self) -> None:
        for code in (404, 500, 503):
            with self.subTest(code=code):
                with patch("endpoint_probe.checks.http_check.socket.getaddrinfo"), patch(
                    "endpoint_probe.checks.http_check.requests.get",
                    return_value=Mock(status_code=code),
                ):
                    res = probe("https://example.com/missing", timeout_s=5)

                self.assertEqual(res.status_code, code)
                self.assertIsNone(res.error)
                self.assertGreaterEqual(res.latency_ms, 0)

    def test_unresolvable_host_makes_no_request(self) -> None:
        with patch(
            "endpoint_probe.checks.http_check.socket.getaddrinfo",
            side_effect=socket.gaierror(-2, "Name or service not known"),
        ), patch("endpoint_probe.checks.http_check.requests.get") as mock_get:
            res = probe("https://www.amazonfdad.com", timeout_s=5)

        mock_get.assert_not_called()
        self.assertEqual(res.status_code, 0)
        self.assertEqual(res.latency_ms, 0)
        self.assertIn("www.amazonfdad.com", res.error)
        self.assertFalse(res.ok)

    def test_resolution_uses_url_hostname(self) -> None:
        with patch("endpoint_probe.checks.http_check.socket.getaddrinfo") as mock_resolve:
            resolve_host("https://user@api.example.com:8443/health?x=1")

        mock_resolve.assert_called_once_with("api.example.com", None)

    def test_address_without_hostname_is_resolution_error(self) -> None:
        with self.assertRaises(ResolutionError):
            resolve_host("https:///path-only")

    def test_transport_errors_zero_the_result(self) -> None:
        errors = [
            requests.ConnectionError("connection refused"),
            requests.Timeout("read timed out"),
            requests.exceptions.SSLError("certificate verify failed"),
        ]
        for exc in errors:
            with self.subTest(exc=exc.__class__.__name__):
                with patch("endpoint_probe.checks.http_check.socket.getaddrinfo"), patch(
                    "endpoint_probe.checks.http_check.requests.get", side_effect=exc
                ) as mock_get:
                    res = probe("https://example.com", timeout_s=5)

                mock_get.assert_called_once()
                self.assertEqual(res.status_code, 0)
                self.assertEqual(res.latency_ms, 0)
                self.assertIn(exc.__class__.__name__, res.error)

    def test_request_is_always_bounded_by_timeout(self) -> None:
        with patch("endpoint_probe.checks.http_check.socket.getaddrinfo"), patch(
            "endpoint_probe.checks.http_check.requests.get",
            return_value=Mock(status_code=200),
        ) as mock_get:
            probe("https://example.com", timeout_s=4)

        mock_get.assert_called_once_with(
            "https://example.com", timeout=(4, 4), stream=True
        )

    def test_connect_timeout_override(self) -> None:
        with patch("endpoint_probe.checks.http_check.socket.getaddrinfo"), patch(
            "endpoint_probe.checks.http_check.requests.get",
            return_value=Mock(status_code=200),
        ) as mock_get:
            probe("https://example.com", timeout_s=4, connect_timeout_s=1.5)

        mock_get.assert_called_once_with(
            "https://example.com", timeout=(1.5, 4), stream=True
        )

    def test_resolve_disabled_skips_lookup(self) -> None:
        with patch("endpoint_probe.checks.http_check.socket.getaddrinfo") as mock_resolve, patch(
            "endpoint_probe.checks.http_check.requests.get",
            return_value=Mock(status_code=204),
        ):
            res = probe("https://example.com", timeout_s=4, resolve=False)

        mock_resolve.assert_not_called()
        self.assertEqual(res.status_code, 204)


if __name__ == "__main__":
    unittest.main()
