"""Payment Service diagnostics client.

This module defines a small client wrapper around the configuration
diagnostic endpoints of the Payment Service:

* :meth:`PaymentServiceClient.get_environment` – environment and runtime properties.
* :meth:`PaymentServiceClient.get_config_map` – the service configuration.
* :meth:`PaymentServiceClient.check_log_levels` – trigger the log level check.

The client uses the ``requests`` library internally.  Like the
endpoints it talks to, it never raises on HTTP or network failures:
every method returns a tuple ``(data, error)`` where ``error`` is a
dictionary with ``status_code`` and ``message`` keys.

The module can also be run as a script::

    python payment_service_client.py env --base-url http://localhost:9090
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CONFIG_PATH = "/api/v1/payments/config"


class PaymentServiceClient:
    """Client for the configuration diagnostics of a Payment Service."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:9090``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is sent
                with every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, expect_json: bool = True
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the service.

        Args:
            method: HTTP method (``GET`` for every diagnostic endpoint).
            path: Path relative to :attr:`base_url`.
            expect_json: Parse the body as JSON when true, otherwise
                return the body text.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not expect_json:
                return response.text, None
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except ValueError as exc:
            logger.error("API returned invalid JSON for %s: %s", url, exc)
            return None, {"status_code": None, "message": f"Invalid JSON: {exc}"}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Diagnostic operations
    # ------------------------------------------------------------------
    def get_environment(self) -> Tuple[Dict[str, str], Optional[Dict[str, Any]]]:
        """Retrieve the environment and runtime properties of the service."""
        data, error = self._request("GET", f"{CONFIG_PATH}/env")
        if error:
            return {}, error
        return data or {}, None

    def get_config_map(self) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
        """Retrieve the service configuration as a dictionary."""
        data, error = self._request("GET", f"{CONFIG_PATH}/map")
        if error:
            return {}, error
        return data or {}, None

    def check_log_levels(self) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Ask the service to log at every severity.

        Returns:
            A tuple ``(message, error)``; ``message`` is the confirmation
            text returned by the service.
        """
        return self._request("GET", f"{CONFIG_PATH}/log", expect_json=False)


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="Query the Payment Service configuration diagnostics.")
    ap.add_argument("command", choices=["env", "map", "log"], help="Diagnostic to run")
    ap.add_argument("--base-url", default="http://localhost:9090", help="Service base URL")
    ap.add_argument("--api-key", help="Optional bearer token")
    ap.add_argument("--timeout", type=float, default=15, help="Request timeout in seconds")
    args = ap.parse_args(argv)

    client = PaymentServiceClient(base_url=args.base_url, api_key=args.api_key, timeout=args.timeout)
    if args.command == "env":
        data, error = client.get_environment()
    elif args.command == "map":
        data, error = client.get_config_map()
    else:
        data, error = client.check_log_levels()

    if error:
        print(f"[!] {error['message']} (status {error['status_code']})", file=sys.stderr)
        return 1
    if isinstance(data, str):
        print(data)
    else:
        print(json.dumps(data, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
