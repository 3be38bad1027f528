"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables or the container's ConfigMap.

Settings are deliberately flat strings and numbers.  The richer
``ServiceConfiguration`` object that the diagnostic endpoints expose
is built from these values in ``schemas.service_config``.
"""

import os
from dataclasses import dataclass

from payment_service import __version__


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Payment Service")
    api_version: str = os.getenv("API_VERSION", __version__)
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Identity of the service.  ``service_name`` feeds the
    # ``|<name>Service`` prefix used in diagnostic log lines.
    service_org: str = os.getenv("SERVICE_ORG", "Fusion Air")
    service_name: str = os.getenv("SERVICE_NAME", "Payments")

    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "9090"))
    server_version: str = os.getenv("SERVER_VERSION", __version__)
    build_number: int = int(os.getenv("BUILD_NUMBER", "0"))
    build_date: str = os.getenv("BUILD_DATE", "")

    service_api_prefix: str = os.getenv("SERVICE_API_PREFIX", "/api")
    service_api_version: str = os.getenv("SERVICE_API_VERSION", "v1")
    service_api_name: str = os.getenv("SERVICE_API_NAME", "payments")

    # Free form application properties.  ``APP_PROPERTY_LIST`` is a
    # comma‑separated list (``a,b,c``) and ``APP_PROPERTY_MAP`` a
    # comma‑separated list of ``key=value`` pairs.
    app_property_list: str = os.getenv("APP_PROPERTY_LIST", "")
    app_property_map: str = os.getenv("APP_PROPERTY_MAP", "")

    remote_host: str = os.getenv("REMOTE_HOST", "127.0.0.1")
    remote_port: int = int(os.getenv("REMOTE_PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
