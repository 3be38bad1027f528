"""
Pydantic model for the service configuration.

``ServiceConfiguration`` is the object the configuration endpoints
report on.  It is built once at start‑up from ``Settings`` and then
shared, read only, for the lifetime of the process.  Besides its own
fields it can describe the process it runs in: ``system_properties``
gathers the environment variables together with a handful of runtime
properties.
"""

import getpass
import os
import platform
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from payment_service import __version__
from payment_service.app.core.config import Settings


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _split_map(raw: str) -> Dict[str, str]:
    """Parse ``"a=1,b=2"`` into ``{"a": "1", "b": "2"}``.

    Entries without ``=`` are kept with an empty value.
    """
    result: Dict[str, str] = {}
    for item in _split_list(raw):
        key, _, value = item.partition("=")
        result[key.strip()] = value.strip()
    return result


def _user_name() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # No passwd entry and no LOGNAME/USER, common in slim containers.
        return ""


class ServiceConfiguration(BaseModel):
    """Identity and runtime configuration of the service."""

    service_org: str = Field("Fusion Air", description="Organisation owning the service")
    service_name: str = Field("Payments", description="Short service name, e.g. Payments")
    server_host: str = "0.0.0.0"
    server_port: int = 9090
    server_version: str = __version__
    build_number: int = 0
    build_date: str = ""
    service_api_prefix: str = "/api"
    service_api_version: str = "v1"
    service_api_name: str = "payments"
    service_api_path: str = Field("", description="Derived from prefix, version and name")
    app_property_list: List[str] = Field(default_factory=list)
    app_property_map: Dict[str, str] = Field(default_factory=dict)
    remote_host: str = "127.0.0.1"
    remote_port: int = 8080

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def _derive_api_path(self) -> "ServiceConfiguration":
        if not self.service_api_path:
            parts = [self.service_api_prefix, self.service_api_version, self.service_api_name]
            self.service_api_path = "/" + "/".join(p.strip("/") for p in parts if p.strip("/"))
        return self

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceConfiguration":
        """Build the configuration from environment‑backed ``Settings``."""
        return cls(
            service_org=settings.service_org,
            service_name=settings.service_name,
            server_host=settings.server_host,
            server_port=settings.server_port,
            server_version=settings.server_version,
            build_number=settings.build_number,
            build_date=settings.build_date,
            service_api_prefix=settings.service_api_prefix,
            service_api_version=settings.service_api_version,
            service_api_name=settings.service_api_name,
            app_property_list=_split_list(settings.app_property_list),
            app_property_map=_split_map(settings.app_property_map),
            remote_host=settings.remote_host,
            remote_port=settings.remote_port,
        )

    def system_properties(self) -> Dict[str, str]:
        """Return the environment and runtime properties of this process.

        Environment variables come first; runtime properties and the
        ``app.*`` entries of ``app_property_map`` are laid over them.
        The result is rebuilt on every call so it always reflects the
        current environment.
        """
        props: Dict[str, str] = dict(os.environ)
        props.update(
            {
                "python.version": platform.python_version(),
                "python.implementation": platform.python_implementation(),
                "os.name": platform.system(),
                "os.version": platform.release(),
                "os.arch": platform.machine(),
                "user.dir": os.getcwd(),
                "user.name": _user_name(),
                "pid": str(os.getpid()),
            }
        )
        for key, value in self.app_property_map.items():
            props[f"app.{key}"] = value
        return props

    def to_json_string(self) -> str:
        """Serialise the whole configuration to a JSON string."""
        return self.model_dump_json()
