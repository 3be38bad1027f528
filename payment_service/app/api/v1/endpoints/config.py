"""
Configuration diagnostic endpoints for API v1.

These routes let operators inspect a running payment service:

* ``GET /env`` dumps the environment and runtime properties,
* ``GET /map`` dumps the service configuration as JSON,
* ``GET /log`` writes one line at every severity so that the deployed
  log threshold can be checked in the log sink.

``ConfigController`` is used as a class dependency, so FastAPI builds a
fresh instance for every request.  The cached service name therefore
never crosses requests.
"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse, Response

from payment_service import __version__
from payment_service.app.core.logging_config import TRACE
from payment_service.app.schemas.service_config import ServiceConfiguration


logger = logging.getLogger(__name__)

router = APIRouter()

LOG_CHECK_RESPONSE = "HealthService|See the log for details"
NO_SERVICE_NAME = "|NoServiceName"


def get_service_config(request: Request) -> Optional[ServiceConfiguration]:
    """Return the configuration wired on the application, if any."""
    return getattr(request.app.state, "service_config", None)


class ConfigController:
    """Request‑scoped handler logic for the configuration endpoints."""

    def __init__(
        self,
        request: Request,
        service_config: Optional[ServiceConfiguration] = Depends(get_service_config),
    ) -> None:
        self.request = request
        self.service_config = service_config
        self._service_name: Optional[str] = None

    def name(self) -> str:
        """Return ``|<service name>Service``, computed once per instance."""
        if self._service_name is None:
            if self.service_config is None:
                logger.info("|Error wiring Service config!!!")
                self._service_name = NO_SERVICE_NAME
            else:
                self._service_name = "|" + self.service_config.service_name + "Service"
                logger.info("|Version=%s", __version__)
        return self._service_name

    def _require_config(self, detail: str) -> ServiceConfiguration:
        """Return the wired configuration or answer 404 with ``detail``."""
        if self.service_config is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        return self.service_config

    def environment(self) -> Dict[str, str]:
        """Return the environment and runtime properties of the process.

        The properties are collected at call time.  If the service
        configuration is not wired, a 404 ``HTTPException`` with
        ``Service Env is not ready.`` is raised.
        """
        logger.info("%s|Request to Get Environment Vars Check.. ", self.name())
        self._debug_request_uri()
        return self._require_config("Service Env is not ready.").system_properties()

    def config_map(self) -> str:
        """Return the configuration serialised to JSON and log it.

        The string is returned as produced by the configuration, it is
        not parsed again.  Without a wired configuration a 404
        ``HTTPException`` with ``Service ConfigMap is not ready.`` is
        raised.
        """
        service_config = self._require_config("Service ConfigMap is not ready.")
        json_str = service_config.to_json_string()
        logger.info("%s|Request to Get ServiceConfiguration .1. %s", self.name(), json_str)
        self._debug_request_uri()
        return json_str

    def log_levels(self) -> str:
        """Log one line at TRACE, DEBUG, INFO, WARNING and ERROR.

        Which lines reach the log sink depends on the configured
        threshold; the returned confirmation text never does.
        """
        logger.info("|Request to Log Level.. ")
        logger.log(TRACE, "HealthService|This is TRACE level message")
        logger.debug("HealthService|This is a DEBUG level message")
        logger.info("HealthService|This is an INFO level message")
        logger.warning("HealthService|This is a WARN level message")
        logger.error("HealthService|This is an ERROR level message")
        return LOG_CHECK_RESPONSE

    def print_request_uri(self, request: Optional[Request] = None) -> str:
        """Log the request path split into its segments and return the line.

        ``/api/v1/x`` gives ``"Params Size = 4 : |api|v1|x|\\n"``.  The
        leading and interior empty segments are kept, trailing ones are
        dropped, so ``/`` gives ``"Params Size = 0 : \\n"``.
        """
        request = request or self.request
        segments = request.url.path.split("/")
        while segments and segments[-1] == "":
            segments.pop()
        line = f"Params Size = {len(segments)} : " + "".join(f"{s}|" for s in segments) + "\n"
        logger.info(line)
        return line

    def _debug_request_uri(self) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            self.print_request_uri()


@router.get(
    "/env",
    response_model=Dict[str, str],
    summary="Show the Environment Settings",
    responses={404: {"description": "Service Env is not ready."}},
)
def get_env(controller: ConfigController = Depends()) -> Dict[str, str]:
    """Return every environment and runtime property of the process."""
    return controller.environment()


@router.get(
    "/map",
    summary="Show the ConfigMap Settings",
    response_class=Response,
    responses={
        200: {"content": {"application/json": {}}},
        404: {"description": "Service ConfigMap is not ready."},
    },
)
def get_config_map(controller: ConfigController = Depends()) -> Response:
    """Return the service configuration exactly as it serialises itself."""
    return Response(content=controller.config_map(), media_type="application/json")


@router.get("/log", summary="Service Log Levels", response_class=PlainTextResponse)
def log_levels(controller: ConfigController = Depends()) -> str:
    """Emit a line at each severity; the response never depends on the threshold."""
    return controller.log_levels()
