"""PowerVS V1 service client.

Every operation in :data:`~powervs_sdk.powervs_v1_operations.OPERATIONS` is
exposed as a coroutine method named after its snake-case operation id::

    async with PowervsV1.new_instance() as service:
        result, response, error = await service.pcloud_networks_getall(
            cloud_instance_id="2f3c...",
        )
        if error:
            print(error)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .authenticators import Authenticator, get_authenticator_from_properties
from .base_service import BaseService
from .config import config_from_properties, get_service_properties
from .exceptions import ValidationError
from .logging_config import get_logger
from .operations import Operation
from .powervs_v1_operations import OPERATIONS
from .response import CallResult

logger = get_logger(__name__)


class PowervsV1(BaseService):
    """Client for the IBM Power Virtual Server API.

    Attributes:
        DEFAULT_SERVICE_URL: Endpoint used when none is configured.
        DEFAULT_SERVICE_NAME: Prefix for external configuration properties.
    """

    DEFAULT_SERVICE_URL = "https://power-iaas.cloud.ibm.com"
    DEFAULT_SERVICE_NAME = "powervs"
    SERVICE_VERSION = "V1"

    def __init__(
        self,
        authenticator: Authenticator,
        service_url: str = DEFAULT_SERVICE_URL,
        service_name: str = DEFAULT_SERVICE_NAME,
        timeout: float = 60.0,
        tls_verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            service_name=service_name,
            service_version=self.SERVICE_VERSION,
            service_url=service_url,
            authenticator=authenticator,
            timeout=timeout,
            tls_verify=tls_verify,
            transport=transport,
        )

    @classmethod
    def new_instance(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> PowervsV1:
        """Build a client from external configuration.

        Reads the credentials file and environment for ``service_name`` and
        applies the URL, authenticator, TLS and retry settings found there.

        Raises:
            ConfigurationError: If the configuration is invalid.
            EnvironmentVariableError: If IBM_CREDENTIALS_FILE names a missing file.
        """
        props = get_service_properties(service_name)
        config = config_from_properties(props)
        authenticator = get_authenticator_from_properties(props)

        service = cls(
            authenticator=authenticator,
            service_url=config.url or cls.DEFAULT_SERVICE_URL,
            service_name=service_name,
            tls_verify=not config.disable_ssl,
            transport=transport,
        )
        if config.enable_retries:
            service.enable_retries(max_retries=config.max_retries, max_interval=config.retry_interval)

        logger.info(
            "PowerVS client created",
            extra={
                "service_name": service_name,
                "service_url": service.service_url,
                "auth_type": authenticator.auth_type,
                "retries_enabled": service.retries_enabled,
            },
        )
        return service

    @staticmethod
    def get_service_url_for_region(region: str) -> str:
        """Return the endpoint for a PowerVS region, e.g. ``us-south``."""
        if not region:
            raise ValueError("region is required")
        return f"https://{region}.power-iaas.cloud.ibm.com"

    @staticmethod
    def operation(operation_id: str) -> Operation:
        """Look up an operation descriptor.

        Raises:
            KeyError: If the operation is unknown.
        """
        try:
            return OPERATIONS[operation_id]
        except KeyError:
            raise KeyError(f"Unknown operation: {operation_id}") from None

    async def call(
        self,
        operation_id: str,
        headers: Mapping[str, str] | None = None,
        extra_properties: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> CallResult:
        """Invoke an operation by its id.

        An unknown id comes back as a ValidationError in the result.
        """
        op = OPERATIONS.get(operation_id)
        if op is None:
            return CallResult(None, None, ValidationError(
                f"Unknown operation: {operation_id}", fields=["operation_id"]
            ))
        return await self.invoke(op, headers=headers, extra_properties=extra_properties, **options)


def _operation_method(op: Operation):
    async def method(
        self: PowervsV1,
        headers: Mapping[str, str] | None = None,
        extra_properties: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> CallResult:
        return await self.invoke(op, headers=headers, extra_properties=extra_properties, **options)

    method.__name__ = op.method_name
    method.__qualname__ = f"PowervsV1.{op.method_name}"
    method.__doc__ = op.describe()
    return method


for _op in OPERATIONS.values():
    if hasattr(PowervsV1, _op.method_name):
        raise RuntimeError(f"{_op.operation_id} clashes with PowervsV1.{_op.method_name}")
    setattr(PowervsV1, _op.method_name, _operation_method(_op))
del _op
