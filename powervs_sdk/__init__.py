"""Python SDK for the IBM Power Virtual Server (PowerVS) REST API.

This package provides an asyncio client covering the PowerVS V1 API surface:
cloud instances, PVM instances, networks, volumes, images, VPN, placement
groups and the service broker endpoints.

Features:
    - One coroutine per API operation, returning ``(result, response, error)``
    - IAM, bearer token and basic authentication
    - Configurable retries with bounded exponential backoff
    - Configuration from ``ibm-credentials.env`` files and environment variables

Example:
    Using as a library::

        from powervs_sdk import PowervsV1

        async with PowervsV1.new_instance() as service:
            result, response, error = await service.pcloud_cloudinstances_get(
                cloud_instance_id="2f3c...",
            )

    Using as a CLI tool::

        $ python -m powervs_sdk PcloudCloudinstancesGet --param cloud_instance_id=2f3c...

Attributes:
    __version__: Package version following semantic versioning.
"""

from .version import __version__

# Import public API
from .authenticators import (
    BasicAuthenticator,
    BearerTokenAuthenticator,
    IamAuthenticator,
    NoAuthAuthenticator,
    get_authenticator_from_properties,
)
from .base_service import BaseService
from .config import load_config
from .exceptions import APIError, DecodeError, NetworkError, PowervsSDKError, ValidationError
from .headers import get_sdk_headers
from .powervs_v1 import PowervsV1
from .response import CallResult, DetailedResponse

__all__ = [
    "__version__",
    "APIError",
    "BaseService",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "CallResult",
    "DecodeError",
    "DetailedResponse",
    "IamAuthenticator",
    "NetworkError",
    "NoAuthAuthenticator",
    "PowervsSDKError",
    "PowervsV1",
    "ValidationError",
    "get_authenticator_from_properties",
    "get_sdk_headers",
    "load_config",
]
