"""SDK-specific request headers.

Every generated service method attaches the headers returned by
:func:`get_sdk_headers`. The analytics collector parses the ``User-Agent``
value, which looks like::

    powervs-python-sdk/0.1.0 (lang=python; arch=x86_64; os=Linux; python.version=3.12.1)

The SDK name must end in ``-sdk`` for usage data to be gathered.
"""

from __future__ import annotations

import platform

from .version import __version__

SDK_NAME = "powervs-python-sdk"
HEADER_NAME_USER_AGENT = "User-Agent"
HEADER_NAME_ID = "ID"
HEADER_NAME_SCHEME = "scheme"

_SYSTEM_INFO = "(lang=python; arch={}; os={}; python.version={})".format(
    platform.machine(), platform.system(), platform.python_version()
)
_USER_AGENT = f"{SDK_NAME}/{__version__} {_SYSTEM_INFO}"


def get_system_info() -> str:
    return _SYSTEM_INFO


def get_user_agent_info() -> str:
    return _USER_AGENT


def pascal_to_lower_with_dot(value: str) -> str:
    """Convert an operation name to its dotted analytics form.

    A dot is inserted before every uppercase letter except the first
    character, then everything is lowercased::

        >>> pascal_to_lower_with_dot("ServiceBrokerHealthHead")
        'service.broker.health.head'
    """
    parts = []
    for index, char in enumerate(value):
        if index > 0 and char.isupper():
            parts.append(".")
        parts.append(char.lower())
    return "".join(parts)


def get_sdk_headers(service_name: str, service_version: str, operation_id: str) -> dict[str, str]:
    """Return the SDK headers for one outgoing request.

    Args:
        service_name: Service name from the API definition (e.g. "powervs").
        service_version: Service version from the API definition (e.g. "V1").
        operation_id: Operation name from the API definition
            (e.g. "PcloudNetworksGet").

    Returns:
        A new dict holding ``User-Agent``, ``ID`` and ``scheme``.
    """
    return {
        HEADER_NAME_USER_AGENT: get_user_agent_info(),
        HEADER_NAME_ID: pascal_to_lower_with_dot(operation_id),
        HEADER_NAME_SCHEME: "http",
    }
