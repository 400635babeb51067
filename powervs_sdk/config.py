"""External configuration loader for the PowerVS SDK.

Service properties are looked up by service name in a credentials file and
in the process environment, in that order of increasing precedence. Each key
is the upper-cased service name, an underscore, and the property::

    POWERVS_URL=https://us-south.power-iaas.cloud.ibm.com
    POWERVS_AUTH_TYPE=iam
    POWERVS_APIKEY=...

Example:
    >>> from powervs_sdk.config import load_config
    >>> config = load_config("powervs")
    >>> print(config.url)

Environment Variables:
    IBM_CREDENTIALS_FILE: Path to a credentials file (optional). Without it,
        ``ibm-credentials.env`` is looked up in the working directory and
        then in the home directory.
    <SERVICE>_URL: Service endpoint URL.
    <SERVICE>_AUTH_TYPE: One of iam, bearerToken, basic, noAuth.
    <SERVICE>_APIKEY, <SERVICE>_AUTH_URL: IAM authentication material.
    <SERVICE>_BEARER_TOKEN: Bearer token authentication.
    <SERVICE>_USERNAME, <SERVICE>_PASSWORD: Basic authentication.
    <SERVICE>_DISABLE_SSL: Skip TLS verification (default: false).
    <SERVICE>_ENABLE_RETRIES: Enable automatic retries (default: false).
    <SERVICE>_MAX_RETRIES: Maximum retry attempts (default: 4).
    <SERVICE>_RETRY_INTERVAL: Maximum seconds between retries (default: 30).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError, EnvironmentVariableError
from .logging_config import get_logger

logger = get_logger(__name__)

CREDENTIALS_FILE_ENV = "IBM_CREDENTIALS_FILE"
DEFAULT_CREDENTIALS_FILE_NAME = "ibm-credentials.env"


class ServiceConfig(BaseModel):
    """Connection settings for one service.

    Attributes:
        url: Service endpoint URL (optional, the client has a default).
        disable_ssl: Skip TLS certificate verification.
        enable_retries: Enable automatic retries.
        max_retries: Maximum retry attempts.
        retry_interval: Maximum seconds to wait between attempts.
    """

    url: str | None = Field(
        default=None,
        description="Service endpoint URL",
    )
    disable_ssl: bool = Field(
        default=False,
        description="Skip TLS certificate verification",
    )
    enable_retries: bool = Field(
        default=False,
        description="Enable automatic retries",
    )
    max_retries: int = Field(
        default=4,
        ge=0,
        le=10,
        description="Maximum retry attempts",
    )
    retry_interval: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Maximum seconds between retries",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Require an http(s) URL and strip any trailing slash."""
        if v is None or v == "":
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"service URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    model_config = {"extra": "ignore"}


def _env_prefix(service_name: str) -> str:
    return service_name.upper().replace("-", "_") + "_"


def find_credentials_file() -> Path | None:
    """Locate the credentials file.

    Raises:
        EnvironmentVariableError: If IBM_CREDENTIALS_FILE names a missing file.
    """
    explicit = os.getenv(CREDENTIALS_FILE_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise EnvironmentVariableError(
                CREDENTIALS_FILE_ENV,
                message=f"Credentials file not found: {explicit}",
            )
        return path

    for directory in (Path.cwd(), Path.home()):
        candidate = directory / DEFAULT_CREDENTIALS_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def _select(values: dict[str, str | None], prefix: str) -> dict[str, str]:
    return {
        key[len(prefix):]: value
        for key, value in values.items()
        if key.upper().startswith(prefix) and value is not None
    }


def get_service_properties(service_name: str) -> dict[str, str]:
    """Return the external properties configured for ``service_name``.

    Keys are the property names without the service prefix (``URL``,
    ``APIKEY``, ...). Environment variables override the credentials file.
    """
    prefix = _env_prefix(service_name)
    props: dict[str, str] = {}

    credentials_file = find_credentials_file()
    if credentials_file is not None:
        logger.debug("Reading credentials file", extra={"path": str(credentials_file)})
        props.update(_select(dotenv_values(credentials_file), prefix))

    props.update(_select(dict(os.environ), prefix))
    return {key.upper(): value for key, value in props.items()}


def _as_bool(value: str | None) -> bool:
    return (value or "false").strip().lower() == "true"


def config_from_properties(props: dict[str, str]) -> ServiceConfig:
    """Validate raw properties into a ServiceConfig.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    try:
        return ServiceConfig(
            url=props.get("URL"),
            disable_ssl=_as_bool(props.get("DISABLE_SSL")),
            enable_retries=_as_bool(props.get("ENABLE_RETRIES")),
            max_retries=int(props.get("MAX_RETRIES", "4")),
            retry_interval=float(props.get("RETRY_INTERVAL", "30")),
        )
    except (ValueError, ValidationError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(service_name: str) -> ServiceConfig:
    """Load and validate the configuration for ``service_name``."""
    config = config_from_properties(get_service_properties(service_name))
    logger.info(
        "Configuration loaded successfully",
        extra={"service_name": service_name, "service_url": config.url},
    )
    return config
