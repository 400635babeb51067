"""Command line entrypoint.

Examples::

    $ python -m powervs_sdk --version
    $ python -m powervs_sdk PcloudNetworksGetall --param cloud_instance_id=2f3c...
    $ python -m powervs_sdk pcloud_networks_post --param cloud_instance_id=2f3c... \\
          --param type=vlan --param dns_servers='["9.9.9.9"]'

Parameter values are parsed as JSON when possible and passed as strings
otherwise. Connection settings come from the ``POWERVS_*`` configuration
properties (see :mod:`powervs_sdk.config`).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from .exceptions import PowervsSDKError
from .logging_config import get_logger, setup_logging
from .operations import Operation
from .powervs_v1 import PowervsV1
from .powervs_v1_operations import OPERATIONS
from .version import GIT_COMMIT, VERSION_PRERELEASE, __version__

logger = get_logger(__name__)


def _find_operation(name: str) -> Operation | None:
    if name in OPERATIONS:
        return OPERATIONS[name]
    for op in OPERATIONS.values():
        if op.method_name == name:
            return op
    return None


def _parse_params(pairs: list[str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid --param {pair!r}, expected key=value")
        try:
            params[key] = json.loads(raw)
        except json.JSONDecodeError:
            params[key] = raw
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powervs_sdk",
        description="Call IBM Power Virtual Server API operations",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the SDK version and exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation id (PcloudNetworksGetall) or method name (pcloud_networks_getall)",
    )
    parser.add_argument(
        "--param", "-p",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Operation option; may be repeated",
    )
    return parser


async def run_operation(op: Operation, params: dict[str, Any]) -> int:
    """Invoke one operation with external configuration and print the result."""
    async with PowervsV1.new_instance() as service:
        result, response, error = await service.invoke(op, **params)

    if error is not None:
        logger.error(f"{op.operation_id} failed: {error}")
        return 1

    status = response.status_code if response is not None else None
    logger.info(f"{op.operation_id} succeeded", extra={"status_code": status})
    if result is not None:
        print(json.dumps(result, indent=2, sort_keys=True))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"{__version__}{'-' + VERSION_PRERELEASE if VERSION_PRERELEASE else ''}")
        return 0

    setup_logging(log_level=args.log_level, json_format=args.log_json)
    logger.info(f"PowerVS SDK version {__version__} {VERSION_PRERELEASE} {GIT_COMMIT}")

    if not args.operation:
        return 0

    op = _find_operation(args.operation)
    if op is None:
        logger.error(f"Unknown operation: {args.operation}")
        return 1

    try:
        params = _parse_params(args.param)
        return asyncio.run(run_operation(op, params))
    except (PowervsSDKError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
