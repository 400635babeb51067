"""Declarative REST operation descriptors.

Each PowerVS endpoint is described by one :class:`Operation`: HTTP method,
path template, parameters with their location, the expected success status
and the shape of the result. :meth:`Operation.build_request` turns keyword
options into a :class:`PreparedRequest`, validating them first so that a
bad call never touches the network.

Example:
    >>> op = Operation.define(
    ...     "PcloudNetworksGet",
    ...     "GET",
    ...     "/pcloud/v1/cloud-instances/{cloud_instance_id}/networks/{network_id}",
    ... )
    >>> op.build_request({"cloud_instance_id": "abc", "network_id": "n1"}).path
    '/pcloud/v1/cloud-instances/abc/networks/n1'
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, NamedTuple
from urllib.parse import quote

from pydantic import BaseModel

from .exceptions import ValidationError

_PLACEHOLDER = re.compile(r"{([a-z0-9_]+)}")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(name: str) -> str:
    """Convert a camel, pascal or dashed name to snake case.

    >>> snake_case("networkIDs"), snake_case("PcloudV2VolumesPost")
    ('network_ids', 'pcloud_v2_volumes_post')
    """
    name = name.replace("IDs", "Ids").replace("-", "_")
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class ParamLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    # The value itself is the whole JSON body.
    BODY_ROOT = "body_root"


class ResultKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    NONE = "none"


@dataclass(frozen=True)
class Parameter:
    """One option accepted by an operation.

    Attributes:
        name: Python keyword name.
        wire_name: Name on the wire (JSON key, query key or header name).
        location: Where the value goes in the request.
        required: Whether the option must be supplied.
    """

    name: str
    wire_name: str
    location: ParamLocation
    required: bool = False

    @classmethod
    def parse(cls, token: str, location: ParamLocation) -> Parameter:
        """Parse a compact token such as ``"networkIDs*"`` or ``"t=timeout"``.

        A trailing ``*`` marks the parameter required; ``wire=name`` sets the
        Python name explicitly; a leading ``@`` marks a whole-body value.
        """
        required = token.endswith("*")
        token = token.rstrip("*")
        if token.startswith("@"):
            name = token[1:]
            return cls(name=name, wire_name=name, location=ParamLocation.BODY_ROOT, required=required)
        wire_name, _, name = token.partition("=")
        return cls(name=name or snake_case(wire_name), wire_name=wire_name,
                   location=location, required=required)


class PreparedRequest(NamedTuple):
    """Everything needed to send one HTTP request, minus auth."""

    method: str
    path: str
    params: dict[str, str]
    headers: dict[str, str]
    json: Any = None


@dataclass(frozen=True)
class Operation:
    """Description of one REST operation.

    Attributes:
        operation_id: Pascal-case name from the API definition.
        method: HTTP method.
        path: Path template with ``{placeholder}`` segments.
        parameters: Accepted options.
        status: Expected success status code.
        result: Shape of the decoded success body.
        summary: One-line description.
    """

    operation_id: str
    method: str
    path: str
    parameters: tuple[Parameter, ...] = ()
    status: int = 200
    result: ResultKind = ResultKind.OBJECT
    summary: str = ""
    _by_name: dict[str, Parameter] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: dict[str, Parameter] = {}
        for param in self.parameters:
            if param.name in by_name:
                raise ValueError(f"{self.operation_id}: duplicate parameter {param.name}")
            by_name[param.name] = param
        placeholders = set(_PLACEHOLDER.findall(self.path))
        path_params = {p.name for p in self.parameters if p.location is ParamLocation.PATH}
        if placeholders != path_params:
            raise ValueError(f"{self.operation_id}: path parameters do not match {self.path}")
        roots = [p for p in self.parameters if p.location is ParamLocation.BODY_ROOT]
        if roots and any(p.location is ParamLocation.BODY for p in self.parameters):
            raise ValueError(f"{self.operation_id}: body_root cannot be mixed with body fields")
        object.__setattr__(self, "_by_name", by_name)

    @classmethod
    def define(
        cls,
        operation_id: str,
        method: str,
        path: str,
        *,
        query: Iterable[str] = (),
        headers: Iterable[str] = (),
        body: Iterable[str] = (),
        status: int = 200,
        result: ResultKind = ResultKind.OBJECT,
        summary: str = "",
    ) -> Operation:
        """Build an operation from compact parameter tokens.

        Path parameters are taken from the template placeholders and are
        always required.
        """
        params = [
            Parameter(name=name, wire_name=name, location=ParamLocation.PATH, required=True)
            for name in _PLACEHOLDER.findall(path)
        ]
        params += [Parameter.parse(t, ParamLocation.QUERY) for t in query]
        params += [Parameter.parse(t, ParamLocation.HEADER) for t in headers]
        params += [Parameter.parse(t, ParamLocation.BODY) for t in body]
        return cls(
            operation_id=operation_id,
            method=method.upper(),
            path=path,
            parameters=tuple(params),
            status=status,
            result=result,
            summary=summary,
        )

    @property
    def method_name(self) -> str:
        return snake_case(self.operation_id)

    @property
    def has_json_body(self) -> bool:
        return any(p.location in (ParamLocation.BODY, ParamLocation.BODY_ROOT) for p in self.parameters)

    @property
    def required_parameters(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def parameter(self, name: str) -> Parameter | None:
        return self._by_name.get(name)

    def validate(self, options: Mapping[str, Any]) -> None:
        """Raise ValidationError for unknown or missing options."""
        unknown = sorted(set(options) - set(self._by_name))
        if unknown:
            raise ValidationError(
                f"{self.operation_id}: unknown option(s): {', '.join(unknown)}", fields=unknown
            )
        missing = [
            p.name for p in self.parameters if p.required and _is_missing(options.get(p.name))
        ]
        if missing:
            raise ValidationError(
                f"{self.operation_id}: missing required option(s): {', '.join(missing)}",
                fields=missing,
            )

    def build_request(
        self,
        options: Mapping[str, Any],
        extra_properties: Mapping[str, Any] | None = None,
    ) -> PreparedRequest:
        """Validate ``options`` and assemble the request.

        Args:
            options: Keyword options keyed by Python parameter name.
            extra_properties: Additional JSON body members.

        Returns:
            The prepared request.

        Raises:
            ValidationError: If options are missing, unknown, or collide with
                extra properties.
        """
        self.validate(options)

        path_values: dict[str, str] = {}
        query: dict[str, str] = {}
        headers: dict[str, str] = {}
        body: dict[str, Any] = {}
        body_root: Any = None

        for param in self.parameters:
            value = options.get(param.name)
            if value is None:
                continue
            if param.location is ParamLocation.PATH:
                path_values[param.name] = quote(_to_text(value), safe="")
            elif param.location is ParamLocation.QUERY:
                query[param.wire_name] = _to_text(value)
            elif param.location is ParamLocation.HEADER:
                headers[param.wire_name] = _to_text(value)
            elif param.location is ParamLocation.BODY:
                body[param.wire_name] = to_json(value)
            else:
                body_root = to_json(value)

        payload: Any = None
        if self.has_json_body:
            payload = body_root if body_root is not None else body

        if extra_properties:
            payload = self._merge_extra(payload, extra_properties)

        path = _PLACEHOLDER.sub(lambda m: path_values[m.group(1)], self.path)
        return PreparedRequest(self.method, path, query, headers, payload)

    def _merge_extra(self, payload: Any, extra_properties: Mapping[str, Any]) -> dict[str, Any]:
        if not self.has_json_body:
            raise ValidationError(
                f"{self.operation_id}: operation does not take a request body",
                fields=["extra_properties"],
            )
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValidationError(
                f"{self.operation_id}: extra properties need a JSON object body",
                fields=["extra_properties"],
            )
        known = {p.wire_name for p in self.parameters if p.location is ParamLocation.BODY}
        known.update(payload)
        collisions = sorted(known & set(extra_properties))
        if collisions:
            raise ValidationError(
                f"{self.operation_id}: extra properties shadow known field(s): "
                f"{', '.join(collisions)}",
                fields=collisions,
            )
        merged = dict(payload)
        merged.update({key: to_json(value) for key, value in extra_properties.items()})
        return merged

    def describe(self) -> str:
        """Return a docstring-style description of the operation."""
        lines = [self.summary or self.operation_id, "", f"{self.method} {self.path}"]
        if self.parameters:
            lines += ["", "Options:"]
            for p in self.parameters:
                flag = "required" if p.required else "optional"
                lines.append(f"    {p.name} ({p.location.value}, {flag})")
        return "\n".join(lines)


def to_json(value: Any) -> Any:
    """Convert a value into something ``json.dumps`` accepts."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: to_json(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json(item) for item in value]
    return value


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_to_text(item) for item in value)
    return str(value)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
        return True
    return False
