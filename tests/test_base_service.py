"""Tests for the generic invoker."""

import json
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import httpx
import pytest

from powervs_sdk.authenticators import BearerTokenAuthenticator, NoAuthAuthenticator
from powervs_sdk.base_service import BaseService, parse_retry_after
from powervs_sdk.exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    NetworkError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
)
from powervs_sdk.operations import Operation, ResultKind

BASE_URL = "https://us-south.power-iaas.cloud.ibm.com"

NETWORK_GET = Operation.define(
    "PcloudNetworksGet",
    "GET",
    "/pcloud/v1/cloud-instances/{cloud_instance_id}/networks/{network_id}",
)
NETWORK_POST = Operation.define(
    "PcloudNetworksPost",
    "POST",
    "/pcloud/v1/cloud-instances/{cloud_instance_id}/networks",
    body=("type*", "name"),
    status=201,
)
DHCP_GETALL = Operation.define(
    "PcloudDhcpGetall",
    "GET",
    "/pcloud/v1/cloud-instances/{cloud_instance_id}/services/dhcp",
    result=ResultKind.ARRAY,
)
HEALTH_HEAD = Operation.define("ServiceBrokerHealthHead", "HEAD", "/broker/v1/health", result=ResultKind.NONE)

NETWORK = {"networkID": "n1", "name": "net", "type": "vlan"}


def make_service(server, authenticator=None):
    return BaseService(
        "powervs",
        "V1",
        BASE_URL,
        authenticator or NoAuthAuthenticator(),
        transport=server.transport(),
    )


class TestBaseServiceInit:
    """Tests for BaseService construction and settings."""

    def test_requires_url(self):
        with pytest.raises(ValueError, match="service_url"):
            BaseService("powervs", "V1", "", NoAuthAuthenticator())

    def test_requires_authenticator(self):
        with pytest.raises(ValueError, match="authenticator"):
            BaseService("powervs", "V1", BASE_URL, None)

    def test_trailing_slash_stripped(self):
        service = BaseService("powervs", "V1", BASE_URL + "/", NoAuthAuthenticator())
        assert service.service_url == BASE_URL
        service.set_service_url("https://other.example.com/")
        assert service.service_url == "https://other.example.com"

    def test_retries_disabled_by_default(self, server):
        service = make_service(server)
        assert service.retries_enabled is False
        assert service.client is None

    def test_enable_and_disable_retries(self, server):
        service = make_service(server)
        service.enable_retries(max_retries=3, max_interval=5, retry_status_codes=[503])
        assert service.retries_enabled is True
        assert service.max_retries == 3
        assert service.retry_status_codes == frozenset({503})
        service.disable_retries()
        assert service.retries_enabled is False

    @pytest.mark.parametrize("kwargs", [{"max_retries": -1}, {"max_interval": 0}])
    def test_enable_retries_rejects_bad_values(self, server, kwargs):
        with pytest.raises(ValueError):
            make_service(server).enable_retries(**kwargs)

    def test_backoff(self, server):
        service = make_service(server)
        service.enable_retries(max_interval=3)
        assert service._backoff(1) == 1
        assert service._backoff(2) == 2
        assert service._backoff(3) == 3
        assert service._backoff(1, "10") == 3
        assert service._backoff(1, "0.5") == 0.5
        assert service._backoff(2, "soon") == 2


class TestInvokeSuccess:
    """Tests for successful calls."""

    @pytest.mark.asyncio
    async def test_get_object(self, server):
        server.reply(200, NETWORK)
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert error is None
        assert result == NETWORK
        assert response.status_code == 200
        assert response.result == NETWORK
        assert server.call_count == 1
        request = server.requests[0]
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/pcloud/v1/cloud-instances/ci/networks/n1"

    @pytest.mark.asyncio
    async def test_sdk_headers_sent(self, server):
        server.reply(200, NETWORK)
        async with make_service(server) as service:
            await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        headers = server.requests[0].headers
        assert headers["ID"] == "pcloud.networks.get"
        assert headers["scheme"] == "http"
        assert headers["User-Agent"].startswith("powervs-python-sdk/")
        assert headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_header_precedence(self, server):
        server.reply(200, NETWORK)
        service = make_service(server)
        service.set_default_headers({"X-Team": "default", "User-Agent": "default-agent"})
        await service.invoke(
            NETWORK_GET,
            headers={"X-Team": "caller", "ID": "custom.id"},
            cloud_instance_id="ci",
            network_id="n1",
        )
        await service.close()

        headers = server.requests[0].headers
        assert headers["X-Team"] == "caller"
        assert headers["ID"] == "custom.id"
        # SDK headers override defaults
        assert headers["User-Agent"].startswith("powervs-python-sdk/")

    @pytest.mark.asyncio
    async def test_caller_headers_override_case_insensitively(self, server):
        server.reply(200, NETWORK)
        service = make_service(server)
        service.set_default_headers({"x-team": "default"})
        await service.invoke(
            NETWORK_GET,
            headers={"user-agent": "custom/1", "id": "custom.id", "X-TEAM": "caller"},
            cloud_instance_id="ci",
            network_id="n1",
        )
        await service.close()

        headers = server.requests[0].headers
        assert headers.get_list("User-Agent") == ["custom/1"]
        assert headers.get_list("ID") == ["custom.id"]
        assert headers.get_list("X-Team") == ["caller"]

    @pytest.mark.asyncio
    async def test_post_body(self, server):
        server.reply(201, NETWORK)
        async with make_service(server) as service:
            result, response, error = await service.invoke(
                NETWORK_POST, cloud_instance_id="ci", type="vlan", name="net"
            )

        assert error is None
        assert response.status_code == 201
        request = server.requests[0]
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"type": "vlan", "name": "net"}

    @pytest.mark.asyncio
    async def test_other_success_status_accepted(self, server):
        server.reply(202, NETWORK)
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_POST, cloud_instance_id="ci", type="vlan")

        assert error is None
        assert result == NETWORK
        assert response.status_code == 202

    @pytest.mark.asyncio
    async def test_array_result(self, server):
        server.reply(200, [{"id": "d1"}])
        async with make_service(server) as service:
            result, _, error = await service.invoke(DHCP_GETALL, cloud_instance_id="ci")

        assert error is None
        assert result == [{"id": "d1"}]

    @pytest.mark.asyncio
    async def test_no_content(self, server):
        server.reply(204)
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert error is None
        assert result is None
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_head(self, server):
        server.reply(200)
        async with make_service(server) as service:
            result, response, error = await service.invoke(HEALTH_HEAD)

        assert error is None
        assert result is None
        assert server.requests[0].method == "HEAD"

    @pytest.mark.asyncio
    async def test_authenticator_applied(self, server):
        server.reply(200, NETWORK)
        async with make_service(server, BearerTokenAuthenticator("tok")) as service:
            await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert server.requests[0].headers["Authorization"] == "Bearer tok"


class TestInvokeErrors:
    """Tests for failures returned as error values."""

    @pytest.mark.asyncio
    async def test_validation_error_sends_nothing(self, server):
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci")

        assert isinstance(error, ValidationError)
        assert error.fields == ["network_id"]
        assert result is None
        assert response is None
        assert server.call_count == 0

    @pytest.mark.asyncio
    async def test_not_found(self, server):
        server.reply(404, {"description": "network n1 not found", "error": "not found"})
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert result is None
        assert isinstance(error, ResourceNotFoundError)
        assert error.status_code == 404
        assert error.message == "network n1 not found"
        assert str(error) == "Error: network n1 not found, Status code: 404"
        assert response is error.response
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_errors_array_payload(self, server):
        server.reply(400, {"errors": [{"code": "bad_field", "message": "name is invalid"}]})
        async with make_service(server) as service:
            _, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert type(error) is APIError
        assert error.code == "bad_field"
        assert error.message == "name is invalid"
        assert error.errors == [{"code": "bad_field", "message": "name is invalid"}]

    @pytest.mark.asyncio
    async def test_plain_text_error(self, server):
        server.reply(401, content=b"token expired")
        async with make_service(server) as service:
            _, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert isinstance(error, AuthenticationError)
        assert error.message == "token expired"
        assert response.text == "token expired"

    @pytest.mark.asyncio
    async def test_wrong_shape_is_decode_error(self, server):
        server.reply(200, [NETWORK])
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert result is None
        assert isinstance(error, DecodeError)
        assert error.response is response
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_invalid_json_is_decode_error(self, server):
        server.reply(200, content=b"<html>", headers={"Content-Type": "text/html"})
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert result is None
        assert isinstance(error, DecodeError)
        assert response.text == "<html>"

    @pytest.mark.asyncio
    async def test_network_error(self, server):
        server.fail(lambda request: httpx.ConnectError("connection refused", request=request))
        async with make_service(server) as service:
            result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert result is None
        assert response is None
        assert isinstance(error, NetworkError)
        assert error.attempts == 1
        assert isinstance(error.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_redirect_loop_is_network_error(self, server):
        loop_url = f"{BASE_URL}/broker/v1/health"
        server.reply(302, headers={"Location": loop_url})
        service = make_service(server)
        service.enable_retries(max_retries=3, max_interval=0.01)
        result, response, error = await service.invoke(HEALTH_HEAD)
        await service.close()

        assert result is None
        assert response is None
        assert isinstance(error, NetworkError)
        assert isinstance(error.cause, httpx.TooManyRedirects)
        assert error.attempts == 1


class TestRetries:
    """Tests for the retry policy."""

    @pytest.mark.asyncio
    async def test_retry_then_succeed(self, server):
        server.reply(503, {"message": "busy"}).reply(503, {"message": "busy"}).reply(200, NETWORK)
        service = make_service(server)
        service.enable_retries(max_retries=3, max_interval=0.01)
        result, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")
        await service.close()

        assert error is None
        assert result == NETWORK
        assert server.call_count == 3

    @pytest.mark.asyncio
    async def test_retries_exhausted(self, server):
        server.reply(429, {"message": "slow down"}, headers={"Retry-After": "0"})
        service = make_service(server)
        service.enable_retries(max_retries=2, max_interval=0.01)
        _, response, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")
        await service.close()

        assert isinstance(error, RateLimitError)
        assert error.retry_after == 0
        assert response.status_code == 429
        assert server.call_count == 3

    @pytest.mark.asyncio
    async def test_retry_after_http_date(self, server):
        later = format_datetime(datetime.now(timezone.utc) + timedelta(seconds=120), usegmt=True)
        server.reply(429, {"message": "slow down"}, headers={"Retry-After": later})
        async with make_service(server) as service:
            _, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert isinstance(error, RateLimitError)
        assert 100 < error.retry_after <= 121
        service.enable_retries(max_interval=3)
        assert service._backoff(1, later) == 3

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self, server):
        server.reply(400, {"message": "bad request"})
        service = make_service(server)
        service.enable_retries(max_retries=3, max_interval=0.01)
        _, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")
        await service.close()

        assert isinstance(error, APIError)
        assert error.status_code == 400
        assert server.call_count == 1

    @pytest.mark.asyncio
    async def test_no_retry_when_disabled(self, server):
        server.reply(503, {"message": "busy"}).reply(200, NETWORK)
        async with make_service(server) as service:
            _, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")

        assert error.status_code == 503
        assert server.call_count == 1

    @pytest.mark.asyncio
    async def test_network_error_retried(self, server):
        server.fail(lambda request: httpx.ReadTimeout("timed out", request=request)).reply(200, NETWORK)
        service = make_service(server)
        service.enable_retries(max_retries=2, max_interval=0.01)
        result, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")
        await service.close()

        assert error is None
        assert result == NETWORK
        assert server.call_count == 2

    @pytest.mark.asyncio
    async def test_network_error_attempts_counted(self, server):
        server.fail(lambda request: httpx.ConnectError("down", request=request))
        service = make_service(server)
        service.enable_retries(max_retries=2, max_interval=0.01)
        _, _, error = await service.invoke(NETWORK_GET, cloud_instance_id="ci", network_id="n1")
        await service.close()

        assert isinstance(error, NetworkError)
        assert error.attempts == 3
        assert server.call_count == 3


class TestParseRetryAfter:
    """Tests for parse_retry_after."""

    @pytest.mark.parametrize("value,expected", [("120", 120.0), ("0.5", 0.5), ("-3", 0.0), (None, None),
                                                ("", None), ("soon", None)])
    def test_values(self, value, expected):
        assert parse_retry_after(value) == expected

    def test_past_http_date(self):
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0

    def test_future_http_date(self):
        later = format_datetime(datetime.now(timezone.utc) + timedelta(seconds=120), usegmt=True)
        assert 100 < parse_retry_after(later) <= 121
