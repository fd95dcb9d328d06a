"""
Tests for IamportHttpClient using RecordingTransport.
"""

import asyncio
import json

import pytest

from iamport_client.core.config import IamportClientOptions
from iamport_client.core.exceptions import (
    HTTPError,
    IamportResponseError,
    InvalidArgumentError,
    InvalidResponseError,
    ObjectDisposedError,
)
from iamport_client.core.http_client import ClientState, IamportHttpClient, TOKEN_PATH
from iamport_client.core.transport import (
    HttpxTransport,
    RecordingTransport,
    TransportRequest,
    TransportResponse,
    default_envelope,
)
from iamport_client.core.utils import build_api_url
from iamport_client.models import HttpMethod, IamportRequest, IamportToken, Payment


def envelope_handler(payload, token_payload=None):
    """Handler: token endpoint answers with a token, everything else with payload."""
    def handler(request):
        if request.url.endswith(TOKEN_PATH):
            return token_payload if token_payload is not None else default_envelope(request)
        return payload
    return handler


class TestIamportHttpClientInit:
    """Construction and lifecycle."""

    def test_guard_clause(self):
        with pytest.raises(InvalidArgumentError):
            IamportHttpClient(None)

    def test_creates_new_instance(self, options):
        client = IamportHttpClient(options, transport=RecordingTransport())
        assert client.state is ClientState.ACTIVE
        assert client.is_disposed is False
        assert client.token is None
        assert client.options is options

    def test_default_transport_is_httpx(self, options):
        client = IamportHttpClient(options)
        assert isinstance(client._transport, HttpxTransport)

    @pytest.mark.asyncio
    async def test_close_disposes(self, client, transport):
        await client.close()
        assert client.is_disposed
        assert client.state is ClientState.DISPOSED
        assert transport.close_count == 1

    @pytest.mark.asyncio
    async def test_double_close_releases_transport_once(self, client, transport):
        await client.close()
        await client.close()
        assert transport.close_count == 1

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, options, transport):
        async with IamportHttpClient(options, transport=transport) as client:
            assert not client.is_disposed
        assert client.is_disposed
        assert transport.close_count == 1

    @pytest.mark.asyncio
    async def test_context_manager_on_disposed_client(self, client):
        await client.close()
        with pytest.raises(ObjectDisposedError):
            async with client:
                pass


class TestGuardClauses:
    """Argument and disposed-state checks."""

    @pytest.mark.asyncio
    async def test_request_none(self, client, transport):
        with pytest.raises(InvalidArgumentError):
            await client.request(None)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_request_raw_none(self, client, transport):
        with pytest.raises(InvalidArgumentError):
            await client.request_raw(None)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_request_throws_if_disposed(self, client):
        await client.close()
        with pytest.raises(ObjectDisposedError):
            await client.request(IamportRequest("/self"))

    @pytest.mark.asyncio
    async def test_request_none_throws_disposed_first(self, client):
        await client.close()
        with pytest.raises(ObjectDisposedError):
            await client.request(None)

    @pytest.mark.asyncio
    async def test_request_raw_throws_if_disposed(self, client):
        await client.close()
        with pytest.raises(ObjectDisposedError):
            await client.request_raw(TransportRequest("GET", "https://api.iamport.test/self"))
        with pytest.raises(ObjectDisposedError):
            await client.request_raw(None)

    @pytest.mark.asyncio
    async def test_authorize_throws_if_disposed(self, client, transport):
        await client.close()
        with pytest.raises(ObjectDisposedError):
            await client.authorize()
        assert transport.requests == []


class TestRequestPipeline:
    """Ordering and URL composition."""

    @pytest.mark.asyncio
    async def test_authorize_calls_token_endpoint(self, client, transport, base_url):
        token = await client.authorize()

        assert transport.urls == [build_api_url(base_url, "/users/getToken")]
        sent = transport.requests[0]
        assert sent.method == "POST"
        assert sent.json() == {"account_id": "abcd", "imp_key": "1234", "imp_secret": "5678"}
        assert "Authorization" not in sent.headers
        assert isinstance(token, IamportToken)
        assert client.token == token
        assert token.access_token == "recorded-access-token"

    @pytest.mark.asyncio
    async def test_request_calls_self_url(self, client, transport, base_url):
        result = await client.request(IamportRequest("/self", require_authorization=False))

        assert result is not None
        assert transport.urls == [build_api_url(base_url, "/self")]
        assert "Authorization" not in transport.requests[0].headers

    @pytest.mark.asyncio
    async def test_request_calls_also_authorize_and_self(self, client, transport, base_url):
        result = await client.request(IamportRequest("/self", require_authorization=True))

        assert result is not None
        assert transport.urls == [
            build_api_url(base_url, "/users/getToken"),
            build_api_url(base_url, "/self"),
        ]
        primary = transport.requests[1]
        assert primary.headers["Authorization"] == "Bearer recorded-access-token"

    @pytest.mark.asyncio
    async def test_authorization_header_name_from_options(self, base_url):
        options = IamportClientOptions(
            account_id="abcd", api_key="1234", api_secret="5678",
            authorization_header_name="X-Imp-Token", base_url=base_url,
        )
        transport = RecordingTransport()
        client = IamportHttpClient(options, transport=transport)

        await client.request(IamportRequest("/self"))

        headers = transport.requests[1].headers
        assert headers["X-Imp-Token"] == "Bearer recorded-access-token"
        assert "Authorization" not in headers

    @pytest.mark.asyncio
    async def test_authorize_completes_before_primary_send(self, options):
        events = []

        class SlowTransport(RecordingTransport):
            async def send(self, request):
                events.append(("start", request.url))
                await asyncio.sleep(0.01)
                response = await super().send(request)
                events.append(("end", request.url))
                return response

        client = IamportHttpClient(options, transport=SlowTransport())
        await client.request(IamportRequest("/self"))

        assert [e[0] for e in events] == ["start", "end", "start", "end"]
        assert events[0][1].endswith(TOKEN_PATH)
        assert events[2][1].endswith("/self")

    @pytest.mark.asyncio
    async def test_each_authorized_request_reauthorizes(self, client, transport):
        await client.request(IamportRequest("/a"))
        await client.request(IamportRequest("/b"))
        assert len(transport.requests) == 4
        assert transport.urls[0].endswith(TOKEN_PATH)
        assert transport.urls[2].endswith(TOKEN_PATH)

    @pytest.mark.asyncio
    async def test_body_serialized_as_json(self, client, transport):
        await client.request(IamportRequest(
            "/payments/prepare", HttpMethod.POST, {"merchant_uid": "order_1", "amount": 1000},
            require_authorization=False,
        ))

        sent = transport.requests[0]
        assert sent.method == "POST"
        assert sent.json() == {"merchant_uid": "order_1", "amount": 1000}
        assert sent.headers["Content-Type"].startswith("application/json")

    @pytest.mark.asyncio
    async def test_no_body_for_get(self, client, transport):
        await client.request(IamportRequest("/self", require_authorization=False))
        sent = transport.requests[0]
        assert sent.method == "GET"
        assert sent.content is None
        assert "Content-Type" not in sent.headers

    @pytest.mark.asyncio
    async def test_string_method_accepted(self, client, transport):
        await client.request(IamportRequest("/self", "delete", require_authorization=False))
        assert transport.requests[0].method == "DELETE"

    @pytest.mark.asyncio
    async def test_relative_path_rejected_before_io(self, client, transport):
        with pytest.raises(InvalidArgumentError):
            await client.request(IamportRequest("self", require_authorization=False))
        assert transport.requests == []


class TestAuthorization:
    """Token handling."""

    @pytest.mark.asyncio
    async def test_failed_authorize_raises_and_keeps_token(self, options):
        transport = RecordingTransport(lambda r: {"code": -1, "message": "Unauthorized", "response": None})
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(IamportResponseError) as exc_info:
            await client.authorize()

        assert exc_info.value.code == -1
        assert exc_info.value.gateway_message == "Unauthorized"
        assert client.token is None

    @pytest.mark.asyncio
    async def test_failed_reauthorization_skips_primary_call(self, options):
        transport = RecordingTransport(lambda r: {"code": -1, "message": "Unauthorized"})
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(IamportResponseError):
            await client.request(IamportRequest("/self"))

        assert len(transport.requests) == 1
        assert transport.urls[0].endswith(TOKEN_PATH)

    @pytest.mark.asyncio
    async def test_token_without_content_is_invalid(self, options):
        transport = RecordingTransport(lambda r: {"code": 0, "message": None, "response": None})
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(InvalidResponseError):
            await client.authorize()

    @pytest.mark.asyncio
    async def test_concurrent_authorize_serialized(self, options):
        in_flight = 0
        max_in_flight = 0

        class CountingTransport(RecordingTransport):
            async def send(self, request):
                nonlocal in_flight, max_in_flight
                in_flight += 1
                max_in_flight = max(max_in_flight, in_flight)
                await asyncio.sleep(0.01)
                in_flight -= 1
                return await super().send(request)

        transport = CountingTransport()
        client = IamportHttpClient(options, transport=transport)

        await asyncio.gather(client.authorize(), client.authorize(), client.authorize())

        assert max_in_flight == 1
        assert len(transport.requests) == 3


class TestEnvelopeDecoding:
    """Decoding of gateway envelopes."""

    @pytest.mark.asyncio
    async def test_success_content_round_trip(self, options):
        transport = RecordingTransport(envelope_handler({"code": 0, "message": None, "response": {"x": 1}}))
        client = IamportHttpClient(options, transport=transport)

        response = await client.request(IamportRequest("/self"))

        assert response.code == 0
        assert response.ensure_success() == {"x": 1}

    @pytest.mark.asyncio
    async def test_content_key_accepted(self, options):
        transport = RecordingTransport(envelope_handler({"code": 0, "content": "X"}))
        client = IamportHttpClient(options, transport=transport)

        response = await client.request(IamportRequest("/self", require_authorization=False))
        assert response.ensure_success() == "X"

    @pytest.mark.asyncio
    async def test_non_zero_code_returned_not_raised(self, options):
        transport = RecordingTransport(envelope_handler({"code": 42, "message": "bad"}))
        client = IamportHttpClient(options, transport=transport)

        response = await client.request(IamportRequest("/self", require_authorization=False))

        assert response.code == 42
        assert response.message == "bad"
        with pytest.raises(IamportResponseError) as exc_info:
            response.ensure_success()
        assert exc_info.value.code == 42
        assert exc_info.value.gateway_message == "bad"

    @pytest.mark.asyncio
    async def test_typed_content(self, options):
        payment = {"imp_uid": "imp_1", "merchant_uid": "order_1", "amount": 1000, "status": "paid"}
        transport = RecordingTransport(envelope_handler({"code": 0, "response": payment}))
        client = IamportHttpClient(options, transport=transport)

        response = await client.request(IamportRequest("/payments/imp_1"), Payment)

        result = response.ensure_success()
        assert isinstance(result, Payment)
        assert result.imp_uid == "imp_1"
        assert result.amount == 1000

    @pytest.mark.asyncio
    async def test_request_raw_sends_as_is(self, client, transport):
        request = TransportRequest(
            "PUT", "https://elsewhere.test/raw", headers={"X-Test": "1"}, content=b"{}"
        )
        response = await client.request_raw(request)

        assert transport.requests == [request]
        assert response.code == 0

    @pytest.mark.asyncio
    async def test_non_json_body(self, options):
        transport = RecordingTransport(lambda r: TransportResponse(200, content=b"<html>", url=r.url))
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(InvalidResponseError):
            await client.request(IamportRequest("/self", require_authorization=False))

    @pytest.mark.asyncio
    async def test_non_json_error_status(self, options):
        transport = RecordingTransport(lambda r: TransportResponse(502, content=b"Bad Gateway", url=r.url))
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(HTTPError) as exc_info:
            await client.request(IamportRequest("/self", require_authorization=False))
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_envelope_with_error_status_is_decoded(self, options):
        body = json.dumps({"code": -1, "message": "Unauthorized"}).encode()
        transport = RecordingTransport(lambda r: TransportResponse(401, content=body, url=r.url))
        client = IamportHttpClient(options, transport=transport)

        response = await client.request(IamportRequest("/self", require_authorization=False))
        assert response.code == -1

    @pytest.mark.asyncio
    async def test_json_without_envelope(self, options):
        transport = RecordingTransport(lambda r: {"unexpected": True})
        client = IamportHttpClient(options, transport=transport)

        with pytest.raises(InvalidResponseError):
            await client.request(IamportRequest("/self", require_authorization=False))
