"""Tests for the three-branch error classifier, unit and end-to-end."""

from __future__ import annotations

import httpx
import pytest
from httpx import AsyncClient, Response
from respx import MockRouter

from mediagate.api.errors import handle_error
from mediagate.clients.upstream import (
    LocalError,
    NoResponseError,
    UpstreamStatusError,
    classify,
    client_options,
    get_json,
)
from payloads import jikan_route, tmdb_route


class TestClassify:
    def test_variants_pass_through(self):
        failure = UpstreamStatusError(404, {"status_message": "nope"})
        assert classify(failure) is failure

    def test_http_status_error(self):
        request = httpx.Request("GET", "https://upstream.test/x")
        response = httpx.Response(503, text="down", request=request)
        failure = classify(httpx.HTTPStatusError("boom", request=request, response=response))

        assert isinstance(failure, UpstreamStatusError)
        assert failure.status == 503
        assert failure.body == "down"

    def test_transport_error(self):
        request = httpx.Request("GET", "https://upstream.test/x")
        failure = classify(httpx.ConnectError("refused", request=request))

        assert isinstance(failure, NoResponseError)
        assert failure.request is request

    def test_anything_else_is_local(self):
        failure = classify(KeyError("results"))

        assert isinstance(failure, LocalError)
        assert "results" in failure.message


class TestHandleError:
    def test_upstream_status_is_echoed_with_generic_body(self):
        response = handle_error(UpstreamStatusError(401, {"status_message": "Invalid API key"}))

        assert response.status_code == 401
        assert response.body == b"Error fetching data from API."

    def test_no_response_is_500(self):
        response = handle_error(NoResponseError(None, "timed out"))

        assert response.status_code == 500
        assert response.body == b"No response received from API."

    def test_local_error_is_500(self):
        response = handle_error(TypeError("'NoneType' object is not iterable"))

        assert response.status_code == 500
        assert response.body == b"Internal Server Error."


class TestGetJson:
    @pytest.mark.asyncio
    async def test_error_body_is_decoded(self, respx_mock: MockRouter):
        respx_mock.get("https://upstream.test/thing").mock(
            return_value=Response(404, json={"status_code": 34, "status_message": "not found"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamStatusError) as exc_info:
                await get_json(client, "https://upstream.test/thing")

        assert exc_info.value.status == 404
        assert exc_info.value.body == {"status_code": 34, "status_message": "not found"}

    @pytest.mark.asyncio
    async def test_timeout_is_no_response(self, respx_mock: MockRouter):
        respx_mock.get("https://upstream.test/slow").mock(side_effect=httpx.ReadTimeout)

        async with httpx.AsyncClient() as client:
            with pytest.raises(NoResponseError):
                await get_json(client, "https://upstream.test/slow")


class TestClientOptions:
    def test_timeout_left_to_httpx_when_unset(self):
        opts = client_options("https://upstream.test", {"accept": "application/json"}, None)

        assert "timeout" not in opts
        assert httpx.AsyncClient(**opts).timeout == httpx.Timeout(5.0)

    def test_configured_timeout_is_passed(self):
        opts = client_options("https://upstream.test", {}, 3.0)

        assert opts["timeout"] == 3.0
        assert httpx.AsyncClient(**opts).timeout == httpx.Timeout(3.0)


class TestErrorsThroughRoutes:
    @pytest.mark.asyncio
    async def test_upstream_404(self, client: AsyncClient, respx_mock: MockRouter):
        tmdb_route(respx_mock, "/movie/999999/images").mock(
            return_value=Response(404, json={"success": False, "status_code": 34})
        )

        response = await client.get("/images/movie/999999")

        assert response.status_code == 404
        assert response.text == "Error fetching data from API."
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_connection_refused(self, client: AsyncClient, respx_mock: MockRouter):
        tmdb_route(respx_mock, "/movie/popular").mock(side_effect=httpx.ConnectError)

        response = await client.get("/popular/movies")

        assert response.status_code == 500
        assert response.text == "No response received from API."

    @pytest.mark.asyncio
    async def test_malformed_payload_is_local_error(self, client: AsyncClient, respx_mock: MockRouter):
        # 200 but no "results" key: fails in our mapping, not on the wire
        tmdb_route(respx_mock, "/search/tv").mock(return_value=Response(200, json={"page": 1}))

        response = await client.get("/search/tv", params={"query": "x"})

        assert response.status_code == 500
        assert response.text == "Internal Server Error."

    @pytest.mark.asyncio
    async def test_non_json_success_is_local_error(self, client: AsyncClient, respx_mock: MockRouter):
        jikan_route(respx_mock, "/top/anime").mock(return_value=Response(200, text="<html>maintenance</html>"))

        response = await client.get("/popular/anime")

        assert response.status_code == 500
        assert response.text == "Internal Server Error."

    @pytest.mark.asyncio
    async def test_upstream_5xx_on_anime(self, client: AsyncClient, respx_mock: MockRouter):
        jikan_route(respx_mock, "/seasons/upcoming").mock(return_value=Response(504, text="Gateway Timeout"))

        response = await client.get("/upcoming/anime")

        assert response.status_code == 504
        assert response.text == "Error fetching data from API."
