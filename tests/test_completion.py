"""Tests for the completion gateway and provider response handling."""

import httpx
import pytest

from mentora.config import Settings
from mentora.services.alleai_client import AlleAIClient
from mentora.services.completion import (
    CompletionGateway,
    FallbackReason,
    MalformedResponseError,
    select_model_content,
)

from conftest import provider_reply


def _body(models: dict) -> dict:
    return {"success": True, "responses": {"responses": models}}


class TestSelectModelContent:
    def test_preferred_model_wins(self):
        body = _body({
            "claude-3": {"message": {"content": "from claude"}},
            "gpt-4o": {"message": {"content": "from gpt"}},
        })

        assert select_model_content(body, ["gpt-4o"]) == ("gpt-4o", "from gpt")

    def test_other_models_tried_in_sorted_order(self):
        body = _body({
            "zeta": {"message": {"content": "z"}},
            "alpha": {"message": {"content": "a"}},
        })

        assert select_model_content(body, ["gpt-4o"]) == ("alpha", "a")

    def test_selection_independent_of_key_order(self):
        forward = _body({"b": {"message": {"content": "b"}}, "a": {"message": {"content": "a"}}})
        backward = _body({"a": {"message": {"content": "a"}}, "b": {"message": {"content": "b"}}})

        assert select_model_content(forward, []) == select_model_content(backward, [])

    def test_skips_models_without_content(self):
        body = _body({
            "gpt-4o": {"message": {"content": ""}},
            "mistral": {"error": "overloaded"},
            "llama": {"message": {"content": "from llama"}},
        })

        assert select_model_content(body, ["gpt-4o"]) == ("llama", "from llama")

    def test_no_content_returns_none(self):
        assert select_model_content(_body({"gpt-4o": {"message": {}}}), ["gpt-4o"]) is None

    @pytest.mark.parametrize("body", [[], "text", {}, {"responses": {}}, {"responses": {"responses": []}}])
    def test_malformed_shape_raises(self, body):
        with pytest.raises(MalformedResponseError):
            select_model_content(body, ["gpt-4o"])


class TestCompletionGateway:
    async def test_success_returns_content(self, gateway, provider):
        result = await gateway.complete("system", "question", 0.7, 1000)

        assert result.ok
        assert result.content == "Hello from the lecturer"
        assert result.model == "gpt-4o"
        assert result.reason is None

    async def test_request_payload_shape(self, gateway, provider):
        await gateway.complete("be kind", "What is gravity?", 0.9, 321)

        payload = provider.requests[-1]
        assert payload["models"] == ["gpt-4o"]
        assert payload["messages"] == [{
            "system": [{"type": "text", "text": "be kind"}],
            "user": [{"type": "text", "text": "What is gravity?"}],
        }]
        assert payload["temperature"] == 0.9
        assert payload["max_tokens"] == 321
        assert payload["stream"] is False
        assert payload["web_search"] is False

    async def test_system_turn_omitted_when_none(self, gateway, provider):
        await gateway.complete(None, "Tell me a story", 0.8, 1200)

        assert provider.last_system_prompt is None

    async def test_no_api_key_skips_provider(self, provider):
        settings = Settings(_env_file=None, alleai_api_key=None)
        gateway = CompletionGateway(
            settings, AlleAIClient(settings, transport=httpx.MockTransport(provider))
        )

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.NO_API_KEY
        assert provider.requests == []

    @pytest.mark.parametrize(
        "error,reason",
        [
            (httpx.ConnectTimeout, FallbackReason.TIMEOUT),
            (httpx.ReadTimeout, FallbackReason.TIMEOUT),
            (httpx.ConnectError, FallbackReason.TRANSPORT_ERROR),
        ],
    )
    async def test_transport_failures(self, gateway, provider, error, reason):
        def fail(request):
            raise error("boom", request=request)

        provider.handler = fail

        result = await gateway.complete("s", "u", 0.7, 10)

        assert not result.ok
        assert result.reason == reason
        assert result.content is None

    async def test_http_error_status(self, gateway, provider):
        provider.handler = lambda request: httpx.Response(402, json={"error": "no credits"})

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.HTTP_ERROR
        assert "402" in result.detail

    async def test_non_json_body(self, gateway, provider):
        provider.handler = lambda request: httpx.Response(200, text="<html>gateway</html>")

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.MALFORMED_RESPONSE

    async def test_unexpected_shape(self, gateway, provider):
        provider.handler = lambda request: httpx.Response(200, json={"choices": []})

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.MALFORMED_RESPONSE

    async def test_provider_reported_failure(self, gateway, provider):
        provider.handler = lambda request: httpx.Response(200, json={"success": False, "error": "quota"})

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.PROVIDER_ERROR
        assert result.detail == "quota"

    async def test_empty_content(self, gateway, provider):
        provider.handler = lambda request: httpx.Response(200, json=provider_reply(""))

        result = await gateway.complete("s", "u", 0.7, 10)

        assert result.reason == FallbackReason.EMPTY_CONTENT
