"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from mentora.api.deps import get_completion_gateway, get_stores
from mentora.config import Settings
from mentora.main import app
from mentora.services.alleai_client import AlleAIClient
from mentora.services.completion import CompletionGateway
from mentora.stores import StoreBundle, create_memory_stores


def provider_reply(content: str, model: str = "gpt-4o") -> dict:
    """Body shape returned by the Alle AI chat endpoint."""
    return {
        "success": True,
        "responses": {"responses": {model: {"message": {"content": content}}}},
    }


class FakeProvider:
    """
    Stand-in for the completion provider, mounted via httpx.MockTransport.

    Every request body is recorded in ``requests``. Replace ``handler`` to
    change the reply, or to raise a transport error.
    """

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=provider_reply("Hello from the lecturer"))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        return self.handler(request)

    @property
    def last_system_prompt(self) -> str | None:
        turn = self.requests[-1]["messages"][0]
        if "system" not in turn:
            return None
        return turn["system"][0]["text"]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, alleai_api_key="test-key")


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
async def gateway(test_settings: Settings, provider: FakeProvider) -> AsyncGenerator[CompletionGateway, None]:
    client = AlleAIClient(test_settings, transport=httpx.MockTransport(provider))
    gw = CompletionGateway(test_settings, client)
    yield gw
    await gw.close()


@pytest.fixture
def stores() -> StoreBundle:
    return create_memory_stores(retention=20)


@pytest.fixture
async def client(stores: StoreBundle, gateway: CompletionGateway) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints against fresh state."""
    app.dependency_overrides[get_stores] = lambda: stores
    app.dependency_overrides[get_completion_gateway] = lambda: gateway
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def login(client: AsyncClient, email: str, name: str) -> dict:
    """Log a user in and return the response body."""
    response = await client.post(
        "/api/auth/google",
        json={"googleToken": "token", "userInfo": {"email": email, "name": name}},
    )
    assert response.status_code == 200
    return response.json()
