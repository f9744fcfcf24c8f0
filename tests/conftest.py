from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from contact_api.exceptions.contact import CaptchaServiceError, DeliveryServiceError
from contact_api.schemas.contact import CaptchaVerdict
from contact_api.services.contact import ContactHandler
from contact_api.settings import Settings


WebHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


class FakeVerifier:
    def __init__(self, verdict: CaptchaVerdict | CaptchaServiceError) -> None:
        self.verdict = verdict
        self.calls: list[str] = []

    async def verify(self, response: str) -> CaptchaVerdict | CaptchaServiceError:
        self.calls.append(response)
        return self.verdict


class FakeSender:
    def __init__(self, error: DeliveryServiceError | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    async def send(self, content: str) -> DeliveryServiceError | None:
        self.calls.append(content)
        return self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        discord_webhook_url="https://discord.test/api/webhooks/1/token",
        recaptcha_secret="my recaptcha secret",
        allowed_origins=["https://heros20.github.io", "http://localhost:3000"],
        default_origin="https://heros20.github.io",
    )


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier(CaptchaVerdict(success=True, score=0.9))


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def handler(settings: Settings, verifier: FakeVerifier, sender: FakeSender) -> ContactHandler:
    return ContactHandler.from_settings(settings, verifier, sender)


@pytest.fixture
def submission() -> dict[str, Any]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "Hello, I would like to get in touch.",
        "captcha": "recaptcha token",
    }


@pytest.fixture
async def http_server() -> AsyncIterator[Callable[[WebHandler], Awaitable[TestServer]]]:
    servers: list[TestServer] = []

    async def start(handler: WebHandler) -> TestServer:
        app = web.Application()
        app.router.add_post("/", handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield start

    for server in servers:
        await server.close()
