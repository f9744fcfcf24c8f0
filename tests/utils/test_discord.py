from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from contact_api.exceptions.contact import DeliveryServiceError
from contact_api.schemas.contact import Submission
from contact_api.utils.discord import DiscordWebhookSender, format_notification, sanitize


StartServer = Callable[[Callable[[web.Request], Awaitable[web.StreamResponse]]], Awaitable[TestServer]]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("<script>$hi;</script>", "scripthi/script"),
        ("  hello world  ", "hello world"),
        ("{[a]}", "a"),
        ("  <> ", ""),
        ("no special characters!", "no special characters!"),
        ("price: 5€ & more", "price: 5€ & more"),
        ("line 1\nline 2", "line 1\nline 2"),
    ],
)
async def test__sanitize(text: str, expected: str) -> None:
    assert sanitize(text) == expected


async def test__format_notification() -> None:
    submission = Submission(
        name="<b>Jane</b>", email="jane@example.com", message="Hi; {please} call $me", captcha="token"
    )

    assert format_notification(submission) == (
        "**New message from the contact form!**\n"
        "👤 **Name**: bJane/b\n"
        "📧 **Email**: jane@example.com\n"
        "💬 **Message**:\n"
        "Hi please call me"
    )


@pytest.mark.parametrize("status", [200, 204])
async def test__send__success(status: int, http_server: StartServer) -> None:
    received: list[Any] = []

    async def webhook(request: web.Request) -> web.Response:
        received.append(await request.json())
        return web.Response(status=status)

    server = await http_server(webhook)

    result = await DiscordWebhookSender(str(server.make_url("/"))).send("hello there")

    assert result is None
    assert received == [{"content": "hello there"}]


@pytest.mark.parametrize("status", [400, 404, 429, 500])
async def test__send__error_status(status: int, http_server: StartServer) -> None:
    async def webhook(request: web.Request) -> web.Response:
        return web.json_response({"message": "nope"}, status=status)

    server = await http_server(webhook)

    result = await DiscordWebhookSender(str(server.make_url("/"))).send("hello there")

    assert isinstance(result, DeliveryServiceError)


async def test__send__unreachable(http_server: StartServer) -> None:
    async def webhook(request: web.Request) -> web.Response:
        return web.Response(status=204)

    server = await http_server(webhook)
    url = str(server.make_url("/"))
    await server.close()

    result = await DiscordWebhookSender(url).send("hello there")

    assert isinstance(result, DeliveryServiceError)
