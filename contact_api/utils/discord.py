import re
from typing import Protocol

import aiohttp

from ..exceptions.contact import DeliveryServiceError
from ..logger import get_logger
from ..schemas.contact import Submission


logger = get_logger(__name__)

UNSAFE_CHARACTERS = re.compile(r"[<>{}\[\]$;]")


class NotificationSender(Protocol):
    async def send(self, content: str) -> DeliveryServiceError | None:
        ...


def sanitize(text: str) -> str:
    """Remove characters with a special meaning for the chat renderer and trim whitespace."""

    return UNSAFE_CHARACTERS.sub("", text).strip()


def format_notification(submission: Submission) -> str:
    return "\n".join(
        [
            "**New message from the contact form!**",
            f"👤 **Name**: {sanitize(submission.name)}",
            f"📧 **Email**: {sanitize(submission.email)}",
            "💬 **Message**:",
            sanitize(submission.message),
        ]
    )


class DiscordWebhookSender:
    def __init__(self, webhook_url: str) -> None:
        self.webhook_url = webhook_url

    async def send(self, content: str) -> DeliveryServiceError | None:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self.webhook_url, json={"content": content}) as resp:
                    if not 200 <= resp.status < 300:
                        logger.error(f"Discord webhook returned status {resp.status}")
                        return DeliveryServiceError()
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.error(f"Could not send message to discord: {e!r}")
            return DeliveryServiceError()

        return None
