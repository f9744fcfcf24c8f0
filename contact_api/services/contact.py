import json
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..exceptions.contact import (
    CaptchaRejectedError,
    ContactError,
    InvalidFieldError,
    MalformedBodyError,
    MethodNotAllowedError,
)
from ..logger import get_logger
from ..schemas.contact import Submission
from ..settings import Settings
from ..utils.cors import cors_headers
from ..utils.discord import DiscordWebhookSender, NotificationSender, format_notification
from ..utils.recaptcha import CaptchaVerifier, RecaptchaVerifier


logger = get_logger(__name__)

SUCCESS_MESSAGE = "Message sent, thank you!"


@dataclass
class ContactResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


def parse_body(body: Any) -> dict[str, Any] | MalformedBodyError:
    if isinstance(body, dict):
        return body
    if not body:
        return {}

    if isinstance(body, bytes | bytearray):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return MalformedBodyError()
    if not isinstance(body, str):
        return MalformedBodyError()

    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return MalformedBodyError()
    if not isinstance(data, dict):
        return MalformedBodyError()
    return data


def validate_fields(data: dict[str, Any]) -> Submission | InvalidFieldError:
    """Validate all fields of a submission, keeping the first error of each field."""

    try:
        return Submission.model_validate(data)
    except ValidationError as e:
        field_errors: dict[str, str] = {}
        for error in e.errors():
            if error["loc"]:
                field_errors.setdefault(str(error["loc"][0]), error["msg"])
        return InvalidFieldError(field_errors)


class ContactHandler:
    def __init__(
        self,
        verifier: CaptchaVerifier,
        sender: NotificationSender,
        *,
        allowed_origins: Collection[str],
        default_origin: str,
        min_score: float = 0.5,
        log_body_limit: int = 500,
    ) -> None:
        self.verifier = verifier
        self.sender = sender
        self.allowed_origins = allowed_origins
        self.default_origin = default_origin
        self.min_score = min_score
        self.log_body_limit = log_body_limit

    @classmethod
    def from_settings(
        cls, settings: Settings, verifier: CaptchaVerifier | None = None, sender: NotificationSender | None = None
    ) -> "ContactHandler":
        return cls(
            verifier or RecaptchaVerifier(settings.recaptcha_secret, settings.recaptcha_verify_url),
            sender or DiscordWebhookSender(settings.discord_webhook_url),
            allowed_origins=settings.allowed_origins,
            default_origin=settings.default_origin,
            min_score=settings.recaptcha_min_score,
            log_body_limit=settings.log_body_limit,
        )

    async def handle(self, method: str, origin: str | None, body: Any) -> ContactResponse:
        headers = cors_headers(origin, self.allowed_origins, self.default_origin)

        method = method.upper()
        if method == "OPTIONS":
            return ContactResponse(204, headers)

        result = await self.process(method, body)
        if isinstance(result, ContactError):
            return ContactResponse(result.status_code, headers, result.content())

        return ContactResponse(200, headers, {"success": True, "message": SUCCESS_MESSAGE})

    async def process(self, method: str, body: Any) -> ContactError | None:
        if method != "POST":
            return MethodNotAllowedError()

        self._log_body(body)

        data = parse_body(body)
        if isinstance(data, ContactError):
            return data

        submission = validate_fields(data)
        if isinstance(submission, ContactError):
            logger.debug(f"Invalid fields: {submission.field_errors}")
            return submission

        if (error := await self.check_captcha(submission.captcha)) is not None:
            return error

        return await self.sender.send(format_notification(submission))

    async def check_captcha(self, response: str) -> ContactError | None:
        verdict = await self.verifier.verify(response)
        if isinstance(verdict, ContactError):
            return verdict

        if not verdict.success or verdict.score < self.min_score:
            logger.warning(f"Captcha rejected (success={verdict.success}, score={verdict.score})")
            return CaptchaRejectedError(verdict.success, verdict.score)

        return None

    def _log_body(self, body: Any) -> None:
        if isinstance(body, bytes | bytearray):
            raw = body.decode("utf-8", errors="replace")
        elif isinstance(body, str):
            raw = body
        else:
            raw = json.dumps(body, default=str)
        logger.debug(f"Contact request body: {raw[: self.log_body_limit]}")
