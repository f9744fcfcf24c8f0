from typing import Any, Protocol

import aiohttp
from pydantic import ValidationError

from ..exceptions.contact import CaptchaServiceError
from ..logger import get_logger
from ..schemas.contact import CaptchaVerdict


logger = get_logger(__name__)


class CaptchaVerifier(Protocol):
    async def verify(self, response: str) -> CaptchaVerdict | CaptchaServiceError:
        ...


def parse_verdict(data: Any) -> CaptchaVerdict:
    if not isinstance(data, dict):
        raise ValueError("Recaptcha response is not a JSON object")

    score = data.get("score")
    if isinstance(score, bool) or not isinstance(score, int | float):
        score = 0.0
    return CaptchaVerdict(success=data.get("success") is True, score=score)


class RecaptchaVerifier:
    def __init__(self, secret: str, verify_url: str) -> None:
        self.secret = secret
        self.verify_url = verify_url

    async def verify(self, response: str) -> CaptchaVerdict | CaptchaServiceError:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self.verify_url, data={"secret": self.secret, "response": response}) as resp:
                    if resp.status != 200:
                        logger.error(f"Recaptcha verification returned status {resp.status}")
                        return CaptchaServiceError()

                    data = await resp.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.error(f"Recaptcha verification failed: {e!r}")
            return CaptchaServiceError()

        logger.debug(f"Recaptcha response: {data}")
        try:
            return parse_verdict(data)
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid recaptcha response: {e}")
            return CaptchaServiceError()
