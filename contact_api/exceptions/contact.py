from typing import Any

from fastapi import status

from .api_exception import APIException


class ContactError(APIException):
    pass


class MethodNotAllowedError(ContactError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    detail = "Method not allowed"
    description = "Only POST (and OPTIONS for CORS preflight) is supported."


class MalformedBodyError(ContactError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid body"
    description = "The request body is not a valid JSON object."


class InvalidFieldError(ContactError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid fields"
    description = "One or more fields are missing or invalid. `fieldErrors` maps each field to the reason."

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__()
        self.field_errors = field_errors

    def content(self) -> dict[str, Any]:
        return super().content() | {"fieldErrors": self.field_errors}

    @classmethod
    def example(cls) -> dict[str, Any]:
        return super().example() | {"fieldErrors": {"name": "String should have at least 2 characters"}}


class CaptchaRejectedError(ContactError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Captcha failed"
    description = "The recaptcha response was rejected or its score is too low."

    def __init__(self, success: bool, score: float) -> None:
        super().__init__()
        self.success = success
        self.score = score

    def content(self) -> dict[str, Any]:
        return super().content() | {"score": self.score, "success": self.success}

    @classmethod
    def example(cls) -> dict[str, Any]:
        return super().example() | {"score": 0.1, "success": True}


class CaptchaServiceError(ContactError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Captcha verification error"
    description = "The recaptcha verification service could not be reached or returned an invalid response."


class DeliveryServiceError(ContactError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Could not send message"
    description = "The message could not be delivered to the webhook."
