"""Endpoints for the contact form"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..exceptions.contact import (
    CaptchaRejectedError,
    CaptchaServiceError,
    DeliveryServiceError,
    InvalidFieldError,
    MalformedBodyError,
)
from ..schemas.contact import ContactRequest, ContactSent
from ..services.contact import ContactHandler, ContactResponse
from ..utils.docs import responses


router = APIRouter(tags=["contact"])


def get_handler(request: Request) -> ContactHandler:
    handler: ContactHandler = request.app.state.contact_handler
    return handler


def to_response(response: ContactResponse) -> Response:
    if response.body is None:
        return Response(status_code=response.status_code, headers=response.headers)
    return JSONResponse(response.body, status_code=response.status_code, headers=response.headers)


async def dispatch(request: Request, handler: ContactHandler) -> Response:
    body = await request.body() if request.method == "POST" else None
    return to_response(await handler.handle(request.method, request.headers.get("origin"), body))


@router.post(
    "/contact",
    responses=responses(
        ContactSent,
        MalformedBodyError,
        InvalidFieldError,
        CaptchaRejectedError,
        CaptchaServiceError,
        DeliveryServiceError,
    ),
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ContactRequest.model_json_schema()}},
        }
    },
)
async def send_message(request: Request, handler: ContactHandler = Depends(get_handler)) -> Any:
    """
    Send a message from the contact form.

    The fields are validated, the recaptcha v3 response is verified and the message is forwarded to the
    configured webhook. The first error of each invalid field is reported in `fieldErrors`.
    """

    return await dispatch(request, handler)


@router.api_route(
    "/contact",
    methods=["OPTIONS", "GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"],
    include_in_schema=False,
)
async def other_methods(request: Request, handler: ContactHandler = Depends(get_handler)) -> Any:
    return await dispatch(request, handler)


def is_contact_route(request: Request) -> bool:
    """Whether a request without a matching method was routed to `/contact`."""

    return request.scope.get("endpoint") in (send_message, other_methods)
