from typing import Any

import sentry_sdk
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.aiohttp import AioHttpIntegration
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .endpoints import ROUTERS, contact
from .exceptions.api_exception import APIException
from .logger import configure_logging, get_logger
from .services.contact import ContactHandler
from .settings import Settings
from .utils.discord import NotificationSender
from .utils.recaptcha import CaptchaVerifier


NAME = "contact-api"
DESCRIPTION = "Contact form backend: validates submissions, verifies reCAPTCHA and forwards them to a Discord webhook."

logger = get_logger(__name__)


def setup_sentry(settings: Settings) -> None:
    if not settings.sentry_dsn:
        return

    logger.debug("initializing sentry")
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        attach_stacktrace=True,
        shutdown_timeout=5,
        integrations=[AioHttpIntegration()],
        release=f"{NAME}@{__version__}",
        environment=settings.sentry_environment,
    )


async def http_exception_handler(request: Request, exc: Any) -> Response:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and contact.is_contact_route(request):
        return await contact.dispatch(request, contact.get_handler(request))
    if isinstance(exc, APIException):
        return JSONResponse(exc.content(), status_code=exc.status_code, headers=exc.headers)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(
    settings: Settings | None = None,
    *,
    handler: ContactHandler | None = None,
    verifier: CaptchaVerifier | None = None,
    sender: NotificationSender | None = None,
) -> FastAPI:
    settings = settings or Settings()  # type: ignore[call-arg]
    configure_logging(settings.log_level)
    setup_sentry(settings)

    app = FastAPI(
        title=NAME,
        description=DESCRIPTION,
        version=__version__,
        root_path=settings.root_path,
        root_path_in_servers=False,
        servers=[{"url": settings.root_path}] if settings.root_path else None,
        debug=settings.debug,
        openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
    )
    app.state.contact_handler = handler or ContactHandler.from_settings(settings, verifier, sender)

    for router, _ in ROUTERS.values():
        app.include_router(router)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    logger.info(f"{NAME} v{__version__} ready, accepting origins {', '.join(settings.allowed_origins)}")
    return app
