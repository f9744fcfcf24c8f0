import uvicorn

from .logger import get_logger
from .settings import Settings


logger = get_logger(__name__)


def main() -> None:
    settings = Settings()  # type: ignore[call-arg]
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        "contact_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        root_path=settings.root_path,
        reload=settings.reload,
        forwarded_allow_ips="*",
    )
