from collections.abc import Collection


ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def resolve_origin(origin: str | None, allowed_origins: Collection[str], default_origin: str) -> str:
    if origin and origin in allowed_origins:
        return origin
    return default_origin


def cors_headers(origin: str | None, allowed_origins: Collection[str], default_origin: str) -> dict[str, str]:
    """Return the CORS headers sent with every response of the contact endpoint."""

    return {
        "Access-Control-Allow-Origin": resolve_origin(origin, allowed_origins, default_origin),
        "Vary": "Origin",
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
