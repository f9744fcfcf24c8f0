from typing import Any

from pydantic import BaseModel, ConfigDict

from ..exceptions.api_exception import APIException


def example(**kwargs: Any) -> ConfigDict:
    return ConfigDict(json_schema_extra={"example": kwargs})


def responses(default: type[BaseModel] | None, *args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    """Build the `responses` argument of a route from its success model and the errors it may return."""

    exceptions: dict[int, list[type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    out: dict[int | str, dict[str, Any]] = {}
    for code, excs in sorted(exceptions.items()):
        out[code] = {
            "description": "\n\n".join(f"*{exc.detail}*: {exc.description}" for exc in excs),
            "content": {
                "application/json": {
                    "examples": {exc.__name__: {"summary": exc.detail, "value": exc.example()} for exc in excs}
                }
            },
        }

    if default is not None:
        out[200] = {"model": default}
    return out
