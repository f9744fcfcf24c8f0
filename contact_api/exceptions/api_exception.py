from typing import Any

from fastapi import HTTPException


class APIException(HTTPException):
    status_code: int
    detail: str
    description: str

    def __init__(self) -> None:
        super().__init__(self.status_code, self.detail)

    def content(self) -> dict[str, Any]:
        return {"error": self.detail}

    @classmethod
    def example(cls) -> dict[str, Any]:
        return {"error": cls.detail}
