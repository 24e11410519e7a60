"""
Error taxonomy shared by all resolvers
"""

from http import HTTPStatus
from typing import Any

UNAUTHORIZED = int(HTTPStatus.UNAUTHORIZED)
FORBIDDEN = int(HTTPStatus.FORBIDDEN)
NOT_FOUND = int(HTTPStatus.NOT_FOUND)
CONFLICT = int(HTTPStatus.CONFLICT)
INVALID_INPUT = int(HTTPStatus.UNPROCESSABLE_ENTITY)


class ApiError(Exception):
    """A classified failure carrying a human-readable message and a status code.

    graphql-core copies ``extensions`` from the original exception onto the
    GraphQL error it builds, so clients receive ``status`` (and ``data`` for
    field-level problems) next to the message.
    """

    def __init__(
        self, message: str, status_code: int, data: list[dict[str, Any]] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data

    @property
    def extensions(self) -> dict[str, Any]:
        extensions: dict[str, Any] = {"status": self.status_code}
        if self.data:
            extensions["data"] = self.data
        return extensions

    def __repr__(self) -> str:
        return f"ApiError({self.message!r}, {self.status_code})"


def fail_if(
    condition: Any, message: str, status_code: int, data: list[dict[str, Any]] | None = None
) -> None:
    """Raise an ApiError when ``condition`` is truthy; otherwise do nothing."""
    if condition:
        raise ApiError(message, status_code, data)
