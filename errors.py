"""Domain errors raised by the restaurant core and mapped to HTTP responses in app.py."""

from __future__ import annotations


class RestaurantServiceError(Exception):
    http_status = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None, *, details: list[str] | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        self.details = list(details or [])

    def to_response(self) -> dict[str, object]:
        body: dict[str, object] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(RestaurantServiceError):
    """Bad or missing fields on input, or a malformed restaurant id."""

    http_status = 400
    message = "Invalid restaurant data"


class NotFoundError(RestaurantServiceError):
    http_status = 404
    message = "Restaurant not found"


class StorageError(RestaurantServiceError):
    """The backing document could not be written."""

    http_status = 500
    message = "Internal Server Error"
