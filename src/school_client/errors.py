"""Client-side errors."""

import httpx


class ApiError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: str | None = None,
        code: str | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error = error
        self.code = code
        super().__init__(f"{status_code}: {message}")

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build from the server's ``{message, error?, code?}`` envelope."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            return cls(response.status_code, response.reason_phrase or "Request failed")

        return cls(
            response.status_code,
            body.get("message") or response.reason_phrase or "Request failed",
            error=body.get("error"),
            code=body.get("code"),
        )
