from typing import Optional


class PlayerError(Exception):
    status = "error"
    http_status = 500

    def __init__(self, message: str, data: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class BadRequestError(PlayerError):
    status = "bad_request"
    http_status = 400


class NotFoundError(PlayerError):
    status = "not_found"
    http_status = 404
