"""
Domain exceptions raised by the services
All derive from ValueError; routers map them onto HTTP status codes
"""


class ValidationError(ValueError):
    """Input rejected by a business rule (HTTP 400)"""


class RoomUnavailableError(ValidationError):
    """Room already held by an overlapping booking"""

    def __init__(self, message: str = "Room is not available for the selected dates."):
        super().__init__(message)


class NotFoundError(ValueError):
    """Referenced object does not exist (HTTP 404)"""
