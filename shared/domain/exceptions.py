"""
Domain Errors

Error taxonomy raised by the domain services. Services never return HTTP
responses; API views translate these errors with
``shared.infrastructure.api.to_api_exception``.
"""


class DomainError(Exception):
    """Base class for all domain errors"""

    default_message = "Domain error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class Unauthorized(DomainError):
    """No authenticated caller"""

    default_message = "Unauthorized!"


class Forbidden(DomainError):
    """Caller is authenticated but does not own the resource"""

    default_message = "You are not authorized to perform this action"


class NotFound(DomainError):
    """Referenced entity does not exist"""

    default_message = "Not found"


class InvalidData(DomainError):
    """Payload is missing a required value or carries a malformed one"""

    default_message = "Invalid data"


class MissingId(DomainError):
    """Mutation called without a target identifier"""

    default_message = "Identifier is required"


class ReservationConflict(DomainError):
    """Requested dates collide with an existing reservation"""

    default_message = "Listing is not available for the selected dates"


class RemoteSyncFailure(DomainError):
    """Client-side remote call was rejected or never reached the server"""

    default_message = "Remote sync failed"
