class ServiceError(Exception):
    """Base class. Every error carries a kind tag and an HTTP status."""

    kind = "ServerError"
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"type": self.kind, "statusCode": self.status_code, "message": self.message}


class NotFoundError(ServiceError):
    kind = "NotFound"
    status_code = 404


class ConflictError(ServiceError):
    kind = "Conflict"
    status_code = 409


class InvalidParameterError(ServiceError):
    kind = "InvalidParameter"
    status_code = 400


class ValidationError(ServiceError):
    kind = "ValidationError"
    status_code = 400


class BadRequestError(ServiceError):
    kind = "BadRequestError"
    status_code = 400


class ServerError(ServiceError):
    pass


class BadSubscriptionDataError(ServiceError):
    kind = "BadSubscriptionDataError"
    status_code = 500


class DatabaseError(ServiceError):
    kind = "DatabaseError"
    status_code = 500
