# campus_aid/backend/app/errors.py


class CampusAidError(Exception):
    """
    Base class for errors raised by the service layer.

    `status_code` is what the API answers with; main.py turns every
    CampusAidError into {"detail": message}, the same body FastAPI uses
    for HTTPException.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationRequired(CampusAidError):
    status_code = 401


class PermissionDenied(CampusAidError):
    status_code = 403


class NotFound(CampusAidError):
    status_code = 404


class ValidationFailure(CampusAidError):
    status_code = 400


class Conflict(CampusAidError):
    status_code = 409
