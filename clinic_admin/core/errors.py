from fastapi import HTTPException, status


class AdminAPIError(HTTPException):
    """Base error for the admin API, rendered as a ``success: false`` envelope."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(
            status_code=type(self).status_code,
            detail=detail or type(self).message,
            headers=headers,
        )

    def to_envelope(self) -> dict:
        return {"success": False, "message": self.detail}


class MissingInput(AdminAPIError):
    message = "Please fill all the fields"


class InvalidEmail(AdminAPIError):
    message = "Please enter valid email"


class WeakPassword(AdminAPIError):
    message = "Password must be at least 8 characters long"


class InvalidAddress(AdminAPIError):
    message = "Address must be a JSON object"


class DuplicateEmail(AdminAPIError):
    message = "A doctor with this email already exists"


class InvalidFees(AdminAPIError):
    message = "Fees must be greater than zero"


class AlreadyCancelled(AdminAPIError):
    message = "Appointment already cancelled"


class NotFound(AdminAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class InvalidCredentials(AdminAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid Credentials"


class NotAuthorized(AdminAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not Authorized Login Again"

    def __init__(self, detail: str = None):
        super().__init__(detail, headers={"WWW-Authenticate": "atoken"})


class InternalError(AdminAPIError):
    """Store, upload or hashing failure. The underlying message is passed through."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, error: str = None):
        super().__init__()
        self.error = error

    def to_envelope(self) -> dict:
        envelope = super().to_envelope()
        if self.error:
            envelope["error"] = self.error
        return envelope
