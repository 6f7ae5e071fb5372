import logging
import secrets

from ..core.errors import InvalidCredentials, MissingInput, NotAuthorized
from ..core.security import AdminCredentials, create_admin_token, verify_token

logger = logging.getLogger(__name__)

class AdminAuthService:
    """Checks the single configured admin identity and mints its tokens."""

    def __init__(self, credentials: AdminCredentials):
        self.credentials = credentials

    def login(self, email: str, password: str) -> str:
        """Authenticate the admin and return a signed token."""
        if not email or not password:
            raise MissingInput("Email and password are required")

        if not (
            self._matches(email, self.credentials.email)
            and self._matches(password, self.credentials.password)
        ):
            logger.warning(f"Rejected admin login for {email}")
            raise InvalidCredentials()

        return create_admin_token(email, self.credentials)

    def verify(self, token: str) -> str:
        """Return the admin email carried by a valid token."""
        if not token:
            raise NotAuthorized()

        payload = verify_token(token, self.credentials)
        if not payload or not payload.email:
            raise NotAuthorized()

        if not self._matches(payload.email, self.credentials.email):
            raise NotAuthorized()

        return payload.email

    @staticmethod
    def _matches(supplied: str, expected: str) -> bool:
        return secrets.compare_digest(supplied.encode(), expected.encode())
