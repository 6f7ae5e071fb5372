from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ConfigDict

from .config import settings

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)

class AdminCredentials(BaseModel):
    """The configured admin identity and token signing parameters."""
    model_config = ConfigDict(frozen=True)

    email: str
    password: str
    secret: str
    algorithm: str = "HS256"
    expires_delta: timedelta = timedelta(days=1)

    @classmethod
    def from_settings(cls) -> "AdminCredentials":
        return cls(
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
            secret=settings.JWT_SECRET,
            algorithm=settings.ALGORITHM,
            expires_delta=timedelta(days=settings.ADMIN_TOKEN_EXPIRE_DAYS),
        )

class TokenPayload(BaseModel):
    email: Optional[str] = None
    exp: Optional[int] = None

# Password utilities
def get_password_hash(password: str) -> str:
    """Generate a salted bcrypt hash."""
    return pwd_context.hash(password)

# JWT utilities
def create_admin_token(email: str, credentials: AdminCredentials) -> str:
    """Create the admin access token."""
    to_encode = {
        "email": email,
        "exp": datetime.utcnow() + credentials.expires_delta,
    }

    return jwt.encode(
        to_encode,
        credentials.secret,
        algorithm=credentials.algorithm
    )

def verify_token(token: str, credentials: AdminCredentials) -> Optional[TokenPayload]:
    """Verify and decode JWT token."""
    try:
        payload = jwt.decode(
            token,
            credentials.secret,
            algorithms=[credentials.algorithm]
        )

        return TokenPayload(**payload)

    except JWTError:
        return None
