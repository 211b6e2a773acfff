"""Password hashing and signed session tokens (stateless, carried in an http-only cookie)."""
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.exceptions import ExpiredToken, InvalidToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt hard limit: 72 bytes (UTF-8)
BCRYPT_MAX_BYTES = 72


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


_dummy_hash: str | None = None


def dummy_password_hash() -> str:
    """A real bcrypt hash to verify against when no user matched."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = pwd_context.hash("not-a-real-password")
    return _dummy_hash


def create_session_token(
    user_id: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed token for the user; expires after access_token_expire_minutes."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {"sub": str(user_id), "iat": now, "exp": expire, "type": "session"}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_session_token(token: str, settings: Settings) -> str:
    """Verify signature and expiry; return the embedded user id.

    Raises ExpiredToken past expiry and InvalidToken for anything else that is wrong.
    """
    if not token:
        raise InvalidToken()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise ExpiredToken()
    except JWTError:
        raise InvalidToken()

    user_id = payload.get("sub")
    if not user_id or payload.get("type") != "session":
        raise InvalidToken()
    return user_id
