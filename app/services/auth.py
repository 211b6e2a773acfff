"""Registration, login and identity lookup. Stateless across requests."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.exceptions import InvalidCredentials, InvalidEmail, InvalidName, NotFound, RateLimited, WeakPassword
from app.core.rate_limit import SlidingWindowLimiter
from app.core.security import BCRYPT_MAX_BYTES, dummy_password_hash, hash_password, verify_password
from app.db.progress import ProgressStore
from app.db.users import UserStore
from app.models.user import User

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(
        self,
        db: AsyncSession,
        settings: Settings,
        login_limiter: SlidingWindowLimiter | None = None,
    ) -> None:
        self.settings = settings
        self.users = UserStore(db)
        self.progress = ProgressStore(db)
        self.login_limiter = login_limiter

    async def register(self, name: str, email: str, password: str) -> User:
        name_clean = (name or "").strip()
        email_norm = normalize_email(email)
        pwd = password or ""

        if not email_norm or not EMAIL_RE.match(email_norm):
            raise InvalidEmail()

        if not name_clean:
            raise InvalidName()

        min_length = self.settings.min_password_length
        if len(pwd) < min_length:
            raise WeakPassword(f"Password must be at least {min_length} characters long")

        if len(pwd.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise WeakPassword(f"Password must be at most {BCRYPT_MAX_BYTES} bytes long")

        user = await self.users.create_user(name_clean, email_norm, hash_password(pwd))
        await self.progress.get_or_create(user.id, datetime.now(timezone.utc))

        logger.info("Registered user id=%s", user.id)
        return user

    async def login(self, email: str, password: str, client_ip: str) -> User:
        if self.login_limiter is not None and not self.login_limiter.hit(client_ip):
            logger.warning("Login rate limit hit for ip=%s", client_ip)
            raise RateLimited()

        user = await self.users.find_by_email(normalize_email(email))
        # unknown emails still pay for a bcrypt check so timing matches
        hashed = user.hashed_password if user is not None else dummy_password_hash()
        password_ok = verify_password(password or "", hashed)
        if user is None or not password_ok:
            logger.info("Failed login from ip=%s", client_ip)
            raise InvalidCredentials()

        await self.progress.touch(user.id, datetime.now(timezone.utc))

        logger.info("User id=%s logged in", user.id)
        return user

    async def me(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id)
        if user is None:
            raise NotFound()
        return user
