"""Credential store: user rows looked up by email or id."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateEmail
from app.models.user import User


class UserStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> User | None:
        return await self.db.get(User, user_id)

    async def create_user(self, name: str, email: str, hashed_password: str) -> User:
        """Insert a user. The unique email index is the final word on duplicates."""
        if await self.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(name=name, email=email, hashed_password=hashed_password)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmail()
        await self.db.refresh(user)
        return user
