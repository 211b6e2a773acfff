"""Progress store.

Every write path goes through get_or_create(), so a user whose progress row is
missing (e.g. registration failed between the two inserts) heals on first use.
Counter updates are single UPDATE statements. A flashcard review is an
INSERT ... ON CONFLICT DO NOTHING RETURNING id, and the counter is only
incremented when that insert returned a row, so concurrent reviews of the
same card count it once.
"""
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.progress import Progress, QuizScore, ReviewedFlashcard


def _insert_for(db: AsyncSession, model):
    """Dialect insert() that supports ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"Upserts are not supported on {dialect}")


class ProgressStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _load(self, user_id: str) -> Progress | None:
        result = await self.db.execute(
            select(Progress)
            .where(Progress.user_id == user_id)
            .options(
                selectinload(Progress.quiz_scores),
                selectinload(Progress.reviewed_flashcards),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, user_id: str, now: datetime) -> Progress:
        """Return the user's progress row, inserting an all-zero one if absent."""
        progress = await self._load(user_id)
        if progress is not None:
            return progress

        stmt = (
            _insert_for(self.db, Progress)
            .values(
                user_id=user_id,
                quizzes_completed=0,
                flashcards_reviewed=0,
                streak=0,
                last_active=now,
                created_at=now,
            )
            .on_conflict_do_nothing(index_elements=["user_id"])
        )
        await self.db.execute(stmt)
        await self.db.commit()
        return await self._load(user_id)

    async def touch(self, user_id: str, now: datetime) -> Progress:
        progress = await self.get_or_create(user_id, now)
        await self.db.execute(
            update(Progress)
            .where(Progress.id == progress.id)
            .values(last_active=now)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return await self._load(user_id)

    async def append_quiz(self, user_id: str, quiz_id: str | None, score: float | None, now: datetime) -> Progress:
        progress = await self.get_or_create(user_id, now)
        await self.db.execute(
            update(Progress)
            .where(Progress.id == progress.id)
            .values(quizzes_completed=Progress.quizzes_completed + 1, last_active=now)
            .execution_options(synchronize_session=False)
        )
        self.db.add(QuizScore(progress_id=progress.id, quiz_id=quiz_id, score=score, completed_at=now))
        await self.db.commit()
        return await self._load(user_id)

    async def upsert_flashcard(self, user_id: str, card_id: str, now: datetime) -> Progress:
        """Insert the card if new and count it, else only bump its last_reviewed."""
        progress = await self.get_or_create(user_id, now)

        inserted = await self.db.execute(
            _insert_for(self.db, ReviewedFlashcard)
            .values(progress_id=progress.id, card_id=card_id, last_reviewed=now)
            .on_conflict_do_nothing(index_elements=["progress_id", "card_id"])
            .returning(ReviewedFlashcard.id)
        )
        if inserted.scalar_one_or_none() is not None:
            values = {"flashcards_reviewed": Progress.flashcards_reviewed + 1, "last_active": now}
        else:
            await self.db.execute(
                update(ReviewedFlashcard)
                .where(
                    ReviewedFlashcard.progress_id == progress.id,
                    ReviewedFlashcard.card_id == card_id,
                )
                .values(last_reviewed=now)
                .execution_options(synchronize_session=False)
            )
            values = {"last_active": now}

        await self.db.execute(
            update(Progress)
            .where(Progress.id == progress.id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return await self._load(user_id)
