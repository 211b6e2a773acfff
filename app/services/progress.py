"""Per-user quiz and flashcard progress."""
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.progress import ProgressStore
from app.schemas.progress import ProgressSchema


class ProgressService:
    def __init__(self, db: AsyncSession) -> None:
        self.store = ProgressStore(db)

    async def get_progress(self, user_id: str) -> ProgressSchema:
        progress = await self.store.get_or_create(user_id, datetime.now(timezone.utc))
        return ProgressSchema.model_validate(progress)

    async def record_quiz(self, user_id: str, quiz_id: str | None, score: float | None) -> ProgressSchema:
        """Count a completed quiz and append its score; quiz_id and score are stored as given."""
        progress = await self.store.append_quiz(user_id, quiz_id, score, datetime.now(timezone.utc))
        return ProgressSchema.model_validate(progress)

    async def record_flashcard(self, user_id: str, card_id: str) -> ProgressSchema:
        """Mark a card reviewed. Re-reviews only refresh last_reviewed."""
        progress = await self.store.upsert_flashcard(user_id, card_id, datetime.now(timezone.utc))
        return ProgressSchema.model_validate(progress)
