"""Progress routes: read progress, record quiz completions and flashcard reviews."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user_id
from app.db.session import get_db
from app.schemas.progress import FlashcardSubmitSchema, ProgressResponseSchema, QuizSubmitSchema
from app.services.progress import ProgressService

router = APIRouter(prefix="/api/progress", tags=["progress"])


def get_progress_service(db: Annotated[AsyncSession, Depends(get_db)]) -> ProgressService:
    return ProgressService(db)


@router.get("", response_model=ProgressResponseSchema)
async def get_progress(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Current user's progress; created with zero counters on first access."""
    return ProgressResponseSchema(progress=await service.get_progress(user_id))


@router.post("/quiz", response_model=ProgressResponseSchema)
async def submit_quiz(
    body: QuizSubmitSchema,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    progress = await service.record_quiz(user_id, body.quiz_id, body.score)
    return ProgressResponseSchema(progress=progress)


@router.post("/flashcard", response_model=ProgressResponseSchema)
async def submit_flashcard(
    body: FlashcardSubmitSchema,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    progress = await service.record_flashcard(user_id, body.card_id)
    return ProgressResponseSchema(progress=progress)
