"""Pydantic schemas for progress. JSON uses camelCase field names."""
from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class QuizScoreSchema(_CamelModel):
    quiz_id: str | None = None
    score: float | None = None
    completed_at: datetime


class ReviewedFlashcardSchema(_CamelModel):
    card_id: str
    last_reviewed: datetime


class ProgressSchema(_CamelModel):
    user_id: str
    quizzes_completed: int = 0
    quiz_scores: list[QuizScoreSchema] = []
    flashcards_reviewed: int = 0
    reviewed_flashcards: list[ReviewedFlashcardSchema] = []
    streak: int = 0
    last_active: datetime


class ProgressResponseSchema(BaseModel):
    progress: ProgressSchema


class QuizSubmitSchema(_CamelModel):
    quiz_id: str | None = None
    score: float | None = None


class FlashcardSubmitSchema(_CamelModel):
    card_id: str
