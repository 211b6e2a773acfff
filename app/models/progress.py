"""Progress model: one per user. Quiz results are an append-only log; flashcards are a set keyed by card id."""
from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.db.session import Base


class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(32), ForeignKey("users.id"), unique=True, nullable=False, index=True)

    quizzes_completed = Column(Integer, nullable=False, default=0)
    flashcards_reviewed = Column(Integer, nullable=False, default=0)  # distinct cards, not re-reviews
    streak = Column(Integer, nullable=False, default=0)  # not maintained by any endpoint yet
    last_active = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="progress")
    quiz_scores = relationship("QuizScore", back_populates="progress", order_by="QuizScore.id")
    reviewed_flashcards = relationship(
        "ReviewedFlashcard", back_populates="progress", order_by="ReviewedFlashcard.id"
    )


class QuizScore(Base):
    __tablename__ = "quiz_scores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    progress_id = Column(Integer, ForeignKey("progress.id"), nullable=False, index=True)
    quiz_id = Column(String(255), nullable=True)
    score = Column(Float, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=False)

    progress = relationship("Progress", back_populates="quiz_scores")


class ReviewedFlashcard(Base):
    __tablename__ = "reviewed_flashcards"
    __table_args__ = (UniqueConstraint("progress_id", "card_id", name="uq_reviewed_flashcards_card"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    progress_id = Column(Integer, ForeignKey("progress.id"), nullable=False, index=True)
    card_id = Column(String(255), nullable=False)
    last_reviewed = Column(DateTime(timezone=True), nullable=False)

    progress = relationship("Progress", back_populates="reviewed_flashcards")
