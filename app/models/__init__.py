from app.models.user import User
from app.models.progress import Progress, QuizScore, ReviewedFlashcard

__all__ = ["User", "Progress", "QuizScore", "ReviewedFlashcard"]
