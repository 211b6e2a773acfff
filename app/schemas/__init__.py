from app.schemas.auth import (
    AuthResponseSchema,
    LoginSchema,
    MeResponseSchema,
    MessageSchema,
    RegisterSchema,
    UserDetailSchema,
    UserOutSchema,
)
from app.schemas.password import (
    CriterionSchema,
    GeneratedPasswordSchema,
    PasswordCheckSchema,
    StrengthOutSchema,
)
from app.schemas.progress import (
    FlashcardSubmitSchema,
    ProgressResponseSchema,
    ProgressSchema,
    QuizScoreSchema,
    QuizSubmitSchema,
    ReviewedFlashcardSchema,
)

__all__ = [
    "AuthResponseSchema",
    "CriterionSchema",
    "FlashcardSubmitSchema",
    "GeneratedPasswordSchema",
    "LoginSchema",
    "MeResponseSchema",
    "MessageSchema",
    "PasswordCheckSchema",
    "ProgressResponseSchema",
    "ProgressSchema",
    "QuizScoreSchema",
    "QuizSubmitSchema",
    "RegisterSchema",
    "ReviewedFlashcardSchema",
    "StrengthOutSchema",
    "UserDetailSchema",
    "UserOutSchema",
]
