"""Password utility routes: strength check and generator. No auth."""
from typing import Annotated

from fastapi import APIRouter, Query

from app.schemas.password import GeneratedPasswordSchema, PasswordCheckSchema, StrengthOutSchema
from app.services.passwords import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH, check_strength, generate_password

router = APIRouter(prefix="/api/password", tags=["password"])


def _enabled(flag: str | None) -> bool:
    # Only the literal "false" turns a character class off
    return flag != "false"


@router.post("/check", response_model=StrengthOutSchema)
async def check(body: PasswordCheckSchema):
    return check_strength(body.password)


@router.get("/generate", response_model=GeneratedPasswordSchema)
async def generate(
    length: Annotated[int, Query(ge=MIN_LENGTH, le=MAX_LENGTH)] = DEFAULT_LENGTH,
    uppercase: str | None = None,
    lowercase: str | None = None,
    numbers: str | None = None,
    symbols: str | None = None,
):
    password = generate_password(
        length=length,
        uppercase=_enabled(uppercase),
        lowercase=_enabled(lowercase),
        numbers=_enabled(numbers),
        symbols=_enabled(symbols),
    )
    return GeneratedPasswordSchema(password=password)
