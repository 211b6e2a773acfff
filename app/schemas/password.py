"""Pydantic schemas for the password strength checker and generator."""
from pydantic import BaseModel


class PasswordCheckSchema(BaseModel):
    password: str


class CriterionSchema(BaseModel):
    label: str
    passed: bool


class StrengthOutSchema(BaseModel):
    score: int
    strength: str
    checks: list[CriterionSchema]


class GeneratedPasswordSchema(BaseModel):
    password: str
