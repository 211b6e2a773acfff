"""Pydantic schemas for registration, login and the public user projection."""
from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class RegisterSchema(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    password: str


class LoginSchema(BaseModel):
    email: str
    password: str


class UserOutSchema(BaseModel):
    """Public projection of a user. Never carries the password hash."""

    id: str
    name: str
    email: str

    class Config:
        from_attributes = True


class UserDetailSchema(UserOutSchema):
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class AuthResponseSchema(BaseModel):
    message: str
    user: UserOutSchema


class MeResponseSchema(BaseModel):
    user: UserDetailSchema


class MessageSchema(BaseModel):
    message: str
