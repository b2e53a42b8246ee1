"""User Schemas — signup/login bodies and the serialized user.

Invariants:
    - Signup requires all four fields, non-empty
    - email is taken as given: no normalization, no format check
    - UserRead includes the stored password digest (login response contract)
"""

from uuid import UUID

from pydantic import Field

from forum.schemas.base import ForumSchema, document_id_field


class UserCreate(ForumSchema):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(ForumSchema):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRead(ForumSchema):
    id: UUID = document_id_field()
    first_name: str
    last_name: str
    email: str
    # ADR: digest echoed back on login, kept for client compatibility (see DESIGN.md)
    password: str


class LoginResponse(ForumSchema):
    message: str
    user: UserRead
