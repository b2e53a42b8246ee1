"""User Routes — signup and login.

Invariants:
    - Signup response never contains the password or its digest
    - Login failures share one message regardless of which credential was wrong
    - Login issues no token or session: the response body is the whole result
"""

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_user_handlers
from forum.schemas.base import MessageResponse
from forum.schemas.user import LoginRequest, LoginResponse, UserCreate, UserRead
from forum.services.handle_users import UserHandlers

router = APIRouter(tags=["users"])


@router.post(
    "/signup", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: UserCreate,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    await handlers.signup(
        body.first_name, body.last_name, body.email, body.password,
    )
    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    user = await handlers.login(body.email, body.password)
    return LoginResponse(
        message="Login successful", user=UserRead.model_validate(user),
    )
