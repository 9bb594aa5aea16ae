"""User registration and login endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.core.config import Settings
from simplebank.interfaces.http.deps import get_app_settings, get_db_session, get_token_maker, get_user_service
from simplebank.modules.tokens import TokenMaker
from simplebank.modules.users import (
    IncorrectPasswordError,
    UserAlreadyExistsError,
    UserCreateInput,
    UserNotFoundError,
    UserService,
)
from simplebank.schemas import CreateUserRequest, LoginUserRequest, LoginUserResponse, UserResponse

router = APIRouter()


@router.post("", response_model=UserResponse, summary="Create a user")
async def create_user(
    payload: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    try:
        user = await user_service.create_user(
            UserCreateInput(
                username=payload.username,
                password=payload.password,
                full_name=payload.full_name,
                email=payload.email,
            )
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    await db.commit()
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginUserResponse, summary="Exchange credentials for an access token")
async def login_user(
    payload: LoginUserRequest,
    user_service: UserService = Depends(get_user_service),
    token_maker: TokenMaker = Depends(get_token_maker),
    settings: Settings = Depends(get_app_settings),
) -> LoginUserResponse:
    try:
        user = await user_service.authenticate(payload.username, payload.password)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except IncorrectPasswordError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    access_token, token_payload = token_maker.issue_token(user.username, settings.access_token_duration)
    return LoginUserResponse(
        access_token=access_token,
        access_token_expires_at=token_payload.expired_at,
        user=UserResponse.model_validate(user),
    )
