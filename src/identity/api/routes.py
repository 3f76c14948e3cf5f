"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Depends

from shared.web import ErrorResponse, get_container

from identity.api.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterUserRequest,
    RegisterUserResponse,
    UserResponse,
)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "/register",
    status_code=201,
    response_model=RegisterUserResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register_user(body: RegisterUserRequest, container=Depends(get_container)) -> RegisterUserResponse:
    user = container.auth_service.register_user(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return RegisterUserResponse(user=UserResponse(**user.public()))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(body: LoginRequest, container=Depends(get_container)) -> LoginResponse:
    token, user = container.auth_service.login(email=body.email, password=body.password)
    return LoginResponse(token=token, user=UserResponse(**user.public()))
