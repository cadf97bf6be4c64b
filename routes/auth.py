from fastapi import APIRouter, Depends, Request, Response, status

from config import Settings
from dependencies import get_auth_service, get_settings
from schemas import (
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    summary="Register a new user",
    responses={400: {"model": MessageResponse, "description": "Email or Username already exists"}},
)
def register(
    data: UserRegister,
    auth: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Creates a new user with a unique username and email.

    The password is stored hashed and is never returned.
    """
    user = auth.register(data)

    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in a user",
    responses={
        401: {"model": MessageResponse, "description": "Invalid credentials"},
        404: {"model": MessageResponse, "description": "User not found"},
    },
)
def login(
    data: UserLogin,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Authenticates a user with email and password and starts a session."""
    token, user = auth.login(data.email, data.password)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

    return LoginResponse(message="Login successful", user=user)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log out a user",
    responses={500: {"model": MessageResponse, "description": "Logout failed"}},
)
def logout(
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """Logs out the current user and destroys the session."""
    auth.logout(request.cookies.get(settings.session_cookie_name))

    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

    return MessageResponse(message="Logout Successful")
