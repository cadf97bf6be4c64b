from fastapi import Depends, Request

from config import Settings
from dependencies import get_session_manager, get_settings
from errors import Unauthorized
from schemas import SessionUser
from stores.sessions import SessionManager


async def verify_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    sessions: SessionManager = Depends(get_session_manager),
) -> SessionUser:
    """
    Dependency gate that requires a live session cookie

    Args:
        request: FastAPI request object
        settings: App settings (cookie name)
        sessions: Session manager bound to this request's database session

    Returns:
        The session's user summary

    Raises:
        Unauthorized: If the cookie is missing, unknown, or expired
    """
    token = request.cookies.get(settings.session_cookie_name)
    user = sessions.resolve(token)

    if user is None:
        raise Unauthorized("Unauthorized: please log in")

    # Attach user info to request state
    request.state.user_id = user.id
    request.state.username = user.username
    request.state.user_email = user.email
    return user
