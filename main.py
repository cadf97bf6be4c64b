import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from config import Settings, load_settings
from database import create_db_and_tables, create_db_engine
from errors import TodoError
from logging_setup import setup_logging
from routes import auth, tasks
from stores.sessions import SessionManager
from utils.security import PasswordHasher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables and clear stale sessions on startup"""
    engine = app.state.engine
    create_db_and_tables(engine)
    with Session(engine) as session:
        SessionManager(session, ttl_seconds=app.state.settings.session_ttl_seconds).purge_expired()
    yield
    engine.dispose()


async def handle_todo_error(request: Request, exc: TodoError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "; ".join(problems) or "Invalid request"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Runtime settings; loaded from the environment when omitted

    Returns:
        Configured FastAPI app with its own database engine
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="To-Do List API",
        description="API documentation for the To-Do List app",
        version="1.0.0",
        docs_url="/api-docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    # CORS configuration; credentials are required for the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoError, handle_todo_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    # Include routers
    app.include_router(auth.router, prefix="/users", tags=["Authentication"])
    app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

    @app.get("/")
    def read_root():
        """Root endpoint"""
        return {
            "message": "To-Do List API is running",
            "version": app.version,
            "docs": app.docs_url,
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=5000)
