from fastapi import APIRouter, Depends, Request, status
from typing import List

from dependencies import get_task_service
from errors import ValidationError
from middleware.auth import verify_session
from schemas import MessageResponse, TaskCreate, TaskResponse, TaskUpdate
from services.tasks import TaskService

router = APIRouter(
    dependencies=[Depends(verify_session)],
    responses={401: {"model": MessageResponse, "description": "Not logged in"}},
)

_STATUS_FILTERS = {"all": None, "pending": False, "completed": True}


@router.get("", response_model=List[TaskResponse], summary="Fetch all tasks for the logged-in user")
async def list_tasks(
    request: Request,
    filter_status: str = "all",
    tasks: TaskService = Depends(get_task_service),
) -> List[TaskResponse]:
    """
    Get all tasks owned by the session user

    Args:
        request: FastAPI request (contains authenticated user info)
        filter_status: Filter by status (all, pending, completed)
        tasks: Task service

    Returns:
        List of tasks, empty if the user has none
    """
    if filter_status not in _STATUS_FILTERS:
        raise ValidationError("filter_status must be one of: all, pending, completed")

    found = tasks.list(request.state.user_id, completed=_STATUS_FILTERS[filter_status])
    return [TaskResponse.model_validate(task) for task in found]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses={400: {"model": MessageResponse, "description": "Bad request"}},
)
async def create_task(
    task_data: TaskCreate,
    request: Request,
    tasks: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Create a task owned by the session user

    The owner always comes from the session, never from the request body.
    """
    task = tasks.create(
        owner_id=request.state.user_id,
        title=task_data.title,
        description=task_data.description,
        status=task_data.status,
        due_date=task_data.due_date,
    )
    return TaskResponse.model_validate(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Fetch a single task",
    responses={404: {"model": MessageResponse, "description": "Task not found"}},
)
async def get_task(
    task_id: int,
    request: Request,
    tasks: TaskService = Depends(get_task_service),
) -> TaskResponse:
    task = tasks.get(task_id, owner_id=request.state.user_id)
    return TaskResponse.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update an existing task",
    responses={
        400: {"model": MessageResponse, "description": "Bad request"},
        404: {"model": MessageResponse, "description": "Task not found"},
    },
)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    request: Request,
    tasks: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Update a task

    Only the fields present in the body change; the rest keep their values.
    """
    task = tasks.update(
        task_id,
        task_data.model_dump(exclude_unset=True),
        owner_id=request.state.user_id,
    )
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete a task",
    responses={404: {"model": MessageResponse, "description": "Task not found"}},
)
async def delete_task(
    task_id: int,
    request: Request,
    tasks: TaskService = Depends(get_task_service),
) -> MessageResponse:
    tasks.delete(task_id, owner_id=request.state.user_id)
    return MessageResponse(message="Task deleted successfully")
