import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from todoapp.api.deps import get_todo_actions
from todoapp.schemas.todo import ActionResult
from todoapp.services.actions import TodoActions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard/todos/actions", tags=["actions"])


def _store_failure(verb: str) -> JSONResponse:
    body = ActionResult(success=False, error=f"Failed to {verb} todo. Please try again.")
    return JSONResponse(body.model_dump(), status_code=500)


@router.post("/create", response_model=ActionResult)
def create_todo_action(
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    actions: TodoActions = Depends(get_todo_actions),
):
    try:
        return actions.create(title, description)
    except SQLAlchemyError:
        logger.exception("createTodo action failed")
        return _store_failure("create")


@router.post("/{todo_id}/update", response_model=ActionResult)
def update_todo_action(
    todo_id: str,
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    completed: Optional[str] = Form(default=None),
    actions: TodoActions = Depends(get_todo_actions),
):
    try:
        return actions.update(todo_id, title=title, description=description, completed=completed)
    except SQLAlchemyError:
        logger.exception("updateTodo action failed")
        return _store_failure("update")


@router.post("/{todo_id}/delete", response_model=ActionResult)
def delete_todo_action(todo_id: str, actions: TodoActions = Depends(get_todo_actions)):
    try:
        return actions.delete(todo_id)
    except SQLAlchemyError:
        logger.exception("deleteTodo action failed")
        return _store_failure("delete")
