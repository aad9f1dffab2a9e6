from typing import Any

from fastapi import APIRouter, Depends, Response

from todoapp.api.deps import get_todo_service, json_body
from todoapp.api.responses import error_response
from todoapp.services.todos import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("")
def list_todos(service: TodoService = Depends(get_todo_service)):
    result = service.list()
    if not result.ok:
        return error_response(result.error)
    return [todo.to_json() for todo in result.value]


@router.post("", status_code=201)
def create_todo(payload: Any = Depends(json_body), service: TodoService = Depends(get_todo_service)):
    result = service.create(payload)
    if not result.ok:
        return error_response(result.error)
    return result.value.to_json()


@router.patch("/{todo_id}")
def update_todo(
    todo_id: str,
    payload: Any = Depends(json_body),
    service: TodoService = Depends(get_todo_service),
):
    result = service.update(todo_id, payload)
    if not result.ok:
        return error_response(result.error)
    return result.value.to_json()


@router.delete("/{todo_id}", status_code=204)
def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    result = service.delete(todo_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=204)
