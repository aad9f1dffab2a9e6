"""Todo CRUD for the signed-in user.

Every operation checks the session first, before looking at ids or payloads,
and every store lookup is scoped to the session user's id.
"""

from typing import Any, Optional

from todoapp.core.errors import not_found, unauthenticated, validation_error
from todoapp.core.results import Result
from todoapp.schemas.session import SessionUser
from todoapp.schemas.todo import TodoOut
from todoapp.services.validation import clean_description, clean_title, length_error
from todoapp.stores import TodoStore

# stands in for a request body that is not valid JSON
MALFORMED_BODY = object()


class TodoService:
    def __init__(self, store: TodoStore, user: Optional[SessionUser]):
        self.store = store
        self.user = user

    def guard(self, action: str) -> Optional[Result]:
        """Failed result when there is no session user, else ``None``."""
        if self.user is None:
            return Result.failure(unauthenticated(f"You must be signed in to {action}."))
        return None

    def list(self) -> Result[list[TodoOut]]:
        denied = self.guard("list todos")
        if denied:
            return denied
        todos = self.store.list_for_user(self.user.id)
        return Result.success([TodoOut.from_model(t) for t in todos])

    def create(self, payload: Any) -> Result[TodoOut]:
        denied = self.guard("create a todo")
        if denied:
            return denied
        if payload is MALFORMED_BODY:
            return Result.failure(validation_error("Invalid JSON body."))
        if not isinstance(payload, dict):
            payload = {}

        raw_title = payload.get("title")
        title = clean_title(raw_title) if isinstance(raw_title, str) else None
        if not title:
            return Result.failure(validation_error("Title is required."))

        raw_description = payload.get("description")
        description = clean_description(raw_description) if isinstance(raw_description, str) else None

        problem = length_error(title, description)
        if problem:
            return Result.failure(validation_error(problem))

        todo = self.store.create(self.user.id, title, description)
        return Result.success(TodoOut.from_model(todo))

    def update(self, todo_id: str, payload: Any) -> Result[TodoOut]:
        denied = self.guard("update a todo")
        if denied:
            return denied
        if not todo_id:
            return Result.failure(validation_error("Todo id is required."))
        if payload is MALFORMED_BODY or not isinstance(payload, dict):
            return Result.failure(validation_error("Invalid JSON body."))

        changes: dict[str, Any] = {}

        if "title" in payload:
            if not isinstance(payload["title"], str):
                return Result.failure(validation_error("title must be a string."))
            title = clean_title(payload["title"])
            if not title:
                return Result.failure(validation_error("Title cannot be empty."))
            changes["title"] = title

        if "description" in payload:
            raw = payload["description"]
            if raw is not None and not isinstance(raw, str):
                return Result.failure(validation_error("description must be a string."))
            changes["description"] = clean_description(raw)

        if isinstance(payload.get("completed"), bool):
            changes["completed"] = payload["completed"]

        if not changes:
            return Result.failure(
                validation_error("Provide at least one of: title, description, completed.")
            )

        problem = length_error(changes.get("title"), changes.get("description"))
        if problem:
            return Result.failure(validation_error(problem))

        todo = self.store.get_owned(todo_id, self.user.id)
        if todo is None:
            return Result.failure(not_found("Todo not found."))

        return Result.success(TodoOut.from_model(self.store.update(todo, changes)))

    def delete(self, todo_id: str) -> Result[None]:
        denied = self.guard("delete a todo")
        if denied:
            return denied
        if not todo_id:
            return Result.failure(validation_error("Todo id is required."))

        todo = self.store.get_owned(todo_id, self.user.id)
        if todo is None:
            return Result.failure(not_found("Todo not found."))

        self.store.delete(todo)
        return Result.success()
