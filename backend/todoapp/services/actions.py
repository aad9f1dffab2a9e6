"""Form-submission variant of the todo mutations.

Results are ``ActionResult`` flags rather than HTTP errors. Update and
delete act on "the todo with this id owned by this user"; when nothing
matches they succeed without changing anything.
"""

from typing import Optional

from todoapp.schemas.session import SessionUser
from todoapp.schemas.todo import ActionResult
from todoapp.services.validation import clean_description, clean_title, length_error
from todoapp.services.views import TODO_VIEWS, ViewRefresher
from todoapp.stores import TodoStore


FORM_TRUE = {"true", "on", "1", "yes"}
FORM_FALSE = {"false", "off", "0", "no"}


def _failed(error: str) -> ActionResult:
    return ActionResult(success=False, error=error)


class TodoActions:
    def __init__(self, store: TodoStore, user: Optional[SessionUser], views: ViewRefresher):
        self.store = store
        self.user = user
        self.views = views

    def create(self, title: Optional[str], description: Optional[str] = None) -> ActionResult:
        if self.user is None:
            return _failed("You must be signed in to create a todo.")

        title = clean_title(title or "")
        if not title:
            return _failed("Title is required.")
        description = clean_description(description)

        problem = length_error(title, description)
        if problem:
            return _failed(problem)

        self.store.create(self.user.id, title, description)
        return self._done()

    def update(
        self,
        todo_id: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[str] = None,
    ) -> ActionResult:
        """``None`` means "leave unchanged"; an empty description clears it."""
        if self.user is None:
            return _failed("You must be signed in to update a todo.")

        changes = {}
        if title is not None:
            cleaned = clean_title(title)
            if not cleaned:
                return _failed("Title cannot be empty")
            changes["title"] = cleaned
        if description is not None:
            changes["description"] = clean_description(description)
        if completed is not None:
            flag = completed.strip().lower()
            if flag not in FORM_TRUE | FORM_FALSE:
                return _failed("Completed must be true or false")
            changes["completed"] = flag in FORM_TRUE

        problem = length_error(changes.get("title"), changes.get("description"))
        if problem:
            return _failed(problem)

        todo = self.store.get_owned(todo_id, self.user.id)
        if todo is not None and changes:
            self.store.update(todo, changes)
        return self._done()

    def delete(self, todo_id: str) -> ActionResult:
        if self.user is None:
            return _failed("You must be signed in to delete a todo.")

        todo = self.store.get_owned(todo_id, self.user.id)
        if todo is not None:
            self.store.delete(todo)
        return self._done()

    def _done(self) -> ActionResult:
        self.views.refresh(*TODO_VIEWS)
        return ActionResult(success=True)
