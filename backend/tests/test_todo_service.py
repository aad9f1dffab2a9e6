import pytest

from todoapp.core.errors import ErrorKind
from todoapp.models import Todo
from todoapp.schemas.session import SessionUser
from todoapp.services.todos import MALFORMED_BODY, TodoService
from todoapp.stores import InMemoryTodoStore

OWNER = SessionUser(id="owner", email="owner@example.com")
OTHER = SessionUser(id="other", email="other@example.com")


@pytest.fixture()
def store():
    return InMemoryTodoStore(
        seed=[
            Todo(id="mine", user_id=OWNER.id, title="Mine"),
            Todo(id="theirs", user_id=OTHER.id, title="Theirs"),
        ]
    )


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.list(),
        lambda s: s.create({"title": "ok"}),
        lambda s: s.create(MALFORMED_BODY),
        lambda s: s.update("", MALFORMED_BODY),
        lambda s: s.update("mine", {}),
        lambda s: s.delete(""),
    ],
)
def test_unauthenticated_is_checked_first(store, call):
    result = call(TodoService(store, None))
    assert not result.ok
    assert result.error.kind is ErrorKind.UNAUTHENTICATED
    assert store.writes == 0


def test_blank_title_writes_nothing(store):
    result = TodoService(store, OWNER).create({"title": "  ", "description": "x"})
    assert result.error.kind is ErrorKind.VALIDATION
    assert store.writes == 0


def test_empty_update_writes_nothing(store):
    result = TodoService(store, OWNER).update("mine", {"completed": None, "extra": 1})
    assert result.error.message == "Provide at least one of: title, description, completed."
    assert store.writes == 0


def test_foreign_and_missing_ids_are_indistinguishable(store):
    service = TodoService(store, OWNER)

    foreign = service.update("theirs", {"completed": True})
    missing = service.update("nope", {"completed": True})
    assert foreign.error == missing.error
    assert foreign.error.kind is ErrorKind.NOT_FOUND

    assert service.delete("theirs").error == service.delete("nope").error
    assert store.get_owned("theirs", OTHER.id).completed is False


def test_update_toggles_completion(store):
    service = TodoService(store, OWNER)

    done = service.update("mine", {"completed": True})
    assert done.ok and done.value.completed is True

    undone = service.update("mine", {"completed": False})
    assert undone.value.completed is False


def test_list_is_scoped_to_owner(store):
    titles = [t.title for t in TodoService(store, OTHER).list().value]
    assert titles == ["Theirs"]


def test_delete_returns_empty_success(store):
    result = TodoService(store, OWNER).delete("mine")
    assert result.ok and result.value is None
    assert store.list_for_user(OWNER.id) == []
