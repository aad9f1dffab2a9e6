from sqlmodel import Session, select

from todoapp.models import User
from todoapp.stores import InMemoryUserStore, SQLUserStore


class StaleReadUserStore(SQLUserStore):
    """Misses the existing row once, as a concurrent insert would."""

    def __init__(self, session):
        super().__init__(session)
        self.stale = True

    def find_by_email(self, email):
        if self.stale:
            self.stale = False
            return None
        return super().find_by_email(email)


def test_upsert_recovers_from_unique_email_race(engine, alice):
    with Session(engine) as session:
        user = StaleReadUserStore(session).upsert_by_email(
            alice.email, name="Alice Again", image="https://img/a.png"
        )
        assert user.id == alice.id

    with Session(engine) as session:
        rows = session.exec(select(User)).all()
    assert len(rows) == 1
    assert rows[0].name == "Alice Again"
    assert rows[0].image == "https://img/a.png"


def test_sql_store_matches_email_case_insensitively(db_session, alice):
    store = SQLUserStore(db_session)
    assert store.find_by_email("  ALICE@Example.com ").id == alice.id

    user = store.upsert_by_email("Alice@EXAMPLE.com", name="Alice", image=None)
    assert user.id == alice.id


def test_stores_save_lowercased_email(db_session):
    assert SQLUserStore(db_session).create("Gina@Example.COM").email == "gina@example.com"
    assert InMemoryUserStore().create("Gina@Example.COM").email == "gina@example.com"


def test_memory_store_upsert_ignores_case():
    store = InMemoryUserStore()
    first = store.upsert_by_email("Hal@Example.com", name="Hal", image=None)
    second = store.upsert_by_email("hal@example.com", name="Harold", image=None)

    assert first.id == second.id
    assert len(store) == 1
    assert second.name == "Harold"
