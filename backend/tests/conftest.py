import os

# Must be set before the app modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import todoapp.models  # noqa: F401
from fakes import FakeIdentityVerifier
from main import create_app
from todoapp.api.deps import get_identity_verifier
from todoapp.core.database import get_session
from todoapp.models import User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def verifier():
    return FakeIdentityVerifier()


@pytest.fixture()
def app(engine, verifier):
    app = create_app()

    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    return app


@pytest.fixture()
def client(app):
    # no context manager: the startup hook would create tables on the real engine
    return TestClient(app)


def _add_user(session: Session, email: str, name: str) -> User:
    user = User(email=email, name=name)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def alice(db_session):
    return _add_user(db_session, "alice@example.com", "Alice")


@pytest.fixture()
def bob(db_session):
    return _add_user(db_session, "bob@example.com", "Bob")


@pytest.fixture()
def alice_client(client, verifier, alice):
    verifier.add_token("token-alice", uid="fb-alice", email=alice.email)
    client.cookies.set("session", "token-alice")
    return client


@pytest.fixture()
def bob_client(app, verifier, bob):
    verifier.add_token("token-bob", uid="fb-bob", email=bob.email)
    client = TestClient(app)
    client.cookies.set("session", "token-bob")
    return client
