from types import SimpleNamespace

import pytest

from fakes import FakeAuthLibrary, FakeIdentityVerifier
from todoapp.core.errors import InfrastructureError
from todoapp.models import User
from todoapp.schemas.session import AuthSession, SessionSource
from todoapp.services.session import SessionResolver
from todoapp.stores import InMemoryUserStore


def _request(cookies=None, headers=None):
    return SimpleNamespace(cookies=cookies or {}, headers=headers or {})


@pytest.fixture()
def erin():
    return User(email="erin@example.com", name="Erin (stored)", image="https://img/erin.png")


@pytest.fixture()
def users(erin):
    return InMemoryUserStore(seed=[erin])


@pytest.fixture()
def verifier():
    return FakeIdentityVerifier()


def test_identity_cookie_resolves_to_stored_profile(verifier, users, erin):
    verifier.add_token("id-token", uid="fb-erin", email=erin.email, name="Erin (claims)")
    library = FakeAuthLibrary()
    resolver = SessionResolver(verifier, library, users)

    resolved = resolver.resolve_source(_request(cookies={"session": "id-token"}))

    assert resolved.source is SessionSource.IDENTITY_PROVIDER
    assert resolved.user.id == erin.id
    assert resolved.user.name == "Erin (stored)"
    assert resolved.user.image == "https://img/erin.png"
    assert library.calls == 0


def test_rejected_cookie_falls_through_to_auth_library(verifier, users, erin):
    library = FakeAuthLibrary(AuthSession(user_id=erin.id))
    resolver = SessionResolver(verifier, library, users)

    resolved = resolver.resolve_source(_request(cookies={"session": "library-jwt"}))

    assert resolved.source is SessionSource.AUTH_LIBRARY
    assert resolved.user.email == erin.email
    assert library.calls == 1


def test_verified_token_without_stored_user_falls_through(verifier, users, erin):
    verifier.add_token("id-token", uid="fb-new", email="stranger@example.com")
    library = FakeAuthLibrary(AuthSession(user_id=erin.id))
    resolver = SessionResolver(verifier, library, users)

    user = resolver.resolve(_request(cookies={"session": "id-token"}))

    assert user.id == erin.id


def test_claims_without_email_do_not_produce_identity(verifier, users):
    verifier.add_token("id-token", uid="phone-only")
    resolver = SessionResolver(verifier, FakeAuthLibrary(), users)

    assert resolver.resolve(_request(cookies={"session": "id-token"})) is None


def test_auth_library_session_for_unknown_user_is_none(verifier, users):
    resolver = SessionResolver(verifier, FakeAuthLibrary(AuthSession(user_id="ghost")), users)
    assert resolver.resolve(_request()) is None


def test_no_credentials_is_none(verifier, users):
    resolver = SessionResolver(verifier, FakeAuthLibrary(), users)
    assert resolver.resolve(_request()) is None
    assert verifier.verified == []


def test_provider_outage_propagates(verifier, users, erin):
    verifier.failure = InfrastructureError("certificates unavailable")
    library = FakeAuthLibrary(AuthSession(user_id=erin.id))
    resolver = SessionResolver(verifier, library, users)

    with pytest.raises(InfrastructureError):
        resolver.resolve(_request(cookies={"session": "id-token"}))
    assert library.calls == 0


def test_store_failure_propagates(verifier, erin):
    class BrokenUserStore(InMemoryUserStore):
        def find_by_email(self, email):
            raise RuntimeError("database unavailable")

    verifier.add_token("id-token", uid="fb-erin", email=erin.email)
    resolver = SessionResolver(verifier, FakeAuthLibrary(), BrokenUserStore())

    with pytest.raises(RuntimeError):
        resolver.resolve(_request(cookies={"session": "id-token"}))


def test_custom_cookie_name(verifier, users, erin):
    verifier.add_token("id-token", uid="fb-erin", email=erin.email)
    resolver = SessionResolver(verifier, FakeAuthLibrary(), users, cookie_name="sid")

    assert resolver.resolve(_request(cookies={"session": "id-token"})) is None
    assert resolver.resolve(_request(cookies={"sid": "id-token"})).id == erin.id
