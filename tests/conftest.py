import itertools

import pytest
from fastapi.testclient import TestClient
from firebase_admin import auth

from app.core.config import settings
from app.main import create_app

SECRET = "s3cr3t"


@pytest.fixture
def signing_secret(monkeypatch):
    monkeypatch.setattr(settings, "RAZORPAY_KEY_SECRET", SECRET)
    return SECRET


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "MAINTENANCE_MODE", False)
    with TestClient(create_app(), raise_server_exceptions=False) as c:
        yield c


class FakeSnapshot:
    def __init__(self, data):
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return self._data


class FakeDocument:
    def __init__(self, store, path):
        self._store = store
        self._path = path

    def get(self):
        if self._store.fail_reads:
            raise self._store.fail_reads
        return FakeSnapshot(self._store.docs.get(self._path))

    def set(self, data):
        if self._store.fail_writes:
            raise self._store.fail_writes
        self._store.writes.append(self._path)
        self._store.docs[self._path] = dict(data)


class FakeCollection:
    def __init__(self, store, name):
        self._store = store
        self._name = name

    def document(self, doc_id):
        return FakeDocument(self._store, f"{self._name}/{doc_id}")


class FakeFirestore:
    """in-memory stand-in for a Firestore client, records every document write."""

    def __init__(self):
        self.docs = {}
        self.writes = []
        self.fail_writes = None
        self.fail_reads = None

    def collection(self, name):
        return FakeCollection(self, name)


class FakeUser:
    def __init__(self, uid, email):
        self.uid = uid
        self.email = email


class FakeIdentityProvider:
    """fresh Firebase Auth user table that enforces email uniqueness."""

    def __init__(self):
        self.users = {}
        self._ids = itertools.count(1)

    def create_user(self, email=None, password=None, display_name=None, email_verified=False, app=None):
        if email in self.users:
            raise auth.EmailAlreadyExistsError("The user with the provided email already exists", None, None)
        user = FakeUser(f"uid-{next(self._ids)}", email)
        self.users[email] = user
        return user

    def get_user_by_email(self, email, app=None):
        if email not in self.users:
            raise auth.UserNotFoundError(f"No user record found for the provided email: {email}")
        return self.users[email]


@pytest.fixture
def firestore_db():
    return FakeFirestore()


@pytest.fixture
def identity_provider(mocker):
    provider = FakeIdentityProvider()
    mocker.patch("app.services.admin.bootstrap.auth.create_user", side_effect=provider.create_user)
    mocker.patch("app.services.admin.bootstrap.auth.get_user_by_email", side_effect=provider.get_user_by_email)
    return provider
