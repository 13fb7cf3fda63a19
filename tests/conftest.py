"""
Shared fixtures: the real FastAPI app wired to in-memory collaborators.
The fakes keep the real ContactMailer message construction so tests see the
exact email that would go out.
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.status import ConnectivityStatus, OK
from app.main import create_app
from app.services.mailer import ContactMailer


class FakeDatabase:
    def __init__(self, name="test"):
        self.name = name
        self.collections = []

    async def list_collection_names(self):
        return list(self.collections)

    async def create_collection(self, name):
        self.collections.append(name)


class FakeStore:
    def __init__(self, status, fail_with=None, hold=False):
        self.status = status
        self.fail_with = fail_with
        self.hold = hold
        self.db = FakeDatabase()
        self.records = []
        self.closed = False

    async def connect(self):
        if self.hold:
            await asyncio.Event().wait()
        self.status.set_database(OK)
        return True

    async def insert_contact(self, submission):
        if self.fail_with is not None:
            raise self.fail_with
        self.records.append(submission.to_document())
        return f"contact-{len(self.records)}"

    def close(self):
        self.closed = True


class FakeMailer(ContactMailer):
    def __init__(self, settings, status, fail_with=None, hold=False):
        super().__init__(settings, status)
        self.fail_with = fail_with
        self.hold = hold
        self.sent = []

    async def verify(self):
        if self.hold:
            await asyncio.Event().wait()
        self.status.set_mail(OK)
        return True

    async def send_contact_notification(self, submission):
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(self.build_message(submission))


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        mongo_uri=None,
        mongodb_url=None,
        email_user="inbox@example.com",
        email_pass="app-password",
    )


@pytest.fixture
def status_cell():
    return ConnectivityStatus()


@pytest.fixture
def store(status_cell):
    return FakeStore(status_cell)


@pytest.fixture
def mailer(settings, status_cell):
    return FakeMailer(settings, status_cell)


@pytest.fixture
def make_client(settings, status_cell):
    """Build a TestClient around create_app with the given collaborators."""
    clients = []

    def _make(store, mailer):
        app = create_app(settings=settings, store=store, mailer=mailer, status=status_cell)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, store, mailer):
    return make_client(store, mailer)
