from __future__ import annotations

import asyncio

import pytest

from app.models.contact import ContactForm
from app.services.contact import ContactService, ContactValidationError
from conftest import FakeMailer, FakeStore


def test_validation_happens_before_side_effects(settings, status_cell):
    store = FakeStore(status_cell)
    mailer = FakeMailer(settings, status_cell)
    service = ContactService(store, mailer)

    with pytest.raises(ContactValidationError, match="Name, Email, and Message are required."):
        asyncio.run(service.submit(ContactForm(name="A", email="a@x.com")))
    assert store.records == []
    assert mailer.sent == []


def test_submit_returns_record_id(settings, status_cell):
    store = FakeStore(status_cell)
    mailer = FakeMailer(settings, status_cell)
    service = ContactService(store, mailer)

    contact_id = asyncio.run(service.submit(ContactForm(name="A", email="a@x.com", message="hi")))
    assert contact_id == "contact-1"
    assert len(mailer.sent) == 1
    assert "<p><b>Message:</b> hi</p>" in mailer.sent[0].get_content()
