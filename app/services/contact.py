"""
Contact submission handling: validate, persist, notify.
"""

import logging

from app.models.contact import ContactForm, ContactSubmission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, Email, and Message are required."


class ContactValidationError(ValueError):
    """A required contact field is missing or empty."""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message)


class ContactService:
    """
    Handles one contact form submission.

    Args:
        store: Persistence client exposing ``insert_contact``
        mailer: Notification client exposing ``send_contact_notification``
    """

    def __init__(self, store, mailer):
        self.store = store
        self.mailer = mailer

    @staticmethod
    def validate(form: ContactForm) -> ContactSubmission:
        # Presence check only: whitespace-only values are accepted
        if not form.name or not form.email or not form.message:
            raise ContactValidationError()
        return ContactSubmission(
            name=form.name,
            email=form.email,
            phone=form.phone,
            message=form.message,
        )

    async def submit(self, form: ContactForm) -> str:
        """
        Validate, persist and notify.

        The record is not rolled back when the notification fails.

        Returns:
            str: Id of the persisted record

        Raises:
            ContactValidationError: before any side effect, if a required field is missing
        """
        submission = self.validate(form)

        contact_id = await self.store.insert_contact(submission)
        logger.info(f"✅ Contact saved to DB: {contact_id} {submission.to_document()}")

        await self.mailer.send_contact_notification(submission)
        logger.info("✅ Email sent successfully")

        return contact_id
