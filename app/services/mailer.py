"""
Notification mailer.

Sends the "new contact request" email to the service's own mailbox over
SMTP with implicit TLS, and reports transporter readiness to the
connectivity status cell.
"""

import html
import logging
from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
from fastapi import Request

from app.core.config import Settings
from app.core.status import ConnectivityStatus, OK, FAILED
from app.models.contact import ContactSubmission

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT = "📩 New Contact Form Submission"

NOTIFICATION_TEMPLATE = """
<h3>New Contact Request</h3>
<p><b>Name:</b> {name}</p>
<p><b>Email:</b> {email}</p>
<p><b>Phone:</b> {phone}</p>
<p><b>Message:</b> {message}</p>
"""


class MailerNotConfigured(RuntimeError):
    pass


class ContactMailer:
    """Sends contact notifications through the configured SMTP account."""

    def __init__(self, settings: Settings, status: ConnectivityStatus):
        self.settings = settings
        self.status = status

    def _smtp(self):
        if not self.settings.email_user or not self.settings.email_pass:
            raise MailerNotConfigured("Email credentials not configured (EMAIL_USER / EMAIL_PASS)")
        return aiosmtplib.SMTP(
            hostname=self.settings.smtp_host,
            port=self.settings.smtp_port,
            use_tls=self.settings.smtp_use_tls,
            timeout=self.settings.smtp_timeout,
        )

    async def verify(self) -> bool:
        """
        Open a session, authenticate and quit, recording the outcome.

        Returns:
            bool: True if the transporter is ready
        """
        try:
            async with self._smtp() as smtp:
                await smtp.login(self.settings.email_user, self.settings.email_pass)
        except Exception as e:
            logger.error(f"❌ Email transporter error: {str(e)}")
            self.status.set_mail(FAILED, str(e))
            return False

        logger.info("✅ Email transporter is ready")
        self.status.set_mail(OK)
        return True

    def render_body(self, submission: ContactSubmission) -> str:
        fields = {
            "name": submission.name,
            "email": submission.email,
            "phone": submission.phone or "",
            "message": submission.message,
        }
        if self.settings.escape_email_html:
            fields = {key: html.escape(value) for key, value in fields.items()}
        return NOTIFICATION_TEMPLATE.format(**fields)

    def build_message(self, submission: ContactSubmission) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.settings.email_sender_name, self.settings.email_user or ""))
        message["To"] = self.settings.email_user or ""
        message["Subject"] = NOTIFICATION_SUBJECT
        message.set_content(self.render_body(submission), subtype="html")
        return message

    async def send_contact_notification(self, submission: ContactSubmission):
        """Send one notification email. Raises on any failure."""
        message = self.build_message(submission)
        async with self._smtp() as smtp:
            await smtp.login(self.settings.email_user, self.settings.email_pass)
            await smtp.send_message(message)


def get_mailer(request: Request) -> ContactMailer:
    """Returns the application's ContactMailer"""
    return request.app.state.mailer
