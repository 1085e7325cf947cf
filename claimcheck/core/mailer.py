# claimcheck/core/mailer.py

import logging
from urllib.parse import urlencode
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail
from claimcheck.errors import DeliveryError


logger = logging.getLogger(__name__)

APP_NAME = "Script Kiddos"


class Mailer:
    """
    Sends transactional e-mail through SendGrid.
    Failures are not retried; they surface to the caller as DeliveryError.
    """

    def __init__(self, api_key: str | None, sender: str | None, frontend_url: str, client=None):
        self.sender = sender
        self.frontend_url = frontend_url.rstrip("/")
        self.client = client or SendGridAPIClient(api_key)

    def send(self, to_email: str, subject: str, text: str):
        message = Mail(
            from_email=self.sender,
            to_emails=to_email,
            subject=subject,
            plain_text_content=text
        )
        try:
            self.client.send(message)
        except Exception as e:
            raise DeliveryError(f"Failed to send e-mail to {to_email}") from e
        logger.info("E-mail '%s' sent to %s", subject, to_email)

    def reset_link(self, reset_token: str) -> str:
        return f"{self.frontend_url}/reset-password?{urlencode({'token': reset_token})}"

    def send_username_reminder(self, email: str, username: str):
        self.send(email, f"Your {APP_NAME} Username", f"Your username is: {username}")

    def send_password_reset_link(self, email: str, reset_token: str):
        self.send(
            email,
            f"Password Reset - {APP_NAME}",
            f"Click this link to reset your password: {self.reset_link(reset_token)}"
        )
