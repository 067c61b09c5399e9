# portfolio_builder/services/email_relay.py
from __future__ import annotations

import logging
from html import escape
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class EmailRelay:
    """
    Delivers contact-form messages through an HTTP email relay.

    One instance is built per app from config and injected where needed;
    an unconfigured relay accepts messages but reports them undelivered.
    """

    def __init__(
        self,
        endpoint: Optional[str],
        api_key: Optional[str],
        recipient: Optional[str],
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.recipient = recipient
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config) -> "EmailRelay":
        return cls(
            config.get("EMAIL_RELAY_URL"),
            config.get("EMAIL_RELAY_API_KEY"),
            config.get("CONTACT_EMAIL"),
            timeout=config.get("EMAIL_RELAY_TIMEOUT", 10.0),
        )

    @property
    def configured(self) -> bool:
        return bool(self.endpoint and self.api_key)

    def send_contact_message(
        self,
        *,
        sender_email: str,
        message: str,
        recipient: Optional[str] = None,
        portfolio_name: Optional[str] = None,
    ) -> bool:
        to_address = recipient or self.recipient
        if not self.configured or not to_address:
            logger.warning("Email relay not configured, message from %s not delivered", sender_email)
            return False

        subject = "New Contact Form Message"
        if portfolio_name:
            subject = f"{subject} ({portfolio_name})"

        payload = {
            "to": to_address,
            "reply_to": sender_email,
            "subject": subject,
            "html": (
                "<h2>New Contact Form Message</h2>"
                f"<p><strong>From:</strong> {escape(sender_email)}</p>"
                "<p><strong>Message:</strong></p>"
                f"<p>{escape(message)}</p>"
            ),
        }

        try:
            response = self.session.post(
                self.endpoint,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Email relay failed for message from %s: %s", sender_email, exc)
            return False

        logger.info("Contact message from %s relayed to %s", sender_email, to_address)
        return True
