import re
from portfolio_builder.extensions import db
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.models.contact_message import ContactMessage
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.services.email_relay import EmailRelay
from portfolio_builder.utils.transaction import transactional

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MAX_MESSAGE_LENGTH = 5000


def submit_contact_message(
    *,
    portfolio: Portfolio,
    relay: EmailRelay,
    email: str,
    message: str,
) -> ContactMessage:
    """
    Store a visitor's message for the portfolio owner and relay it by email.

    The message is kept even when delivery fails; `delivered` records
    the outcome.
    """
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
        raise InvariantViolation("A valid email address is required")

    if not isinstance(message, str) or not message.strip():
        raise InvariantViolation("Message is required")

    if len(message) > MAX_MESSAGE_LENGTH:
        raise InvariantViolation(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")

    contact = ContactMessage()
    contact.portfolio_id = portfolio.id
    contact.email = email
    contact.message = message.strip()

    with transactional():
        db.session.add(contact)

    # Relay outside the transaction
    contact.delivered = relay.send_contact_message(
        sender_email=email,
        message=contact.message,
        recipient=portfolio.contact_email,
        portfolio_name=portfolio.name,
    )

    if contact.delivered:
        with transactional():
            db.session.add(contact)

    return contact
