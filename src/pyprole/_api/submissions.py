"""Contact form and newsletter tables.

Tables:
  - contact_messages
  - newsletter_signups
"""

from __future__ import annotations

import logging

from pyprole._api._common import MINIMAL, raise_for_response
from pyprole._constants import CONTACT_TABLE, NEWSLETTER_TABLE
from pyprole._redact import mask_email
from pyprole._transport import Transport
from pyprole.models.submissions import ContactMessage, NewsletterSignup

_logger = logging.getLogger(__name__)


async def insert_contact_message(transport: Transport, message: ContactMessage) -> None:
    """Store a contact form submission."""
    response = await transport.request(
        "POST",
        CONTACT_TABLE,
        body=[message.model_dump()],
        prefer=MINIMAL,
    )
    raise_for_response(response)
    _logger.info("Contact message stored from %s", mask_email(message.email))


async def insert_newsletter_signup(transport: Transport, signup: NewsletterSignup) -> None:
    """Store a newsletter signup.

    Raises :class:`~pyprole.exceptions.ProleDuplicateError` when the address
    is already subscribed.
    """
    response = await transport.request(
        "POST",
        NEWSLETTER_TABLE,
        body=[signup.model_dump()],
        prefer=MINIMAL,
    )
    raise_for_response(response)
    _logger.info("Newsletter signup stored for %s", mask_email(signup.email))
