"""Twilio REST client construction.

The shipped call flow is driven entirely by TwiML webhooks, so this client
is only built and kept on application state for future call-control needs
(e.g. updating a live call). If credentials are missing the client is None.
"""

import logging
from typing import Optional

from twilio.rest import Client

from ..config import Settings

logger = logging.getLogger(__name__)


def build_twilio_client(settings: Settings) -> Optional[Client]:
    if not (settings.twilio_account_sid and settings.twilio_auth_token):
        logger.info("Twilio credentials not configured; REST client disabled")
        return None
    return Client(settings.twilio_account_sid, settings.twilio_auth_token)
