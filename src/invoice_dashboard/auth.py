"""
Credential authorization for the dashboard's single sign-in provider.

authorize() validates the submitted credentials, looks the user up by
email and compares the plaintext password. Anything that does not
authenticate returns None; data-access failures propagate.
"""

import hmac
from typing import Any, Mapping

from pydantic import BaseModel, EmailStr, Field, ValidationError

from invoice_dashboard.lib import logs
from invoice_dashboard.models.records import User
from invoice_dashboard.services import DashboardService, get_dashboard_service

LOG = logs.logger(__file__)


class Credentials(BaseModel):
    """Sign-in form payload."""

    email: EmailStr
    password: str = Field(min_length=6)


def authorize(
    credentials: Mapping[str, Any] | None,
    service: DashboardService | None = None,
) -> User | None:
    """
    Return the user matching ``credentials``, or None.

    Args:
        credentials: Mapping with ``email`` and ``password`` keys.
        service: Service to look users up with; defaults to the configured one.

    Raises:
        DataAccessError: The user document could not be read.
    """
    credentials = credentials or {}
    try:
        parsed = Credentials.model_validate(credentials)
    except ValidationError as exc:
        LOG.info("authorize - invalid credentials: %d error(s)", exc.error_count())
        return None

    # EmailStr normalizes the domain; look up the address exactly as submitted
    email = str(credentials["email"])
    service = service or get_dashboard_service()
    user = service.get_user(email)
    if user is None:
        return None

    if hmac.compare_digest(parsed.password.encode("utf-8"), user.password.encode("utf-8")):
        return user
    LOG.info("authorize - password mismatch for %s", email)
    return None
