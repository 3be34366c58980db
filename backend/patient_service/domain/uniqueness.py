"""Email uniqueness rule."""

from collections.abc import Awaitable, Callable

from patient_service.domain.exceptions import DuplicateEmailError

EmailExists = Callable[[str], Awaitable[bool]]


async def validate_email_unique(email: str, email_exists: EmailExists) -> None:
    """
    Reject an email that is already taken.

    The existence check is supplied by the caller, typically bound to the
    persistence gateway, so this rule stays free of storage concerns.

    Args:
        email: Email to check
        email_exists: Callable answering whether the email is already in use

    Raises:
        DuplicateEmailError: If email_exists reports the email as taken
    """
    if await email_exists(email):
        raise DuplicateEmailError(email)
