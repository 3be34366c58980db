"""Tests for the email uniqueness rule."""

from unittest.mock import AsyncMock

import pytest

from patient_service.domain.exceptions import DuplicateEmailError
from patient_service.domain.uniqueness import validate_email_unique


@pytest.mark.asyncio
async def test_unused_email_passes() -> None:
    email_exists = AsyncMock(return_value=False)

    await validate_email_unique("jane@x.com", email_exists)

    email_exists.assert_awaited_once_with("jane@x.com")


@pytest.mark.asyncio
async def test_taken_email_raises() -> None:
    email_exists = AsyncMock(return_value=True)

    with pytest.raises(DuplicateEmailError) as exc_info:
        await validate_email_unique("jane@x.com", email_exists)

    assert exc_info.value.details == {"email": "jane@x.com"}
