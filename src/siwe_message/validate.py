"""
Checks on an already-parsed message. No signatures are involved here; callers
that verify a signature do so over the original text.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from siwe_message.models.message import Message, ParsedMessage
from siwe_message.serializer import validate_fields
from siwe_message.address import normalize_address
from siwe_message.timestamps import utc_now


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def validate_message(
    message: Optional[Union[Message, ParsedMessage]],
    *,
    address: Optional[str] = None,
    domain: Optional[str] = None,
    nonce: Optional[str] = None,
    scheme: Optional[str] = None,
    time: Optional[datetime] = None,
) -> bool:
    """True when ``message`` matches the expected values and is valid at ``time``."""
    if message is None or not message.address:
        return False
    if message.version != "1":
        return False
    if address is not None and message.address.lower() != address.lower():
        return False
    if domain is not None and message.domain != domain:
        return False
    if nonce is not None and message.nonce != nonce:
        return False
    if scheme is not None and message.scheme != scheme:
        return False

    now = _aware(time or utc_now())
    if message.expiration_time and now >= _aware(message.expiration_time):
        return False
    if message.not_before and now < _aware(message.not_before):
        return False
    return True


def check_message(parsed: ParsedMessage) -> Message:
    """Run a parsed message through the same rules ``create_message`` applies.

    Raises:
        pydantic.ValidationError: a required field is missing.
        InvalidMessageFieldError, InvalidAddressError
    """
    message = Message.model_validate(parsed.fields())
    validate_fields(message)
    normalize_address(message.address)
    return message
