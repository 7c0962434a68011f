"""
EIP-4361 message serializer.

    example.com wants you to sign in with your Ethereum account:
    0xA0Cf798816D4b9b9866b5330EEa46a18382f251e

    URI: https://example.com/path
    Version: 1
    Chain ID: 1
    Nonce: foobarbaz
    Issued At: 2023-01-01T00:00:00.000Z

See https://eips.ethereum.org/EIPS/eip-4361
"""

import logging
import math
import re
from datetime import datetime
from typing import Any, Callable, Mapping, Union

from siwe_message.address import normalize_address
from siwe_message.errors import InvalidMessageFieldError
from siwe_message.models.message import Message
from siwe_message.timestamps import format_timestamp, utc_now
from siwe_message.uri import is_uri

logger = logging.getLogger("siwe_message.serializer")

DOMAIN_RE = re.compile(r"(?:(?:(?!-)[a-zA-Z0-9-]{1,63}(?<!-)\.)+[a-zA-Z]{2,63})")
NONCE_RE = re.compile(r"[a-zA-Z0-9]{8,}")
SCHEME_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")

HEADER_SUFFIX = " wants you to sign in with your Ethereum account:"

RFC3986 = "- See https://www.rfc-editor.org/rfc/rfc3986"

Clock = Callable[[], datetime]


def _invalid(field: str, value: Any, *reason: str) -> InvalidMessageFieldError:
    logger.debug("rejected %s: %r", field, value)
    return InvalidMessageFieldError(field, value, list(reason))


def _is_chain_id(value: Union[int, float]) -> bool:
    return math.isfinite(value) and value == math.floor(value) and value >= 0


def validate_fields(message: Message) -> None:
    """Apply the field rules in order; the first failure is raised."""
    if not _is_chain_id(message.chain_id):
        raise _invalid(
            "chainId", message.chain_id,
            "- Chain ID must be a EIP-155 chain ID.",
            "- See https://eips.ethereum.org/EIPS/eip-155",
        )
    if not DOMAIN_RE.fullmatch(message.domain):
        raise _invalid("domain", message.domain, "- Domain must be an RFC 3986 authority.", RFC3986)
    if not NONCE_RE.fullmatch(message.nonce):
        raise _invalid(
            "nonce", message.nonce,
            "- Nonce must be at least 8 characters.",
            "- Nonce must be alphanumeric.",
        )
    if not is_uri(message.uri):
        raise _invalid(
            "uri", message.uri,
            "- URI must be a RFC 3986 URI referring to the resource that is the subject of the signing.",
            RFC3986,
        )
    if message.version != "1":
        raise _invalid("version", message.version, "- Version must be '1'.")

    if message.scheme and not SCHEME_RE.fullmatch(message.scheme):
        raise _invalid(
            "scheme", message.scheme,
            "- Scheme must be an RFC 3986 URI scheme.",
            "- See https://www.rfc-editor.org/rfc/rfc3986#section-3.1",
        )
    if message.statement is not None and "\n" in message.statement:
        raise _invalid("statement", message.statement, "- Statement must not include '\\n'.")
    for index, resource in enumerate(message.resources or ()):
        if not is_uri(resource):
            raise _invalid(
                "resources", resource,
                f"- Resource {index} is not a RFC 3986 URI.",
                "- Every resource must be a RFC 3986 URI.",
                RFC3986,
            )


def create_message(
    message: Union[Message, Mapping[str, Any]],
    *,
    clock: Clock = utc_now,
) -> str:
    """Validate ``message`` and render its EIP-4361 text.

    ``issued_at`` defaults to ``clock()`` when the message leaves it out.

    Raises:
        InvalidMessageFieldError: a field breaks its rule.
        InvalidAddressError: ``address`` is not a 20-byte hex address.
    """
    if not isinstance(message, Message):
        message = Message.model_validate(message)

    validate_fields(message)
    address = normalize_address(message.address)
    issued_at = message.issued_at if message.issued_at is not None else clock()

    origin = f"{message.scheme}://{message.domain}" if message.scheme else message.domain
    statement = f"\n{message.statement}\n" if message.statement else ""
    prefix = f"{origin}{HEADER_SUFFIX}\n{address}\n{statement}"

    chain_id = int(message.chain_id)
    suffix = (
        f"URI: {message.uri}\nVersion: {message.version}\nChain ID: {chain_id}\n"
        f"Nonce: {message.nonce}\nIssued At: {format_timestamp(issued_at)}"
    )
    if message.expiration_time:
        suffix += f"\nExpiration Time: {format_timestamp(message.expiration_time)}"
    if message.not_before:
        suffix += f"\nNot Before: {format_timestamp(message.not_before)}"
    if message.request_id:
        suffix += f"\nRequest ID: {message.request_id}"
    if message.resources is not None:
        suffix += "\nResources:" + "".join(f"\n- {r}" for r in message.resources)

    return f"{prefix}\n{suffix}"
