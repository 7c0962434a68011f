"""
siwe-message — EIP-4361 "Sign-In with Ethereum" messages for Python.

Builds the canonical message text from a typed record and parses it back.
"""

from siwe_message.serializer import create_message
from siwe_message.parser import parse_message
from siwe_message.validate import validate_message, check_message
from siwe_message.nonce import generate_nonce
from siwe_message.address import normalize_address
from siwe_message.uri import is_uri
from siwe_message.models.message import Message, ParsedMessage
from siwe_message.errors import SiweError, InvalidMessageFieldError, InvalidAddressError

__version__ = "0.1.0"
__all__ = [
    "create_message",
    "parse_message",
    "validate_message",
    "check_message",
    "generate_nonce",
    "normalize_address",
    "is_uri",
    "Message",
    "ParsedMessage",
    "SiweError",
    "InvalidMessageFieldError",
    "InvalidAddressError",
]
